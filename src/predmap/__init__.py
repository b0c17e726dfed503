"""predmap — predicate-indexed dispatch maps.

Associate predicates over a probe type with values, then resolve the first
match, every match, or just whether anything matches.

Basic usage::

    from predmap import PredicateMap

    rules = PredicateMap.from_pairs(
        {lambda i: i % 3 == 0: "fizz", lambda i: i % 5 == 0: "buzz"},
        default="",
    )
    rules.all_matches(15)   # ["fizz", "buzz"]
    rules.first_match(7)    # ""

Values that depend on the probe::

    from predmap import PredicateFunctionMap

    describe = PredicateFunctionMap(default="unknown")
    describe.add(lambda n: n < 0, lambda n: f"{n} is negative")
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "IndexOutOfRange",
    "InvalidArgument",
    "MapConfig",
    "PredMapError",
    "PredicateFunctionMap",
    "PredicateMap",
    "PredicateMapping",
    "SizeMismatch",
    "StrictPredicateMap",
]

# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "predmap.errors",
    "IndexOutOfRange": "predmap.errors",
    "InvalidArgument": "predmap.errors",
    "PredMapError": "predmap.errors",
    "SizeMismatch": "predmap.errors",
    "MapConfig": "predmap.config",
    "PredicateFunctionMap": "predmap.maps.function_map",
    "PredicateMap": "predmap.maps.predicate_map",
    "StrictPredicateMap": "predmap.maps.predicate_map",
    "PredicateMapping": "predmap.maps.protocol",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import predmap`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    value = getattr(importlib.import_module(module_path), name)
    globals()[name] = value
    return value
