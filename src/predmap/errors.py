"""predmap exception hierarchy.

Shared by every map variant, the fan-out helper, and the demos so callers
can catch one base type or the precise failure.
"""

from dataclasses import dataclass


class PredMapError(Exception):
    """Base for all predmap-specific errors."""


class ConfigurationError(PredMapError):
    """Raised when a ``MapConfig`` is constructed with invalid values."""


@dataclass(slots=True, eq=False)
class InvalidArgument(PredMapError, ValueError):  # noqa: N818 — named after the contract it enforces
    """A required predicate, value, or collection was missing or unusable.

    ``parameter`` names the offending argument so tests and callers can
    tell ``predicates`` from ``values`` without parsing the message.
    """

    parameter: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.parameter}: {self.detail}"
        return self.parameter


@dataclass(slots=True, eq=False)
class SizeMismatch(PredMapError, ValueError):  # noqa: N818
    """Parallel predicate and value collections had different lengths."""

    key_count: int
    value_count: int

    def __str__(self) -> str:
        return (
            f"Predicate and value collections differ in size: "
            f"{self.key_count} predicates, {self.value_count} values"
        )


@dataclass(slots=True, eq=False)
class IndexOutOfRange(PredMapError, IndexError):  # noqa: N818
    """An index-addressed operation received ``index < 0`` or ``index >= count``."""

    index: int
    count: int

    def __str__(self) -> str:
        if self.count == 0:
            return f"Index {self.index} is out of range for an empty map"
        return f"Index {self.index} is out of range (valid: 0..{self.count - 1})"
