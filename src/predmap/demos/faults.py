"""Exception classification driven by ``first_match``.

Two pieces:

- ``FAULT_TYPES``: a closed registry from fault name to a constructor
  taking the message. ``raise_fault`` looks names up here; there is no
  import-by-name or ``getattr`` on builtins.
- ``ExceptionFilter``: a ``PredicateFunctionMap`` from exception-shape tests
  to message builders. The first matching test wins, and unrecognised
  shapes get one default message.

Usage::

    exception_filter = ExceptionFilter()
    try:
        raise_fault("ValueError", "bad input")
    except Exception as exc:
        print(exception_filter.respond(exc))
"""

from collections.abc import Callable
from typing import NoReturn

from predmap.maps.function_map import PredicateFunctionMap


class UnrecognisedFault(LookupError):  # noqa: N818 — mirrors the builtin names it sits beside
    """Raised by ``raise_fault`` when the name has no registered constructor."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No fault type is registered under {name!r}")


type FaultFactory = Callable[[str], BaseException]

FAULT_TYPES: dict[str, FaultFactory] = {
    "ValueError": ValueError,
    "NotImplementedError": NotImplementedError,
    "AttributeError": AttributeError,
}

DEFAULT_MESSAGE = "Unable to handle the exception that was raised."


def build_fault(name: str, message: str) -> BaseException:
    """Construct the registered fault *name* with *message*."""
    try:
        factory = FAULT_TYPES[name]
    except KeyError:
        raise UnrecognisedFault(name) from None
    return factory(message)


def raise_fault(name: str, message: str) -> NoReturn:
    """Raise the registered fault *name*, or ``UnrecognisedFault``."""
    raise build_fault(name, message)


# ---------------------------------------------------------------------------
# Shape tests
# ---------------------------------------------------------------------------


def is_value_error(exc: BaseException) -> bool:
    return isinstance(exc, ValueError)


def is_not_implemented(exc: BaseException) -> bool:
    """Permanently unsupported: no "yet" in the message."""
    return isinstance(exc, NotImplementedError) and "yet" not in str(exc)


def is_not_implemented_yet(exc: BaseException) -> bool:
    return isinstance(exc, NotImplementedError) and "yet" in str(exc)


def is_missing_attribute(exc: BaseException) -> bool:
    return isinstance(exc, AttributeError)


def is_unrecognised_fault(exc: BaseException) -> bool:
    return isinstance(exc, UnrecognisedFault)


HANDLED_DESCRIPTIONS = (
    "These fault types have special handling in the exception filter:",
    "ValueError",
    "NotImplementedError without the word 'yet' in the message",
    "NotImplementedError with the word 'yet' in the message",
    "AttributeError",
    "Any other name raises UnrecognisedFault, which is reported as well.",
)


class ExceptionFilter:
    """Turns a caught exception into a human-readable response."""

    __slots__ = ("_rules",)

    def __init__(self) -> None:
        self._rules = self.create_rules()

    @staticmethod
    def create_rules() -> PredicateFunctionMap[BaseException, str]:
        return PredicateFunctionMap.from_pairs(
            [
                (is_value_error, lambda exc: f"An argument was invalid: {exc}"),
                (is_not_implemented, lambda exc: f"That operation is not supported: {exc}"),
                (is_not_implemented_yet, lambda exc: f"That operation is not available yet: {exc}"),
                (is_missing_attribute, lambda exc: f"Something expected was missing: {exc}"),
                (is_unrecognised_fault, lambda exc: f"The fault name was not recognised: {exc}"),
            ],
            default=DEFAULT_MESSAGE,
        )

    @property
    def rules(self) -> PredicateFunctionMap[BaseException, str]:
        return self._rules

    def respond(self, exc: BaseException) -> str:
        """Message for the first shape *exc* matches, or the rules' default."""
        return self._rules.first_match(exc)

    @staticmethod
    def handled_descriptions() -> tuple[str, ...]:
        return HANDLED_DESCRIPTIONS
