"""Error taxonomy for generator construction and sampling."""

from typing import Any, Callable


class DegenerateError(Exception):
    """Base class for all errors raised by degenerate."""


class InvalidArgument(DegenerateError, ValueError):
    """Malformed combinator input, raised when a generator is built."""


class ExhaustedRetries(DegenerateError):
    """A predicate was never satisfied within its attempt budget."""

    def __init__(
        self,
        strategy: Any,
        predicate: Callable[[Any], bool],
        attempts: int,
    ):
        self.strategy = strategy
        self.predicate = predicate
        self.attempts = attempts
        name = getattr(predicate, "__name__", repr(predicate))
        super().__init__(
            f"Predicate {name} not satisfied after {attempts} attempts "
            f"drawing from {strategy!r}"
        )


class SerializationFailure(DegenerateError):
    """The serializer rejected a generated structure."""
