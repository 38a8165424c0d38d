"""Combinators - the building blocks every domain generator is assembled from."""

from degenerate.combinators.constrained import (
    DEFAULT_MAX_ATTEMPTS,
    not_empty,
    one_of,
    such_that,
)
from degenerate.combinators.spec import (
    GeneratorSpec,
    KeyKind,
    SpecKey,
    SpecValue,
    ValueKind,
    optional_key,
    required_key,
)
from degenerate.combinators.structural import map_of, maybe_entry, vector_of

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "such_that",
    "not_empty",
    "one_of",
    "GeneratorSpec",
    "KeyKind",
    "SpecKey",
    "SpecValue",
    "ValueKind",
    "optional_key",
    "required_key",
    "map_of",
    "maybe_entry",
    "vector_of",
]
