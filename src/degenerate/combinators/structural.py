"""Structural combinators - sequences and mappings built from sub-strategies."""

from typing import Any, Hashable, Iterable, Mapping

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from degenerate.combinators.constrained import one_of
from degenerate.combinators.spec import GeneratorSpec, SpecValue, ValueKind
from degenerate.errors import InvalidArgument

Entry = tuple[Hashable, Any]


def _as_strategy(element: "SearchStrategy | GeneratorSpec | Mapping[Any, Any]") -> SearchStrategy:
    if isinstance(element, SearchStrategy):
        return element
    if isinstance(element, (GeneratorSpec, Mapping)):
        return map_of(element)
    raise InvalidArgument(
        f"Expected a strategy or a mapping spec, got {type(element).__name__}"
    )


def check_length_range(min_len: int, max_len: int | None) -> None:
    """Validate an inclusive length range.

    Raises:
        InvalidArgument: If min_len is negative or greater than max_len
    """
    if min_len < 0:
        raise InvalidArgument(f"Minimum length must not be negative, got {min_len}")
    if max_len is not None and min_len > max_len:
        raise InvalidArgument(
            f"Minimum length {min_len} is greater than maximum length {max_len}"
        )


def vector_of(
    element: "SearchStrategy | GeneratorSpec | Mapping[Any, Any]",
    min_len: int = 0,
    max_len: int | None = None,
) -> SearchStrategy:
    """Generate lists of independently drawn elements.

    The length is drawn from [min_len, max_len] first, then exactly that
    many elements are drawn. A GeneratorSpec or plain mapping given as the
    element is expanded with map_of, so lists of records need no
    intermediate strategy.

    Args:
        element: Element strategy, or a spec describing a record
        min_len: Minimum list length (inclusive)
        max_len: Maximum list length (inclusive), None for unbounded

    Returns:
        A strategy producing lists
    """
    check_length_range(min_len, max_len)
    strategy = _as_strategy(element)

    if max_len is None:
        return st.lists(strategy, min_size=min_len)

    return st.integers(min_value=min_len, max_value=max_len).flatmap(
        lambda size: st.lists(strategy, min_size=size, max_size=size)
    )


def _entry(name: Hashable, strategy: SearchStrategy) -> SearchStrategy:
    return st.tuples(st.just(name), strategy).map(lambda pair: (pair,))


def maybe_entry(name: Hashable, strategy: SearchStrategy) -> SearchStrategy:
    """Either no entry at all, or a single (name, value) entry."""
    return one_of([st.just(()), _entry(name, strategy)])


def _merge(groups: Iterable[tuple[Entry, ...]]) -> dict[Hashable, Any]:
    return {name: value for group in groups for name, value in group}


def _value_strategy(value: SpecValue) -> SearchStrategy:
    if value.kind == ValueKind.NESTED:
        return map_of(value.spec)
    return value.strategy


def map_of(spec: "GeneratorSpec | Mapping[Any, Any]") -> SearchStrategy:
    """Generate dicts shaped by a spec.

    Required keys always appear. Each optional key is independently either
    left out or included with a freshly drawn value. Nested specs are
    expanded recursively into nested dicts. An empty spec always produces
    an empty dict.

    Args:
        spec: A GeneratorSpec, or a mapping accepted by GeneratorSpec.from_mapping

    Returns:
        A strategy producing dicts
    """
    spec = GeneratorSpec.coerce(spec)

    entries = []
    for key, value in spec:
        strategy = _value_strategy(value)
        if key.is_optional:
            entries.append(maybe_entry(key.name, strategy))
        else:
            entries.append(_entry(key.name, strategy))

    return st.tuples(*entries).map(_merge)
