"""Constrained combinators - retry and selection policies over strategies.

Every filtering combinator here enforces an explicit attempt budget. When
the budget runs out the draw fails with ExhaustedRetries instead of
returning an unfiltered value, so nested filters compound: a filter with
budget A over a strategy that itself filters with budget B may perform up
to A * B inner draws.

Hypothesis starts every run with the simplest example, where each attempt
draws the same simplest value. When all rejected attempts are identical,
one extra marker integer is drawn: it is only pinned to 0 in that simplest
example, which is then discarded with reject() so generation moves on to
varied data. A non-zero marker means the strategy really is constant and
ExhaustedRetries is raised.
"""

import logging
from typing import Any, Callable, Sequence, Sized

from hypothesis import reject
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from degenerate.errors import ExhaustedRetries, InvalidArgument

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 100

_MARKER = st.integers(min_value=0, max_value=2**32)


@st.composite
def _retry_until(
    draw: Callable[[SearchStrategy], Any],
    strategy: SearchStrategy,
    predicate: Callable[[Any], bool],
    max_attempts: int,
) -> Any:
    first = None
    varied = False
    for attempt in range(max_attempts):
        value = draw(strategy)
        if predicate(value):
            return value
        if attempt == 0:
            first = value
        elif not varied and value != first:
            varied = True

    if not varied and draw(_MARKER) == 0:
        reject()

    logger.debug(
        "Exhausted %d attempts for predicate %s",
        max_attempts,
        getattr(predicate, "__name__", predicate),
    )
    raise ExhaustedRetries(strategy, predicate, max_attempts)


def such_that(
    strategy: SearchStrategy,
    predicate: Callable[[Any], bool],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> SearchStrategy:
    """Draw from a strategy until the predicate holds.

    Args:
        strategy: The strategy to draw candidates from
        predicate: Acceptance test for a candidate
        max_attempts: Number of candidates drawn before giving up

    Returns:
        A strategy producing the first accepted candidate

    Raises:
        InvalidArgument: If max_attempts is less than 1
    """
    if max_attempts < 1:
        raise InvalidArgument(f"max_attempts must be at least 1, got {max_attempts}")
    return _retry_until(strategy, predicate, max_attempts)


def _is_not_empty(value: Sized) -> bool:
    return len(value) > 0


def not_empty(
    strategy: SearchStrategy,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> SearchStrategy:
    """Draw from a strategy of strings or sequences until the value is non-empty."""
    return such_that(strategy, _is_not_empty, max_attempts)


def one_of(strategies: Sequence[SearchStrategy]) -> SearchStrategy:
    """Choose uniformly among strategies, then draw from the chosen one.

    Raises:
        InvalidArgument: If no strategies are given
    """
    strategies = list(strategies)
    if not strategies:
        raise InvalidArgument("one_of requires at least one strategy")
    return st.one_of(*strategies)
