"""Arbitrary nested structures and their JSON rendering."""

import json
from typing import Any

from hypothesis import strategies as st

from degenerate.combinators.constrained import such_that
from degenerate.errors import SerializationFailure

MAX_SAFE_INT = 2**53 - 1
MIN_SAFE_INT = -(2**53 - 1)

scalars = (
    st.none()
    | st.booleans()
    | st.integers(min_value=MIN_SAFE_INT, max_value=MAX_SAFE_INT)
    | st.floats(allow_nan=False, allow_infinity=False)
    | st.text(max_size=100)
)


def _containers(children):
    return st.dictionaries(st.text(max_size=20), children, max_size=10) | st.lists(
        children, max_size=10
    )


# The root is always a dict or a list; scalars only appear inside.
any_structure = _containers(st.recursive(scalars, _containers, max_leaves=50))


def _is_dict(value: Any) -> bool:
    return isinstance(value, dict)


any_map = such_that(any_structure, _is_dict, 20)


def serialize(value: Any) -> str:
    """Render a structure as JSON text.

    Raises:
        SerializationFailure: If the value cannot be encoded
    """
    try:
        return json.dumps(value, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationFailure(f"Cannot encode value as JSON: {e}") from e


json_document = any_structure.map(serialize)
