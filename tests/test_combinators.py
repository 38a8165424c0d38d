"""Tests for the combinators module."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from degenerate.combinators import (
    GeneratorSpec,
    KeyKind,
    ValueKind,
    map_of,
    maybe_entry,
    not_empty,
    one_of,
    optional_key,
    such_that,
    vector_of,
)
from degenerate.errors import ExhaustedRetries, InvalidArgument
from degenerate.generators.base import sample


def _never(value):
    return False


class TestSuchThat:
    """Tests for such_that."""

    @given(such_that(st.integers(0, 100), lambda v: v % 2 == 0))
    def test_values_satisfy_predicate(self, value):
        assert value % 2 == 0

    @given(such_that(st.integers(0, 100), lambda v: v > 0))
    def test_predicate_rejecting_smallest_value(self, value):
        assert 0 < value <= 100

    def test_sampling_with_predicate_rejecting_smallest_value(self):
        values = sample(such_that(st.integers(0, 100), lambda v: v % 2 == 1), count=20, seed=1)
        assert values
        assert all(value % 2 == 1 for value in values)

    @given(st.data())
    def test_always_false_predicate_exhausts_after_budget(self, data):
        calls = []
        counted = st.integers().map(lambda v: calls.append(v) or v)
        strategy = such_that(counted, _never, 5)

        with pytest.raises(ExhaustedRetries) as excinfo:
            data.draw(strategy)

        assert len(calls) == 5
        assert excinfo.value.attempts == 5
        assert excinfo.value.predicate is _never
        assert "_never" in str(excinfo.value)

    def test_exhaustion_propagates_through_sampling(self):
        with pytest.raises(ExhaustedRetries):
            sample(such_that(st.integers(), _never, 3), count=5, seed=7)

    def test_budget_must_be_positive(self):
        with pytest.raises(InvalidArgument):
            such_that(st.integers(), _never, 0)


class TestNotEmpty:
    """Tests for not_empty."""

    @given(not_empty(st.sampled_from([[1], [], [2, 3], []])))
    def test_lists_are_not_empty(self, value):
        assert len(value) > 0

    @given(not_empty(st.sampled_from(["x", "", "yz"])))
    def test_strings_are_not_empty(self, value):
        assert value != ""

    def test_empty_values_are_retried(self):
        values = sample(not_empty(st.sampled_from(["x", "", "yz"])), count=30, seed=2)
        assert "" not in values

    @given(not_empty(st.text(max_size=3)))
    def test_text_starting_empty(self, value):
        assert 1 <= len(value) <= 3

    @given(st.data())
    def test_always_empty_exhausts(self, data):
        with pytest.raises(ExhaustedRetries):
            data.draw(not_empty(st.just(""), max_attempts=4))

    def test_always_empty_exhausts_when_sampling(self):
        with pytest.raises(ExhaustedRetries):
            sample(not_empty(st.just(""), max_attempts=3), count=5, seed=1)


class TestOneOf:
    """Tests for one_of."""

    def test_empty_list_is_rejected(self):
        with pytest.raises(InvalidArgument):
            one_of([])

    @given(one_of([st.just("a"), st.just("b")]))
    def test_draws_from_candidates(self, value):
        assert value in {"a", "b"}

    def test_every_candidate_is_selected(self):
        values = sample(one_of([st.just("a"), st.just("b"), st.just("c")]), count=50, seed=3)
        assert set(values) == {"a", "b", "c"}


class TestGeneratorSpec:
    """Tests for GeneratorSpec construction."""

    def test_plain_keys_are_required(self):
        spec = GeneratorSpec.from_mapping({"a": st.integers(), optional_key("b"): st.text()})

        kinds = {key.name: key.kind for key in spec.keys()}
        assert kinds == {"a": KeyKind.REQUIRED, "b": KeyKind.OPTIONAL}
        assert spec.required_names() == {"a"}
        assert spec.optional_names() == {"b"}
        assert len(spec) == 2

    def test_nested_mappings_become_nested_specs(self):
        spec = GeneratorSpec.from_mapping({"user": {"name": st.text()}, "id": st.integers()})

        values = dict((key.name, value) for key, value in spec)
        assert values["user"].kind == ValueKind.NESTED
        assert isinstance(values["user"].spec, GeneratorSpec)
        assert values["id"].kind == ValueKind.LEAF

    def test_non_strategy_value_is_rejected(self):
        with pytest.raises(InvalidArgument):
            GeneratorSpec.from_mapping({"a": 5})

    def test_non_mapping_spec_is_rejected(self):
        with pytest.raises(InvalidArgument):
            GeneratorSpec.coerce([("a", st.integers())])

    def test_same_key_optional_and_required_is_rejected(self):
        with pytest.raises(InvalidArgument):
            GeneratorSpec.from_mapping({"a": st.integers(), optional_key("a"): st.integers()})

    def test_optional_key_equality(self):
        assert optional_key("a") == optional_key("a")
        assert optional_key("a").is_optional


class TestVectorOf:
    """Tests for vector_of."""

    @given(vector_of(st.integers(), 3, 3))
    def test_fixed_length(self, value):
        assert len(value) == 3

    @given(vector_of(st.booleans(), 1, 4))
    def test_bounded_length(self, value):
        assert 1 <= len(value) <= 4

    @given(vector_of({"id": st.integers(), optional_key("tag"): st.text()}, 1, 3))
    def test_mapping_elements_are_expanded(self, value):
        assert 1 <= len(value) <= 3
        for item in value:
            assert "id" in item
            assert set(item) <= {"id", "tag"}

    def test_inverted_range_is_rejected(self):
        with pytest.raises(InvalidArgument):
            vector_of(st.integers(), 4, 2)

    def test_negative_length_is_rejected(self):
        with pytest.raises(InvalidArgument):
            vector_of(st.integers(), -1, 2)

    def test_unsupported_element_is_rejected(self):
        with pytest.raises(InvalidArgument):
            vector_of(42, 1, 2)


class TestMapOf:
    """Tests for map_of."""

    def test_empty_spec_yields_empty_dict(self):
        values = sample(map_of({}), count=20, seed=1)
        assert values
        assert all(value == {} for value in values)

    @given(map_of({
        "a": st.integers(),
        optional_key("b"): st.integers(),
        optional_key("c"): st.text(),
    }))
    def test_key_set_is_bounded_by_spec(self, value):
        assert "a" in value
        assert set(value) <= {"a", "b", "c"}

    def test_optional_key_is_sometimes_present(self):
        strategy = map_of({"a": st.integers(), optional_key("b"): st.integers()})
        values = sample(strategy, count=100, seed=1234)

        with_b = sum(1 for value in values if "b" in value)
        assert len(values) >= 50
        assert 0 < with_b < len(values)

    @given(map_of({"user": {"name": st.text(), optional_key("age"): st.integers(0, 120)}}))
    def test_nested_specs(self, value):
        assert set(value) == {"user"}
        assert "name" in value["user"]
        if "age" in value["user"]:
            assert 0 <= value["user"]["age"] <= 120

    @given(map_of(GeneratorSpec.from_mapping({"n": st.just(1)})))
    def test_accepts_built_spec(self, value):
        assert value == {"n": 1}

    def test_non_mapping_spec_is_rejected(self):
        with pytest.raises(InvalidArgument):
            map_of([("a", 1)])

    @given(maybe_entry("k", st.just(1)))
    def test_maybe_entry_shapes(self, value):
        assert value in ((), (("k", 1),))
