"""Tests for the domain generators."""

import json
import math
import re
import string

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from degenerate.errors import InvalidArgument, SerializationFailure
from degenerate.generators import (
    COUNTRY_CODES_2,
    COUNTRY_CODES_3,
    DateFormatter,
    DateOptions,
    EmailOptions,
    StringOptions,
    any_map,
    char_safe,
    country_code_2,
    country_code_3,
    currency,
    custom_email,
    date,
    email,
    email_local_part,
    finite_double,
    host_name,
    host_name_char,
    host_name_label,
    json_document,
    phone_number,
    serialize,
    string_gen,
    url,
)
from degenerate.generators.countries import COUNTRY_CODES_2_SOURCE, COUNTRY_CODES_3_SOURCE
from degenerate.generators.network import EMAIL_SPECIALS
from degenerate.generators.numeric import (
    PHONE_NUMBER_MAX,
    PHONE_NUMBER_MIN,
    format_phone_number,
    round_currency,
)
from degenerate.generators.strings import PRACTICAL_MAX_LENGTH

HOST_NAME_CHARS = set(string.ascii_lowercase + string.digits + "-.")


def assert_host_name(value):
    assert 0 < len(value) <= 253
    assert value[0] not in string.digits + "-."
    assert not value.endswith("-")
    assert set(value) <= HOST_NAME_CHARS
    for label in value.split("."):
        assert 1 <= len(label) <= 63
        assert label[0] not in string.digits + "-"
        assert not label.endswith("-")


def assert_local_part(value):
    groups = value.split(".")
    assert 1 <= len(groups) <= 5
    for group in groups:
        assert 1 <= len(group) <= 10
        assert not set(group) & EMAIL_SPECIALS
        assert all(33 <= ord(c) <= 126 for c in group)


class TestHostNames:
    """Tests for host name generators."""

    @given(host_name_char)
    def test_host_name_char(self, value):
        assert len(value) == 1
        assert value in string.ascii_lowercase + string.digits + "-"

    @given(host_name_label(1, 5))
    def test_label(self, value):
        assert 1 <= len(value) <= 5
        assert value[0] not in string.digits + "-."
        assert not value.endswith("-")

    def test_label_minimum_must_be_positive(self):
        with pytest.raises(InvalidArgument):
            host_name_label(0, 5)

    @given(host_name)
    def test_host_name(self, value):
        assert_host_name(value)


class TestEmails:
    """Tests for email generators."""

    @given(email_local_part)
    def test_local_part(self, value):
        assert_local_part(value)

    @given(email)
    def test_email(self, value):
        local, host = value.rsplit("@", 1)
        assert_local_part(local)
        assert_host_name(host)

    @given(custom_email(tlds=["com", "org"]))
    def test_custom_email_appends_tld(self, value):
        assert value.endswith(".com") or value.endswith(".org")
        local, host = value.rsplit("@", 1)
        assert_local_part(local)

    def test_custom_email_without_tlds_is_email(self):
        assert custom_email() is email
        assert custom_email(EmailOptions()) is email


class TestUrls:
    """Tests for the url generator."""

    @given(url)
    def test_url(self, value):
        scheme, host = value.split("://", 1)
        assert scheme in ("http", "https")
        assert_host_name(host)


class TestNumeric:
    """Tests for numeric generators."""

    @given(finite_double)
    def test_finite_double(self, value):
        assert math.isfinite(value)

    @given(currency)
    def test_currency(self, value):
        assert value >= 1.0
        assert math.isfinite(value)
        assert float(f"{value:.2f}") == value

    @given(phone_number)
    def test_phone_number_is_zero_prefixed_integer(self, value):
        assert value.startswith("0")
        assert value[1:].isdigit()
        assert len(value) == 9
        assert 70000000 <= int(value[1:]) <= 80000000

    def test_phone_number_boundaries(self):
        assert format_phone_number(PHONE_NUMBER_MIN) == "070000000"
        assert format_phone_number(PHONE_NUMBER_MAX) == "080000000"

    def test_round_currency(self):
        assert round_currency(12.3456) == 12.35
        assert round_currency(round_currency(7.891)) == 7.89


class TestStrings:
    """Tests for string_gen."""

    @given(string_gen(fixed_length=22))
    def test_fixed_length(self, value):
        assert len(value) == 22

    @given(string_gen(max_length=5))
    def test_max_length(self, value):
        assert len(value) <= 5

    @given(string_gen(min_length=2, max_length=4))
    def test_bounded(self, value):
        assert 2 <= len(value) <= 4

    @given(string_gen(min_length=3))
    def test_min_length_only(self, value):
        assert 3 <= len(value) <= PRACTICAL_MAX_LENGTH

    @given(string_gen(StringOptions(fixed_length=4, min_length=10, max_length=20)))
    def test_fixed_length_takes_precedence(self, value):
        assert len(value) == 4

    @given(string_gen(char_gen=st.sampled_from("ab"), max_length=10))
    def test_custom_char_gen(self, value):
        assert set(value) <= {"a", "b"}

    @given(string_gen(char_gen=char_safe, max_length=20))
    def test_char_safe(self, value):
        for c in value:
            code = ord(c)
            assert 32 <= code <= 126 or 160 <= code <= 0xFFFF
            assert not 0xD800 <= code <= 0xDFFF

    def test_inverted_range_is_rejected(self):
        with pytest.raises(InvalidArgument):
            string_gen(min_length=5, max_length=2)

    def test_negative_length_is_rejected(self):
        with pytest.raises(InvalidArgument):
            string_gen(fixed_length=-1)

    def test_options_resolve_ranges(self):
        assert StringOptions().length_range() == (0, None)
        assert StringOptions(max_length=7).length_range() == (0, 7)
        assert StringOptions(min_length=7).length_range() == (7, PRACTICAL_MAX_LENGTH)


class TestStructured:
    """Tests for JSON and structure generators."""

    @given(json_document)
    @settings(max_examples=50)
    def test_json_parses_to_container(self, value):
        parsed = json.loads(value)
        assert isinstance(parsed, (dict, list))

    @given(any_map)
    @settings(max_examples=50)
    def test_any_map_is_dict(self, value):
        assert isinstance(value, dict)

    def test_serialize_failure_is_reported(self):
        with pytest.raises(SerializationFailure):
            serialize({"value": object()})

    def test_serialize_rejects_nan(self):
        with pytest.raises(SerializationFailure):
            serialize([float("nan")])


class TestDates:
    """Tests for the date generator and formatter."""

    def test_formatter_default(self):
        assert DateFormatter().format(0) == "1970-01-01T00:00:00Z"

    def test_formatter_named_formats(self):
        formatter = DateFormatter()
        assert formatter.format(1500, "date_time") == "1970-01-01T00:00:01.500Z"
        assert formatter.format(0, "date") == "1970-01-01"
        assert formatter.format(0, "basic_date") == "19700101"
        assert formatter.format(0, "rfc822") == "Thu, 01 Jan 1970 00:00:00 +0000"

    def test_formatter_custom_table(self):
        formatter = DateFormatter(formats={"year": "%Y"})
        assert formatter.format(0, "year") == "1970"

    def test_formatter_check(self):
        formatter = DateFormatter()
        formatter.check("date")
        with pytest.raises(InvalidArgument):
            formatter.check("nope")

    def test_unknown_format_is_rejected(self):
        with pytest.raises(InvalidArgument):
            date(format="no_such_format")

    def test_since_after_until_is_rejected(self):
        with pytest.raises(InvalidArgument):
            date(since=10, until=5)

    @given(date(since=0, until=86_400_000, format="date"))
    def test_bounded_dates(self, value):
        assert value in ("1970-01-01", "1970-01-02")

    @given(date(DateOptions(since=946_684_800_000)))
    def test_default_format(self, value):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", value)
        assert value >= "2000-01-01T00:00:00Z"


class TestCountryCodes:
    """Tests for country code generators."""

    @given(country_code_2)
    def test_alpha_2(self, value):
        assert value in COUNTRY_CODES_2
        assert len(value) == 2
        assert value.isupper()

    @given(country_code_3)
    def test_alpha_3(self, value):
        assert value in COUNTRY_CODES_3
        assert len(value) == 3

    def test_alpha_2_source_contains_duplicates(self):
        assert len(COUNTRY_CODES_2_SOURCE) > len(COUNTRY_CODES_2)
        assert COUNTRY_CODES_2_SOURCE.count("UM") > 1
        assert COUNTRY_CODES_2_SOURCE.count("AQ") > 1

    def test_sampled_codes_are_unique(self):
        assert len(set(COUNTRY_CODES_2)) == len(COUNTRY_CODES_2)
        assert set(COUNTRY_CODES_2) == set(COUNTRY_CODES_2_SOURCE)
        assert COUNTRY_CODES_3 == COUNTRY_CODES_3_SOURCE
