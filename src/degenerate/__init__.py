"""
degenerate - Useful generators for property-based testing.

Domain generators (host names, emails, URLs, JSON, currency, phone numbers,
dates, country codes, records with optional fields) built on a few
Hypothesis strategy combinators.
"""

__version__ = "0.1.14"

from degenerate.errors import (
    DegenerateError,
    ExhaustedRetries,
    InvalidArgument,
    SerializationFailure,
)
from degenerate.combinators import (
    GeneratorSpec,
    map_of,
    not_empty,
    one_of,
    optional_key,
    such_that,
    vector_of,
)
from degenerate.generators import (
    DateFormatter,
    DateOptions,
    EmailOptions,
    Sampler,
    StringOptions,
    any_map,
    any_structure,
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
    sample,
    string_gen,
    url,
)

json = json_document

__all__ = [
    "DegenerateError",
    "ExhaustedRetries",
    "InvalidArgument",
    "SerializationFailure",
    "GeneratorSpec",
    "map_of",
    "not_empty",
    "one_of",
    "optional_key",
    "such_that",
    "vector_of",
    "DateFormatter",
    "DateOptions",
    "EmailOptions",
    "Sampler",
    "StringOptions",
    "any_map",
    "any_structure",
    "char_safe",
    "country_code_2",
    "country_code_3",
    "currency",
    "custom_email",
    "date",
    "email",
    "email_local_part",
    "finite_double",
    "host_name",
    "host_name_char",
    "host_name_label",
    "json",
    "json_document",
    "phone_number",
    "sample",
    "string_gen",
    "url",
]
