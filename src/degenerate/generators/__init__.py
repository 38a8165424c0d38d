"""Generators module - domain generators built from the combinators.

Every public generator is either a strategy value (host_name, email, ...)
or a function of keyword options returning a strategy (date, string_gen,
custom_email, host_name_label).
"""

from degenerate.generators.base import GeneratedDataset, GeneratedRecord, Sampler, sample
from degenerate.generators.countries import (
    COUNTRY_CODES_2,
    COUNTRY_CODES_3,
    country_code_2,
    country_code_3,
)
from degenerate.generators.network import (
    EmailOptions,
    custom_email,
    email,
    email_local_part,
    host_name,
    host_name_char,
    host_name_label,
    url,
)
from degenerate.generators.numeric import currency, finite_double, phone_number
from degenerate.generators.registry import GeneratorRegistry, get_global_generator_registry
from degenerate.generators.strings import StringOptions, char_safe, string_gen
from degenerate.generators.structured import any_map, any_structure, json_document, serialize
from degenerate.generators.temporal import DateFormatter, DateOptions, date

__all__ = [
    "GeneratedDataset",
    "GeneratedRecord",
    "Sampler",
    "sample",
    "COUNTRY_CODES_2",
    "COUNTRY_CODES_3",
    "country_code_2",
    "country_code_3",
    "EmailOptions",
    "custom_email",
    "email",
    "email_local_part",
    "host_name",
    "host_name_char",
    "host_name_label",
    "url",
    "currency",
    "finite_double",
    "phone_number",
    "GeneratorRegistry",
    "get_global_generator_registry",
    "StringOptions",
    "char_safe",
    "string_gen",
    "any_map",
    "any_structure",
    "json_document",
    "serialize",
    "DateFormatter",
    "DateOptions",
    "date",
]
