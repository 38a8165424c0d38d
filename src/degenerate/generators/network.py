"""Host name, email and URL generators.

Host names follow the RFC 952 shape (labels of a-z, 0-9 and '-', no leading
digit or hyphen, no trailing hyphen, at most 253 characters) without
checking reserved words or top-level domains. Email local parts follow
RFC 2822 dot-atoms; quoted strings are not generated.
"""

import string

from pydantic import BaseModel, ConfigDict, Field
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from degenerate.combinators.constrained import not_empty, one_of, such_that
from degenerate.combinators.structural import vector_of
from degenerate.errors import InvalidArgument

MAX_HOST_NAME_LENGTH = 253
MAX_LABEL_LENGTH = 63

HOST_NAME_ALPHABET = string.ascii_lowercase + string.digits + "-"
LABEL_FORBIDDEN_FIRST = frozenset(string.digits + "-.")

# RFC 2822 specials that must be quoted in a local part: " ( ) , . : ; < > @ [ \ ]
EMAIL_SPECIALS = frozenset(map(chr, (34, 40, 41, 44, 46, 58, 59, 60, 62, 64, 91, 92, 93)))
EMAIL_LOCAL_ALPHABET = "".join(
    chr(code) for code in range(33, 127) if chr(code) not in EMAIL_SPECIALS
)

URL_SCHEMES = ("http", "https")

host_name_char = st.sampled_from(HOST_NAME_ALPHABET)


def _is_valid_label(label: str) -> bool:
    return label[0] not in LABEL_FORBIDDEN_FIRST and not label.endswith("-")


def _fits_host_name_length(name: str) -> bool:
    return len(name) <= MAX_HOST_NAME_LENGTH


def host_name_label(minimum: int = 1, maximum: int = MAX_LABEL_LENGTH) -> SearchStrategy:
    """Generate a single host name label of minimum..maximum characters.

    Raises:
        InvalidArgument: If minimum is less than 1 or the range is inverted
    """
    if minimum < 1:
        raise InvalidArgument(f"Host name labels need at least 1 character, got {minimum}")
    return such_that(
        vector_of(host_name_char, minimum, maximum).map("".join),
        _is_valid_label,
    )


def _build_host_name() -> SearchStrategy:
    """Up to 100 outer attempts, each drawing 1-4 labels of up to 100 attempts."""
    labels = vector_of(host_name_label(1, MAX_LABEL_LENGTH), 1, 4)
    return not_empty(such_that(labels.map(".".join), _fits_host_name_length))


host_name = _build_host_name()

_email_group = vector_of(st.sampled_from(EMAIL_LOCAL_ALPHABET), 1, 10).map("".join)

email_local_part = vector_of(_email_group, 1, 5).map(".".join)

email = email_local_part.flatmap(
    lambda local: host_name.map(lambda host: f"{local}@{host}")
)


class EmailOptions(BaseModel):
    """Options for custom_email."""

    model_config = ConfigDict(frozen=True)

    tlds: list[str] = Field(
        default_factory=list,
        description="Top level domains, one of which is appended to the host",
    )


def custom_email(options: EmailOptions | None = None, **overrides) -> SearchStrategy:
    """An email strategy that appends one of the given top level domains.

    With no tlds this generates the same addresses as email.
    """
    if options is None:
        options = EmailOptions(**overrides)
    elif overrides:
        options = options.model_copy(update=overrides)

    if not options.tlds:
        return email

    suffixes = st.sampled_from(options.tlds).map(lambda tld: f".{tld}")
    return email.flatmap(lambda address: suffixes.map(lambda suffix: address + suffix))


url = one_of([st.just(scheme) for scheme in URL_SCHEMES]).flatmap(
    lambda scheme: host_name.map(lambda host: f"{scheme}://{host}")
)
