"""Configurable string generation."""

from pydantic import BaseModel, ConfigDict, Field
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from degenerate.combinators.structural import check_length_range

# Upper bound used when only a minimum length is requested.
PRACTICAL_MAX_LENGTH = 10_000

# Basic multilingual plane without control characters or surrogates,
# i.e. 32-126 and 160-0xFFFF.
char_safe = st.characters(
    min_codepoint=32,
    max_codepoint=0xFFFF,
    exclude_categories=("Cc", "Cs"),
)


class StringOptions(BaseModel):
    """Options for string_gen.

    Precedence: fixed_length, then min_length with max_length, then
    max_length alone, then min_length alone.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    fixed_length: int | None = Field(default=None, description="Exact string length")
    min_length: int | None = Field(default=None, description="Minimum string length")
    max_length: int | None = Field(default=None, description="Maximum string length")
    char_gen: SearchStrategy | None = Field(
        default=None,
        description="Character strategy, defaults to any non-surrogate character",
    )

    def length_range(self) -> tuple[int, int | None]:
        """Resolve the options into an inclusive (min, max) length range."""
        if self.fixed_length is not None:
            return self.fixed_length, self.fixed_length
        if self.min_length is not None and self.max_length is not None:
            return self.min_length, self.max_length
        if self.max_length is not None:
            return 0, self.max_length
        if self.min_length is not None:
            return self.min_length, max(self.min_length, PRACTICAL_MAX_LENGTH)
        return 0, None


def string_gen(options: StringOptions | None = None, **overrides) -> SearchStrategy:
    """Build a string strategy from StringOptions or keyword overrides.

    Examples:
        string_gen()                                  any string
        string_gen(fixed_length=22)                   strings of length 22
        string_gen(max_length=50)                     0 to 50 characters
        string_gen(min_length=5, max_length=50)       5 to 50 characters
        string_gen(char_gen=char_safe, min_length=1)  printable, non-empty

    Raises:
        InvalidArgument: If a length is negative or the range is inverted
    """
    if options is None:
        options = StringOptions(**overrides)
    elif overrides:
        options = options.model_copy(update=overrides)

    min_len, max_len = options.length_range()
    check_length_range(min_len, max_len)

    char_gen = options.char_gen if options.char_gen is not None else st.characters()
    return st.lists(char_gen, min_size=min_len, max_size=max_len).map("".join)
