"""Date generation.

Dates are drawn as integer epoch milliseconds and rendered in UTC through a
DateFormatter, a table of named strftime patterns.
"""

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from degenerate.errors import InvalidArgument

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

DEFAULT_DATE_FORMAT = "date_time_no_ms"

DATE_FORMATS = {
    "date_time_no_ms": "%Y-%m-%dT%H:%M:%SZ",
    "date_time": "%Y-%m-%dT%H:%M:%S.{millis}Z",
    "date": "%Y-%m-%d",
    "basic_date": "%Y%m%d",
    "basic_date_time_no_ms": "%Y%m%dT%H%M%SZ",
    "hour_minute_second": "%H:%M:%S",
    "year_month": "%Y-%m",
    "rfc822": "%a, %d %b %Y %H:%M:%S +0000",
}


def now_millis() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def from_epoch_millis(millis: int) -> datetime:
    return EPOCH + timedelta(milliseconds=millis)


class DateFormatter(BaseModel):
    """Renders epoch milliseconds using a table of named formats."""

    model_config = ConfigDict(frozen=True)

    formats: dict[str, str] = Field(
        default_factory=lambda: dict(DATE_FORMATS),
        description="Format name to strftime pattern",
    )

    def check(self, name: str) -> None:
        if name not in self.formats:
            available = ", ".join(sorted(self.formats))
            raise InvalidArgument(f"Unknown date format '{name}'. Available: {available}")

    def pattern(self, name: str) -> str:
        self.check(name)
        return self.formats[name]

    def format(self, millis: int, name: str = DEFAULT_DATE_FORMAT) -> str:
        moment = from_epoch_millis(millis)
        pattern = self.pattern(name).replace("{millis}", f"{moment.microsecond // 1000:03d}")
        return moment.strftime(pattern)


class DateOptions(BaseModel):
    """Options for the date generator."""

    model_config = ConfigDict(frozen=True)

    since: int | None = Field(default=None, description="Earliest epoch millis, defaults to 0")
    until: int | None = Field(default=None, description="Latest epoch millis, defaults to now")
    format: str = Field(default=DEFAULT_DATE_FORMAT, description="Named date format")
    formatter: DateFormatter = Field(default_factory=DateFormatter)


def date(options: DateOptions | None = None, **overrides) -> SearchStrategy:
    """Generate formatted date strings between since and until (inclusive).

    "now" is read once, when the strategy is built.

    Raises:
        InvalidArgument: For an unknown format or since after until
    """
    if options is None:
        options = DateOptions(**overrides)
    elif overrides:
        options = options.model_copy(update=overrides)

    since = options.since if options.since is not None else 0
    until = options.until if options.until is not None else now_millis()
    if since > until:
        raise InvalidArgument(f"since ({since}) is after until ({until})")

    formatter = options.formatter
    name = options.format
    formatter.check(name)

    return st.integers(min_value=since, max_value=until).map(
        lambda millis: formatter.format(millis, name)
    )
