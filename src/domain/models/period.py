"""Accounting period key (calendar month)."""

from dataclasses import dataclass
from datetime import date
import re

from src.domain.errors import InvalidPeriodError


_PERIOD_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True, order=True)
class Period:
    """A calendar month identified by ``YYYY-MM``.

    Ordering follows (year, month), which matches the lexicographic order
    of the zero-padded string key.

    Attributes:
        year: Four-digit calendar year.
        month: Month number, 1 through 12.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12 or not 1 <= self.year <= 9999:
            raise InvalidPeriodError(f"{self.year}-{self.month}")

    @classmethod
    def parse(cls, value: "str | Period") -> "Period":
        """Parse a ``YYYY-MM`` string.

        Args:
            value: Period key or an existing Period.

        Returns:
            Period: Parsed period.

        Raises:
            InvalidPeriodError: If the value is not a valid key.
        """
        if isinstance(value, Period):
            return value
        match = _PERIOD_PATTERN.match(str(value).strip())
        if not match:
            raise InvalidPeriodError(value)
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def current(cls, today: date | None = None) -> "Period":
        """Return the period containing ``today`` (defaults to now)."""
        resolved = today or date.today()
        return cls(resolved.year, resolved.month)

    @classmethod
    def last_n(cls, n: int, today: date | None = None) -> list["Period"]:
        """Return ``n`` periods in ascending order ending at the current one."""
        if n <= 0:
            return []
        periods = [cls.current(today)]
        while len(periods) < n:
            periods.append(periods[-1].previous())
        return list(reversed(periods))

    def previous(self) -> "Period":
        if self.month == 1:
            return Period(self.year - 1, 12)
        return Period(self.year, self.month - 1)

    def next(self) -> "Period":
        if self.month == 12:
            return Period(self.year + 1, 1)
        return Period(self.year, self.month + 1)

    @property
    def key(self) -> str:
        """Storage key in ``YYYY-MM`` form."""
        return f"{self.year:04d}-{self.month:02d}"

    def display(self) -> str:
        """Return a human label such as ``January 2025``."""
        return f"{_MONTH_NAMES[self.month - 1]} {self.year}"

    def short_label(self) -> str:
        """Return a compact chart label such as ``Jan 25``."""
        return f"{_MONTH_NAMES[self.month - 1][:3]} {self.year % 100:02d}"

    def __str__(self) -> str:
        return self.key


__all__ = ["Period"]
