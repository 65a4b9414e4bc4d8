"""Event filter criteria and the predicates that apply them.

Every filter is optional. An absent value, ``"all"`` or a value that is
not recognised imposes no constraint.
"""

import calendar
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Self

from events.domain.models import Event
from events.domain.value_objects import CATEGORY_CODES, Category

logger = logging.getLogger(__name__)

ANY = "all"


class DateRange(Enum):
    TODAY = "today"
    TOMORROW = "tomorrow"
    WEEKEND = "weekend"
    WEEK = "week"
    MONTH = "month"


class PriceRange(Enum):
    """Bands matched against an event's minimum price."""

    FREE = "free"
    UP_TO_25 = "1-25"
    FROM_25_TO_50 = "25-50"
    FROM_50_TO_100 = "50-100"
    OVER_100 = "100+"


# Inclusive (low, high) bounds on price_min; None marks an open end.
PRICE_BOUNDS: dict[PriceRange, tuple[Decimal | None, Decimal | None]] = {
    PriceRange.FREE: (Decimal("0"), Decimal("0")),
    PriceRange.UP_TO_25: (Decimal("1"), Decimal("25")),
    PriceRange.FROM_25_TO_50: (Decimal("25"), Decimal("50")),
    PriceRange.FROM_50_TO_100: (Decimal("50"), Decimal("100")),
    PriceRange.OVER_100: (Decimal("100"), None),
}


def add_months(day: date, months: int) -> date:
    """Shift a date by whole calendar months, clamping to the month's end."""
    index = day.month - 1 + months
    year = day.year + index // 12
    month = index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def date_window(date_range: DateRange, today: date) -> tuple[date, date]:
    """Return the inclusive (first, last) calendar days covered by a bucket."""
    if date_range is DateRange.TODAY:
        return today, today
    if date_range is DateRange.TOMORROW:
        tomorrow = today + timedelta(days=1)
        return tomorrow, tomorrow
    if date_range is DateRange.WEEKEND:
        # Friday is weekday 4; on a Friday the weekend starts today.
        friday = today + timedelta(days=(4 - today.weekday()) % 7)
        return friday, friday + timedelta(days=2)
    if date_range is DateRange.WEEK:
        return today, today + timedelta(days=7)
    return today, add_months(today, 1)


def _parse_enum(enum_cls, raw: str | None, name: str):
    if raw is None or raw == "" or raw == ANY:
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        logger.debug("Ignoring unrecognised %s filter %r", name, raw)
        return None


def _clean_text(raw: str | None) -> str | None:
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


@dataclass(frozen=True)
class EventFilter:
    """Conjunctive filter criteria for an event search."""

    search: str | None = None
    date_range: DateRange | None = None
    category: Category | None = None
    price_range: PriceRange | None = None
    location: str | None = None

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> Self:
        """Build a filter from request-style parameters.

        Accepts the client's camelCase keys (``dateRange``, ``priceRange``).
        """
        category = None
        code = params.get("category")
        if code and code != ANY:
            category = CATEGORY_CODES.get(code)
            if category is None:
                logger.debug("Ignoring unmapped category code %r", code)
        return cls(
            search=_clean_text(params.get("search")),
            date_range=_parse_enum(DateRange, params.get("dateRange"), "dateRange"),
            category=category,
            price_range=_parse_enum(PriceRange, params.get("priceRange"), "priceRange"),
            location=_clean_text(params.get("location")),
        )

    def predicates(self, now: datetime) -> list[Callable[[Event], bool]]:
        """Return one predicate per active criterion, with dates resolved against ``now``."""
        checks: list[Callable[[Event], bool]] = []
        if self.search:
            term = self.search.lower()
            checks.append(
                lambda e: term in e.name.lower()
                or term in e.description.lower()
                or term in e.location.lower()
            )
        if self.date_range is not None:
            first, last = date_window(self.date_range, now.date())
            checks.append(lambda e: first <= _local_date(e.starts_at, now) <= last)
        if self.category is not None:
            category = self.category
            checks.append(lambda e: e.category is category)
        if self.price_range is not None:
            checks.append(_price_predicate(self.price_range))
        if self.location:
            needle = self.location.lower()
            checks.append(lambda e: needle in e.location.lower())
        return checks

    def matches(self, event: Event, now: datetime) -> bool:
        return all(check(event) for check in self.predicates(now))

    @property
    def is_empty(self) -> bool:
        return self == EventFilter()


def _price_predicate(price_range: PriceRange) -> Callable[[Event], bool]:
    low, high = PRICE_BOUNDS[price_range]
    if high is None:
        return lambda e: e.price_min.amount > low
    return lambda e: low <= e.price_min.amount <= high


def _local_date(moment: datetime, now: datetime) -> date:
    # Calendar days are read in the same timezone as "now".
    if moment.tzinfo is not None and now.tzinfo is not None:
        return moment.astimezone(now.tzinfo).date()
    return moment.date()
