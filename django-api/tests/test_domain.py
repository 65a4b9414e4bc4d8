"""Unit tests for domain primitives and filter parsing.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import uuid
from datetime import date
from decimal import Decimal

import pytest

from events.domain import (
    CATEGORY_CODES,
    Capacity,
    Category,
    DateRange,
    EventFilter,
    EventId,
    EventListing,
    Money,
    PriceRange,
)
from events.domain.errors import EventNotFoundError, ErrorCode, InvalidParameterError
from events.domain.filters import add_months, date_window
from events.services.analytics import CategoryView


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        assert Money(Decimal("12.50")).amount == Decimal("12.50")

    def test_money_accepts_zero(self):
        assert Money(Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Money(Decimal("-1"))

    def test_money_str_format(self):
        assert str(Money(Decimal("5"))) == "5.00"


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        assert Capacity(300).value == 300

    def test_capacity_accepts_zero(self):
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Capacity(-1)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        value = uuid.uuid4()
        assert EventId.from_string(str(value)) == EventId(value)

    def test_from_string_invalid_uuid(self):
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")


class TestEvent:
    def test_price_min_above_price_max_is_rejected(self, make_event):
        with pytest.raises(ValueError):
            make_event(price_min="50", price_max="10")

    def test_listing_price_range_display(self, make_event):
        listing = EventListing(event=make_event(price_min="25", price_max="100"))
        assert listing.price_range == "$25.00 - $100.00"
        assert listing.is_favorite is False
        assert listing.attendees_count == 0


class TestErrors:
    def test_not_found_error_carries_code_and_id(self):
        error = EventNotFoundError("abc")
        assert error.code is ErrorCode.EVENT_NOT_FOUND
        assert error.event_id == "abc"
        assert str(error) == "EVENT_NOT_FOUND: Event not found"

    def test_invalid_parameter_names_the_parameter(self):
        error = InvalidParameterError("page", "must be a positive integer")
        assert error.parameter == "page"
        assert "'page'" in error.message


class TestDateWindows:
    def test_add_months_clamps_to_month_end(self):
        assert add_months(date(2026, 1, 31), 1) == date(2026, 2, 28)
        assert add_months(date(2026, 12, 15), 1) == date(2027, 1, 15)

    @pytest.mark.parametrize(
        "today, friday",
        [
            (date(2026, 10, 14), date(2026, 10, 16)),  # Wednesday
            (date(2026, 10, 16), date(2026, 10, 16)),  # Friday
            (date(2026, 10, 17), date(2026, 10, 23)),  # Saturday
            (date(2026, 10, 18), date(2026, 10, 23)),  # Sunday
        ],
    )
    def test_weekend_starts_on_next_friday(self, today, friday):
        first, last = date_window(DateRange.WEEKEND, today)
        assert first == friday
        assert (last - first).days == 2

    def test_week_and_month_windows(self):
        today = date(2026, 10, 14)
        assert date_window(DateRange.WEEK, today) == (today, date(2026, 10, 21))
        assert date_window(DateRange.MONTH, today) == (today, date(2026, 11, 14))
        assert date_window(DateRange.TOMORROW, today) == (date(2026, 10, 15),) * 2


class TestEventFilterParsing:
    def test_empty_params_impose_no_constraint(self):
        assert EventFilter.from_params({}).is_empty

    def test_all_and_unknown_values_are_ignored(self):
        event_filter = EventFilter.from_params(
            {"dateRange": "all", "priceRange": "cheap", "category": "knitting", "search": "  "}
        )
        assert event_filter.is_empty

    def test_known_values_are_parsed(self):
        event_filter = EventFilter.from_params(
            {
                "search": "jazz",
                "dateRange": "weekend",
                "category": "tech",
                "priceRange": "100+",
                "location": "New York",
            }
        )
        assert event_filter == EventFilter(
            search="jazz",
            date_range=DateRange.WEEKEND,
            category=Category.TECHNOLOGY,
            price_range=PriceRange.OVER_100,
            location="New York",
        )

    def test_every_category_has_a_code(self):
        assert set(CATEGORY_CODES.values()) == set(Category)


class TestCategoryView:
    def test_parse(self):
        assert CategoryView.parse("revenue") is CategoryView.REVENUE
        assert CategoryView.parse("tickets") is CategoryView.TICKETS
        assert CategoryView.parse(None) is CategoryView.TICKETS
        assert CategoryView.parse("bogus") is CategoryView.TICKETS
