"""Unit tests for EventQueryEngine filtering and pagination.

Run with: pytest tests/test_query_engine.py -v
"""

import math
from datetime import datetime, timedelta, timezone

import pytest

from events.domain import Category, DateRange, EventFilter, PriceRange
from events.domain.errors import InvalidParameterError
from events.services.query_engine import EventQueryEngine

NOW = datetime(2026, 10, 14, 12, 0, tzinfo=timezone.utc)


def at(day: int, hour: int = 19) -> datetime:
    return datetime(2026, 10, day, hour, 0, tzinfo=timezone.utc)


@pytest.fixture
def engine() -> EventQueryEngine:
    return EventQueryEngine(page_size=9)


def names(page) -> list[str]:
    return [e.name for e in page.events]


class TestSearch:
    def test_search_matches_name_or_description(self, engine, make_event):
        events = [
            make_event(name="Summer Music Festival", starts_at=at(20)),
            make_event(name="Jazz Night", description="Live music downtown", starts_at=at(21)),
            make_event(name="Tech Conference", description="Talks", location="Moscone Center"),
        ]
        page = engine.query(events, EventFilter(search="music"), 1, NOW)
        assert names(page) == ["Summer Music Festival", "Jazz Night"]

    def test_search_matches_location_case_insensitively(self, engine, make_event):
        events = [
            make_event(name="A", location="Central Park, New York"),
            make_event(name="B", location="Staples Center, Los Angeles"),
        ]
        page = engine.query(events, EventFilter(search="CENTRAL park"), 1, NOW)
        assert names(page) == ["A"]

    def test_location_filter_is_substring(self, engine, make_event):
        events = [
            make_event(name="A", location="Lincoln Center, New York"),
            make_event(name="B", location="Moscone Center, San Francisco"),
        ]
        page = engine.query(events, EventFilter(location="new york"), 1, NOW)
        assert names(page) == ["A"]


class TestDateRange:
    @pytest.fixture
    def events(self, make_event):
        return [
            make_event(name="today-early", starts_at=at(14, 1)),
            make_event(name="today-late", starts_at=at(14, 23)),
            make_event(name="tomorrow", starts_at=at(15)),
            make_event(name="friday", starts_at=at(16)),
            make_event(name="sunday-night", starts_at=at(18, 23)),
            make_event(name="next-monday", starts_at=at(19)),
            make_event(name="week-edge", starts_at=at(21, 22)),
            make_event(name="week-after", starts_at=at(22)),
            make_event(name="month-edge", starts_at=datetime(2026, 11, 14, 20, tzinfo=timezone.utc)),
            make_event(name="month-after", starts_at=datetime(2026, 11, 15, 9, tzinfo=timezone.utc)),
            make_event(name="yesterday", starts_at=at(13)),
        ]

    def query(self, engine, events, date_range):
        return names(engine.query(events, EventFilter(date_range=date_range), 1, NOW))

    def test_today_covers_the_whole_calendar_day(self, engine, events):
        assert self.query(engine, events, DateRange.TODAY) == ["today-early", "today-late"]

    def test_tomorrow(self, engine, events):
        assert self.query(engine, events, DateRange.TOMORROW) == ["tomorrow"]

    def test_weekend_is_friday_through_sunday_inclusive(self, engine, events):
        assert self.query(engine, events, DateRange.WEEKEND) == ["friday", "sunday-night"]

    def test_week_runs_seven_days_from_today(self, engine, events):
        assert self.query(engine, events, DateRange.WEEK) == [
            "today-early",
            "today-late",
            "tomorrow",
            "friday",
            "sunday-night",
            "next-monday",
            "week-edge",
        ]

    def test_month_runs_to_same_day_next_month(self, engine, events):
        result = self.query(engine, events, DateRange.MONTH)
        assert "month-edge" in result
        assert "month-after" not in result
        assert "yesterday" not in result


class TestCategoryAndPrice:
    def test_category_filter(self, engine, make_event):
        events = [
            make_event(name="gig", category=Category.MUSIC),
            make_event(name="summit", category=Category.BUSINESS),
        ]
        page = engine.query(events, EventFilter(category=Category.BUSINESS), 1, NOW)
        assert names(page) == ["summit"]

    def test_free_matches_only_zero_minimum_price(self, engine, make_event):
        events = [
            make_event(name="free-a", price_min="0", price_max="0", starts_at=at(20)),
            make_event(name="free-b", price_min="0", price_max="80", starts_at=at(21)),
            make_event(name="paid", price_min="10", price_max="10", starts_at=at(22)),
        ]
        page = engine.query(events, EventFilter(price_range=PriceRange.FREE), 1, NOW)
        assert names(page) == ["free-a", "free-b"]

    @pytest.mark.parametrize(
        "price_range, expected",
        [
            (PriceRange.UP_TO_25, ["p1", "p25"]),
            (PriceRange.FROM_25_TO_50, ["p25", "p50"]),
            (PriceRange.FROM_50_TO_100, ["p50", "p100"]),
            (PriceRange.OVER_100, ["p101"]),
        ],
    )
    def test_price_bands_are_inclusive(self, engine, make_event, price_range, expected):
        events = [
            make_event(name=f"p{p}", price_min=str(p), price_max="500", starts_at=at(15) + timedelta(hours=i))
            for i, p in enumerate([0, 1, 25, 50, 100, 101])
        ]
        page = engine.query(events, EventFilter(price_range=price_range), 1, NOW)
        assert names(page) == expected

    def test_filters_are_conjunctive(self, engine, make_event):
        events = [
            make_event(name="match", category=Category.MUSIC, location="New York", price_min="0"),
            make_event(name="wrong-city", category=Category.MUSIC, location="Chicago", price_min="0"),
            make_event(name="wrong-price", category=Category.MUSIC, location="New York", price_min="30", price_max="40"),
        ]
        event_filter = EventFilter(
            category=Category.MUSIC, location="new york", price_range=PriceRange.FREE
        )
        assert names(engine.query(events, event_filter, 1, NOW)) == ["match"]


class TestPagination:
    @pytest.fixture
    def events(self, make_event):
        return [
            make_event(name=f"e{i:02d}", starts_at=NOW + timedelta(days=20 - i)) for i in range(20)
        ]

    def test_results_are_ordered_soonest_first(self, engine, events):
        page = engine.query(events, EventFilter(), 1, NOW)
        starts = [e.starts_at for e in page.events]
        assert starts == sorted(starts)

    def test_pagination_metadata(self, engine, events):
        page = engine.query(events, EventFilter(), 3, NOW)
        assert page.pagination.total_items == 20
        assert page.pagination.total_pages == math.ceil(20 / 9)
        assert page.pagination.current_page == 3
        assert page.pagination.page_size == 9
        assert len(page.events) == 2

    def test_total_items_is_independent_of_page(self, engine, events):
        totals = {engine.query(events, EventFilter(), p, NOW).pagination.total_items for p in (1, 2, 5)}
        assert totals == {20}

    def test_pages_do_not_overlap_and_cover_everything(self, engine, events):
        seen = []
        for p in (1, 2, 3):
            seen.extend(engine.query(events, EventFilter(), p, NOW).events)
        assert len(seen) == 20
        assert {e.id for e in seen} == {e.id for e in events}

    def test_page_past_the_end_is_empty(self, engine, events):
        page = engine.query(events, EventFilter(), 10, NOW)
        assert page.events == ()
        assert page.pagination.total_items == 20

    def test_no_matches_reports_zero_pages(self, engine, events):
        page = engine.query(events, EventFilter(search="nothing matches this"), 1, NOW)
        assert page.events == ()
        assert page.pagination.total_items == 0
        assert page.pagination.total_pages == 0

    def test_page_below_one_is_rejected(self, engine, events):
        with pytest.raises(InvalidParameterError) as exc_info:
            engine.query(events, EventFilter(), 0, NOW)
        assert exc_info.value.parameter == "page"

    def test_page_size_must_be_positive(self):
        with pytest.raises(InvalidParameterError):
            EventQueryEngine(page_size=0)

    def test_query_is_idempotent(self, engine, events):
        event_filter = EventFilter(search="e1")
        assert engine.query(events, event_filter, 1, NOW) == engine.query(events, event_filter, 1, NOW)

    def test_results_are_a_filtered_subset(self, engine, events):
        event_filter = EventFilter(date_range=DateRange.WEEK)
        page = engine.query(events, event_filter, 1, NOW)
        assert all(e in events for e in page.events)
        assert all(event_filter.matches(e, NOW) for e in page.events)
