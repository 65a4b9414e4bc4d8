"""Dashboard analytics derived from event and ticket snapshots.

Every view is recomputed from the records passed in. Tickets whose event
is not part of the snapshot are left out of per-event and per-category
figures.
"""

import math
from collections import Counter, defaultdict
from collections.abc import Sequence
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Self

from events.domain import (
    AnalyticsMetrics,
    Category,
    Event,
    EventCategoryStat,
    EventId,
    EventPerformance,
    MonthlyStat,
    PerformanceStatus,
    Ticket,
)
from events.domain.errors import InvalidParameterError

ON_TRACK_FILL_RATE = 0.8
NEEDS_ATTENTION_FILL_RATE = 0.6
MONTH_LABEL_FORMAT = "%b %Y"

ZERO = Decimal("0")


class CategoryView(Enum):
    """Which figure category statistics are ranked by."""

    TICKETS = "tickets"
    REVENUE = "revenue"

    @classmethod
    def parse(cls, raw: str | None) -> Self:
        """Read a view name; anything but ``"revenue"`` ranks by tickets."""
        return cls.REVENUE if raw == cls.REVENUE.value else cls.TICKETS


def round_half_up(value: Decimal | float) -> int:
    return math.floor(Decimal(value) + Decimal("0.5"))


def percent_change(current: Decimal | int, previous: Decimal | int) -> int:
    """Whole-percent growth from previous to current; 0 when previous is 0."""
    if not previous:
        return 0
    return round_half_up(Decimal(current - previous) / Decimal(previous) * 100)


def fill_rate(tickets_sold: int, capacity: int) -> float:
    if capacity <= 0:
        return 0.0
    return tickets_sold / capacity


def classify_fill_rate(rate: float) -> PerformanceStatus:
    if rate >= ON_TRACK_FILL_RATE:
        return PerformanceStatus.ON_TRACK
    if rate >= NEEDS_ATTENTION_FILL_RATE:
        return PerformanceStatus.NEEDS_ATTENTION
    return PerformanceStatus.AT_RISK


def _total(tickets: Sequence[Ticket]) -> Decimal:
    return sum((t.price.amount for t in tickets), ZERO)


def _in_window(moment: datetime, start: datetime, end: datetime | None) -> bool:
    return moment >= start and (end is None or moment < end)


def _month_start(moment: datetime | date) -> date:
    return date(moment.year, moment.month, 1)


def _next_month(month: date) -> date:
    if month.month == 12:
        return date(month.year + 1, 1, 1)
    return date(month.year, month.month + 1, 1)


def _as_local(moment: datetime, now: datetime) -> datetime:
    if moment.tzinfo is not None and now.tzinfo is not None:
        return moment.astimezone(now.tzinfo)
    return moment


class AnalyticsAggregator:
    """Computes the four dashboard views.

    Args:
        growth_window_days: Length of the trailing window compared against
            the window immediately before it.
        performance_limit: Number of upcoming events in the performance view.
    """

    def __init__(self, growth_window_days: int = 30, performance_limit: int = 3) -> None:
        if growth_window_days < 1:
            raise InvalidParameterError("growth_window_days", "must be a positive integer")
        if performance_limit < 0:
            raise InvalidParameterError("performance_limit", "cannot be negative")
        self.growth_window = timedelta(days=growth_window_days)
        self.performance_limit = performance_limit

    def metrics(
        self, events: Sequence[Event], tickets: Sequence[Ticket], now: datetime
    ) -> AnalyticsMetrics:
        window_start = now - self.growth_window
        previous_start = window_start - self.growth_window

        current = [t for t in tickets if _in_window(t.purchased_at, window_start, None)]
        previous = [t for t in tickets if _in_window(t.purchased_at, previous_start, window_start)]

        tickets_growth = percent_change(len(current), len(previous))
        revenue_growth = percent_change(_total(current), _total(previous))

        events_created = sum(1 for e in events if _in_window(e.created_at, window_start, None))
        events_created_before = sum(
            1 for e in events if _in_window(e.created_at, previous_start, window_start)
        )

        known = {e.id for e in events}
        attendees = sum(1 for t in tickets if t.event_id in known)

        return AnalyticsMetrics(
            tickets_sold=len(tickets),
            tickets_growth=tickets_growth,
            revenue=_total(tickets),
            revenue_growth=revenue_growth,
            active_events=sum(1 for e in events if e.starts_at >= now),
            events_growth=events_created - events_created_before,
            # Approximation: no separate attendee history is kept.
            attendees=attendees,
            attendees_growth=round_half_up(Decimal(tickets_growth) / 2 + Decimal(revenue_growth) / 2),
        )

    def monthly_revenue(
        self, tickets: Sequence[Ticket], days: int, now: datetime
    ) -> list[MonthlyStat]:
        """Revenue per calendar month over the last ``days`` days.

        Every month the window touches is present, including months with
        no sales, oldest first.

        Raises:
            InvalidParameterError: If days is negative or reaches past the
                earliest representable date.
        """
        if days < 0:
            raise InvalidParameterError("days", "cannot be negative")
        try:
            start = now - timedelta(days=days)
        except OverflowError:
            raise InvalidParameterError("days", "is too large") from None

        buckets: dict[date, Decimal] = {}
        month = _month_start(start)
        last = _month_start(now)
        while month <= last:
            buckets[month] = ZERO
            month = _next_month(month)

        for ticket in tickets:
            if start <= ticket.purchased_at <= now:
                key = _month_start(_as_local(ticket.purchased_at, now))
                if key in buckets:
                    buckets[key] += ticket.price.amount

        return [
            MonthlyStat(month=month.strftime(MONTH_LABEL_FORMAT), revenue=revenue)
            for month, revenue in sorted(buckets.items())
        ]

    def category_stats(
        self, events: Sequence[Event], tickets: Sequence[Ticket], view: CategoryView
    ) -> list[EventCategoryStat]:
        category_of: dict[EventId, Category] = {e.id: e.category for e in events}
        counts: Counter[Category] = Counter({c: 0 for c in category_of.values()})
        revenue: dict[Category, Decimal] = {c: ZERO for c in category_of.values()}

        for ticket in tickets:
            category = category_of.get(ticket.event_id)
            if category is None:
                continue
            counts[category] += 1
            revenue[category] += ticket.price.amount

        stats = [
            EventCategoryStat(category=c, ticket_count=counts[c], revenue=revenue[c])
            for c in counts
        ]
        if view is CategoryView.REVENUE:
            stats.sort(key=lambda s: (-s.revenue, s.category.value))
        else:
            stats.sort(key=lambda s: (-s.ticket_count, s.category.value))
        return stats

    def event_performance(
        self, events: Sequence[Event], tickets: Sequence[Ticket], now: datetime
    ) -> list[EventPerformance]:
        """Sales progress of the soonest upcoming events."""
        upcoming = sorted(
            (e for e in events if e.starts_at >= now), key=lambda e: (e.starts_at, str(e.id))
        )
        selected = upcoming[: self.performance_limit]
        wanted = {e.id for e in selected}

        sold: Counter[EventId] = Counter()
        revenue: defaultdict[EventId, Decimal] = defaultdict(lambda: ZERO)
        for ticket in tickets:
            if ticket.event_id in wanted:
                sold[ticket.event_id] += 1
                revenue[ticket.event_id] += ticket.price.amount

        results = []
        for event in selected:
            rate = fill_rate(sold[event.id], event.capacity.value)
            results.append(
                EventPerformance(
                    event=event,
                    tickets_sold=sold[event.id],
                    capacity=event.capacity.value,
                    revenue=revenue[event.id],
                    fill_rate=rate,
                    status=classify_fill_rate(rate),
                )
            )
        return results
