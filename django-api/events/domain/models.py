"""Domain models representing persisted state and the views derived from it.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from events.domain.value_objects import (
    Capacity,
    Category,
    EventId,
    Money,
    TicketId,
    TicketTier,
)


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    description: str
    starts_at: datetime
    location: str
    category: Category
    price_min: Money
    price_max: Money
    capacity: Capacity
    creator_id: int
    image_url: str | None
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if self.price_min.amount > self.price_max.amount:
            raise ValueError("price_min cannot exceed price_max")


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a purchased Ticket."""

    id: TicketId
    event_id: EventId
    user_id: int
    tier: TicketTier
    price: Money
    purchased_at: datetime
    is_used: bool = False


@dataclass(frozen=True)
class Favorite:
    """A user's bookmark on an event."""

    user_id: int
    event_id: EventId
    created_at: datetime


@dataclass(frozen=True)
class EventListing:
    """An Event merged with the per-user and aggregate fields shown to clients."""

    event: Event
    is_favorite: bool = False
    attendees_count: int = 0

    @property
    def price_range(self) -> str:
        return f"${self.event.price_min} - ${self.event.price_max}"


@dataclass(frozen=True)
class Pagination:
    current_page: int
    total_pages: int
    total_items: int
    page_size: int


@dataclass(frozen=True)
class EventPage:
    """One page of query results plus its pagination metadata."""

    events: tuple
    pagination: Pagination


@dataclass(frozen=True)
class MonthlyStat:
    month: str
    revenue: Decimal


@dataclass(frozen=True)
class EventCategoryStat:
    category: Category
    ticket_count: int
    revenue: Decimal


@dataclass(frozen=True)
class AnalyticsMetrics:
    """Point-in-time dashboard figures with their period-over-period growth."""

    tickets_sold: int
    tickets_growth: int
    revenue: Decimal
    revenue_growth: int
    active_events: int
    events_growth: int
    attendees: int
    attendees_growth: int


class PerformanceStatus(Enum):
    ON_TRACK = "On Track"
    NEEDS_ATTENTION = "Needs Attention"
    AT_RISK = "At Risk"


@dataclass(frozen=True)
class EventPerformance:
    """Sales progress of an upcoming event."""

    event: Event
    tickets_sold: int
    capacity: int
    revenue: Decimal
    fill_rate: float
    status: PerformanceStatus
