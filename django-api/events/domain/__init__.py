from events.domain.filters import DateRange, EventFilter, PriceRange
from events.domain.models import (
    AnalyticsMetrics,
    Event,
    EventCategoryStat,
    EventListing,
    EventPage,
    EventPerformance,
    Favorite,
    MonthlyStat,
    Pagination,
    PerformanceStatus,
    Ticket,
)
from events.domain.value_objects import (
    CATEGORY_CODES,
    Capacity,
    Category,
    EventId,
    Money,
    TicketId,
    TicketTier,
)

__all__ = [
    "Event",
    "Ticket",
    "Favorite",
    "EventListing",
    "EventPage",
    "Pagination",
    "MonthlyStat",
    "EventCategoryStat",
    "AnalyticsMetrics",
    "EventPerformance",
    "PerformanceStatus",
    "EventFilter",
    "DateRange",
    "PriceRange",
    "EventId",
    "TicketId",
    "Money",
    "Capacity",
    "Category",
    "CATEGORY_CODES",
    "TicketTier",
]
