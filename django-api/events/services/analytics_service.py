"""Analytics service - reads store snapshots and hands them to the aggregator."""

from django.utils import timezone

from events.domain import AnalyticsMetrics, EventCategoryStat, EventPerformance, MonthlyStat
from events.services.analytics import AnalyticsAggregator, CategoryView
from events.services.event_service import Clock
from events.stores.interfaces import EventStore, TicketStore


class AnalyticsService:
    """Service for dashboard analytics."""

    def __init__(
        self,
        event_store: EventStore,
        ticket_store: TicketStore,
        aggregator: AnalyticsAggregator | None = None,
        clock: Clock = timezone.localtime,
    ) -> None:
        self._events = event_store
        self._tickets = ticket_store
        self._aggregator = aggregator or AnalyticsAggregator()
        self._clock = clock

    def get_metrics(self) -> AnalyticsMetrics:
        return self._aggregator.metrics(
            self._events.list_events(), self._tickets.list_tickets(), self._clock()
        )

    def get_monthly_revenue(self, days: int) -> list[MonthlyStat]:
        """Raises InvalidParameterError for a negative number of days."""
        return self._aggregator.monthly_revenue(self._tickets.list_tickets(), days, self._clock())

    def get_category_stats(self, view: CategoryView) -> list[EventCategoryStat]:
        return self._aggregator.category_stats(
            self._events.list_events(), self._tickets.list_tickets(), view
        )

    def get_event_performance(self) -> list[EventPerformance]:
        return self._aggregator.event_performance(
            self._events.list_events(), self._tickets.list_tickets(), self._clock()
        )
