from events.handlers.views import (
    AnalyticsMetricsView,
    CategoryStatsView,
    EventDetailView,
    EventListView,
    EventPerformanceView,
    FavoriteView,
    MonthlyRevenueView,
    MyEventsView,
    TicketDetailView,
    TicketListView,
    TicketPurchaseView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "FavoriteView",
    "TicketPurchaseView",
    "TicketListView",
    "TicketDetailView",
    "MyEventsView",
    "AnalyticsMetricsView",
    "MonthlyRevenueView",
    "CategoryStatsView",
    "EventPerformanceView",
]
