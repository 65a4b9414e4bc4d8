from django.urls import path

from events.handlers import (
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

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/favorite",
        FavoriteView.as_view(),
        name="event-favorite",
    ),
    path(
        "events/<str:event_id>/tickets",
        TicketPurchaseView.as_view(),
        name="event-tickets",
    ),
    path("tickets", TicketListView.as_view(), name="ticket-list"),
    path("tickets/<str:ticket_id>", TicketDetailView.as_view(), name="ticket-detail"),
    path("my-events", MyEventsView.as_view(), name="my-events"),
    path("analytics/metrics", AnalyticsMetricsView.as_view(), name="analytics-metrics"),
    path("analytics/revenue", MonthlyRevenueView.as_view(), name="analytics-revenue"),
    path("analytics/categories", CategoryStatsView.as_view(), name="analytics-categories"),
    path(
        "analytics/events-performance",
        EventPerformanceView.as_view(),
        name="analytics-events-performance",
    ),
]
