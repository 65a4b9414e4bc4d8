"""Integration tests for the analytics endpoints.

Run with: pytest tests/test_analytics_api.py -v
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from events import models


@pytest.fixture
def catalog(user):
    now = timezone.now()
    concert = models.Event.objects.create(
        name="Summer Music Festival",
        description="Open-air concerts",
        starts_at=now + timedelta(days=1),
        location="Central Park, New York",
        category="Music",
        price_min=Decimal("25"),
        price_max=Decimal("100"),
        capacity=10,
        creator=user,
    )
    summit = models.Event.objects.create(
        name="Business Leadership Summit",
        description="Keynotes",
        starts_at=now + timedelta(days=3),
        location="Moscone Center, San Francisco",
        category="Business",
        price_min=Decimal("200"),
        price_max=Decimal("400"),
        capacity=10,
        creator=user,
    )
    finished = models.Event.objects.create(
        name="Modern Art Exhibition",
        description="Gallery night",
        starts_at=now - timedelta(days=3),
        location="Metropolitan Museum, Chicago",
        category="Art & Culture",
        price_min=Decimal("10"),
        price_max=Decimal("10"),
        capacity=10,
        creator=user,
    )
    tickets = [(concert, "25")] * 8 + [(summit, "400")] * 2 + [(finished, "10")] * 3
    models.Ticket.objects.bulk_create(
        models.Ticket(
            event=event,
            user=user,
            ticket_type="Basic",
            price=Decimal(price),
            purchased_at=now - timedelta(days=2),
        )
        for event, price in tickets
    )
    return concert, summit, finished


@pytest.mark.django_db
class TestAnalyticsEndpoints:
    def test_metrics(self, api_client: APIClient, catalog):
        response = api_client.get("/api/analytics/metrics")

        assert response.status_code == 200
        body = response.json()
        assert body["ticketsSold"] == 13
        assert body["revenue"] == 8 * 25 + 2 * 400 + 3 * 10
        assert body["activeEvents"] == 2
        assert body["attendees"] == 13
        assert body["ticketsGrowth"] == 0
        assert body["revenueGrowth"] == 0
        assert body["eventsGrowth"] == 3
        assert body["attendeesGrowth"] == 0

    def test_monthly_revenue_defaults_to_thirty_days(self, api_client: APIClient, catalog):
        body = api_client.get("/api/analytics/revenue").json()
        assert body[-1]["month"] == timezone.localtime().strftime("%b %Y")
        assert sum(m["revenue"] for m in body) == 1030

    def test_monthly_revenue_rejects_bad_days(self, api_client: APIClient):
        assert api_client.get("/api/analytics/revenue", {"days": "many"}).status_code == 400
        assert api_client.get("/api/analytics/revenue", {"days": -5}).status_code == 400

    def test_monthly_revenue_rejects_days_beyond_calendar(self, api_client: APIClient):
        response = api_client.get("/api/analytics/revenue", {"days": 800000})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PARAMETER"
        assert "days" in response.json()["message"]

    def test_category_stats_by_view(self, api_client: APIClient, catalog):
        by_tickets = api_client.get("/api/analytics/categories", {"view": "tickets"}).json()
        assert [c["category"] for c in by_tickets] == ["Music", "Art & Culture", "Business"]
        assert [c["ticketCount"] for c in by_tickets] == [8, 3, 2]

        by_revenue = api_client.get("/api/analytics/categories", {"view": "revenue"}).json()
        assert [c["category"] for c in by_revenue] == ["Business", "Music", "Art & Culture"]
        assert [c["revenue"] for c in by_revenue] == [800, 200, 30]

    def test_events_performance(self, api_client: APIClient, catalog):
        body = api_client.get("/api/analytics/events-performance").json()

        assert [e["name"] for e in body] == ["Summer Music Festival", "Business Leadership Summit"]
        assert [e["status"] for e in body] == ["On Track", "At Risk"]
        assert [e["tickets_sold"] for e in body] == [8, 2]
        assert body[0]["fill_rate"] == 0.8
        assert body[0]["revenue"] == 200
