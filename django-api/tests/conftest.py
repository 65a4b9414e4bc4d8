"""Pytest configuration and shared fixtures."""

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from events.domain import (
    Capacity,
    Category,
    Event,
    EventId,
    Money,
    Ticket,
    TicketId,
    TicketTier,
)

# A Wednesday; the coming weekend runs Friday 16th to Sunday 18th.
NOW = datetime(2026, 10, 14, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_event():
    def factory(
        name: str = "Sample Event",
        description: str = "An event",
        starts_at: datetime | None = None,
        location: str = "Somewhere",
        category: Category = Category.MUSIC,
        price_min: str = "10",
        price_max: str = "20",
        capacity: int = 100,
        creator_id: int = 1,
        created_at: datetime | None = None,
    ) -> Event:
        created = created_at or NOW - timedelta(days=90)
        return Event(
            id=EventId(uuid.uuid4()),
            name=name,
            description=description,
            starts_at=starts_at or NOW + timedelta(days=1),
            location=location,
            category=category,
            price_min=Money(Decimal(price_min)),
            price_max=Money(Decimal(price_max)),
            capacity=Capacity(capacity),
            creator_id=creator_id,
            image_url=None,
            created_at=created,
            updated_at=created,
        )

    return factory


@pytest.fixture
def make_ticket():
    def factory(
        event: Event,
        price: str = "25",
        purchased_at: datetime | None = None,
        user_id: int = 1,
        tier: TicketTier = TicketTier.BASIC,
    ) -> Ticket:
        return Ticket(
            id=TicketId(uuid.uuid4()),
            event_id=event.id,
            user_id=user_id,
            tier=tier,
            price=Money(Decimal(price)),
            purchased_at=purchased_at or NOW - timedelta(days=1),
        )

    return factory


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username="johndoe", password="secret")


@pytest.fixture
def auth_client(api_client: APIClient, user) -> APIClient:
    api_client.force_authenticate(user=user)
    return api_client
