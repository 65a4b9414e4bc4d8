"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models

from events.domain import Category, TicketTier


class Event(models.Model):
    """Persistence model for events."""

    CATEGORY_CHOICES = [(c.value, c.value) for c in Category]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField()
    starts_at = models.DateTimeField()
    location = models.CharField(max_length=255)
    category = models.CharField(max_length=32, choices=CATEGORY_CHOICES)
    price_min = models.DecimalField(max_digits=10, decimal_places=2)
    price_max = models.DecimalField(max_digits=10, decimal_places=2)
    capacity = models.PositiveIntegerField()
    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="created_events"
    )
    image_url = models.URLField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["starts_at"]
        indexes = [
            models.Index(fields=["starts_at"], name="event_starts_at_idx"),
            models.Index(fields=["category"], name="event_category_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price_min__lte=models.F("price_max")),
                name="event_price_min_lte_max",
            ),
        ]

    def __str__(self) -> str:
        return self.name


class Ticket(models.Model):
    """Persistence model for purchased tickets."""

    TIER_CHOICES = [(t.value, t.value) for t in TicketTier]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="tickets")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="tickets"
    )
    ticket_type = models.CharField(max_length=16, choices=TIER_CHOICES)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    purchased_at = models.DateTimeField()
    is_used = models.BooleanField(default=False)

    class Meta:
        ordering = ["purchased_at"]
        indexes = [
            models.Index(fields=["event"], name="ticket_event_idx"),
            models.Index(fields=["user"], name="ticket_user_idx"),
            models.Index(fields=["purchased_at"], name="ticket_purchased_at_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.ticket_type} - {self.event.name}"


class Favorite(models.Model):
    """A user's bookmark on an event."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="favorites"
    )
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="favorites")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "event"], name="unique_user_event_favorite"),
        ]

    def __str__(self) -> str:
        return f"{self.user} - {self.event.name}"
