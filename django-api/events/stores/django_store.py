"""Django ORM implementations of the stores.

Each method queries the ORM and converts rows to domain models.
"""

from collections.abc import Iterable

from django.db import IntegrityError, transaction
from django.db.models import Count

from events import models
from events.domain import (
    Capacity,
    Category,
    Event,
    EventId,
    Favorite,
    Money,
    Ticket,
    TicketId,
    TicketTier,
)
from events.stores.interfaces import EventStore, FavoriteStore, TicketStore


def to_domain_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        name=row.name,
        description=row.description,
        starts_at=row.starts_at,
        location=row.location,
        category=Category(row.category),
        price_min=Money(row.price_min),
        price_max=Money(row.price_max),
        capacity=Capacity(row.capacity),
        creator_id=row.creator_id,
        image_url=row.image_url,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_domain_ticket(row: models.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(row.id),
        event_id=EventId(row.event_id),
        user_id=row.user_id,
        tier=TicketTier(row.ticket_type),
        price=Money(row.price),
        purchased_at=row.purchased_at,
        is_used=row.is_used,
    )


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def list_events(self) -> list[Event]:
        return [to_domain_event(row) for row in models.Event.objects.order_by("starts_at")]

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return to_domain_event(row) if row is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()

    def list_events_by_creator(self, creator_id: int) -> list[Event]:
        rows = models.Event.objects.filter(creator_id=creator_id).order_by("starts_at")
        return [to_domain_event(row) for row in rows]

    def add_event(self, event: Event) -> Event:
        row = models.Event.objects.create(
            id=event.id.value,
            name=event.name,
            description=event.description,
            starts_at=event.starts_at,
            location=event.location,
            category=event.category.value,
            price_min=event.price_min.amount,
            price_max=event.price_max.amount,
            capacity=event.capacity.value,
            creator_id=event.creator_id,
            image_url=event.image_url,
        )
        return to_domain_event(row)


class DjangoTicketStore(TicketStore):
    """Database-backed ticket store using Django ORM."""

    def list_tickets(
        self, event_id: EventId | None = None, user_id: int | None = None
    ) -> list[Ticket]:
        rows = models.Ticket.objects.all()
        if event_id is not None:
            rows = rows.filter(event_id=event_id.value)
        if user_id is not None:
            rows = rows.filter(user_id=user_id)
        return [to_domain_ticket(row) for row in rows]

    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        row = models.Ticket.objects.filter(pk=ticket_id.value).first()
        return to_domain_ticket(row) if row is not None else None

    @transaction.atomic
    def add_tickets(self, tickets: Iterable[Ticket]) -> list[Ticket]:
        rows = models.Ticket.objects.bulk_create(
            models.Ticket(
                id=t.id.value,
                event_id=t.event_id.value,
                user_id=t.user_id,
                ticket_type=t.tier.value,
                price=t.price.amount,
                purchased_at=t.purchased_at,
                is_used=t.is_used,
            )
            for t in tickets
        )
        return [to_domain_ticket(row) for row in rows]

    def count_by_event(self, event_ids: Iterable[EventId]) -> dict[EventId, int]:
        ids = list(event_ids)
        counts = dict(
            models.Ticket.objects.filter(event_id__in=[e.value for e in ids])
            .order_by()
            .values("event_id")
            .annotate(total=Count("id"))
            .values_list("event_id", "total")
        )
        return {event_id: counts.get(event_id.value, 0) for event_id in ids}


class DjangoFavoriteStore(FavoriteStore):
    """Database-backed favourite store using Django ORM."""

    def is_favorite(self, user_id: int, event_id: EventId) -> bool:
        return models.Favorite.objects.filter(user_id=user_id, event_id=event_id.value).exists()

    def favorite_event_ids(self, user_id: int) -> set[EventId]:
        ids = models.Favorite.objects.filter(user_id=user_id).values_list("event_id", flat=True)
        return {EventId(value) for value in ids}

    def add_favorite(self, favorite: Favorite) -> Favorite:
        try:
            with transaction.atomic():
                row, _ = models.Favorite.objects.get_or_create(
                    user_id=favorite.user_id, event_id=favorite.event_id.value
                )
        except IntegrityError:
            # Lost a race with a concurrent insert of the same pair.
            row = models.Favorite.objects.get(
                user_id=favorite.user_id, event_id=favorite.event_id.value
            )
        return Favorite(user_id=row.user_id, event_id=EventId(row.event_id), created_at=row.created_at)

    def remove_favorite(self, user_id: int, event_id: EventId) -> None:
        models.Favorite.objects.filter(user_id=user_id, event_id=event_id.value).delete()
