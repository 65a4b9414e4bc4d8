"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
import uuid
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from django.utils import timezone

from events.domain import (
    Capacity,
    Category,
    Event,
    EventFilter,
    EventId,
    EventListing,
    EventPage,
    Favorite,
    Money,
    Ticket,
    TicketId,
    TicketTier,
)
from events.domain.errors import (
    EventNotFoundError,
    InvalidEventError,
    InvalidEventIdError,
    InvalidParameterError,
    InvalidTicketIdError,
    InvalidTicketTierError,
    TicketAccessDeniedError,
    TicketNotFoundError,
)
from events.services.query_engine import EventQueryEngine
from events.stores.interfaces import EventStore, FavoriteStore, TicketStore

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

Clock = Callable[[], datetime]


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


def parse_ticket_id(ticket_id: str) -> TicketId:
    try:
        return TicketId.from_string(ticket_id)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidTicketIdError() from exc


def tier_price(event: Event, tier: TicketTier) -> Money:
    """Basic pays the minimum, VIP the maximum, Standard the midpoint."""
    if tier is TicketTier.BASIC:
        return event.price_min
    if tier is TicketTier.VIP:
        return event.price_max
    midpoint = (event.price_min.amount + event.price_max.amount) / 2
    return Money(midpoint.quantize(CENT, rounding=ROUND_HALF_UP))


class EventService:
    """Service for event catalog, favourite and ticket operations."""

    def __init__(
        self,
        event_store: EventStore,
        ticket_store: TicketStore,
        favorite_store: FavoriteStore,
        query_engine: EventQueryEngine | None = None,
        clock: Clock = timezone.localtime,
    ) -> None:
        self._events = event_store
        self._tickets = ticket_store
        self._favorites = favorite_store
        self._engine = query_engine or EventQueryEngine()
        self._clock = clock

    def search_events(
        self, params: Mapping[str, str], page: int = 1, user_id: int | None = None
    ) -> EventPage:
        """Return one page of events matching the request filters.

        Raises:
            InvalidParameterError: If page is below 1.
        """
        event_filter = EventFilter.from_params(params)
        result = self._engine.query(self._events.list_events(), event_filter, page, self._clock())
        return EventPage(
            events=tuple(self._to_listings(result.events, user_id)),
            pagination=result.pagination,
        )

    def get_event(self, event_id: str, user_id: int | None = None) -> EventListing:
        """Return an event by ID with its per-user fields.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._require_event(event_id)
        return self._to_listings([event], user_id)[0]

    def create_event(self, creator_id: int, data: Mapping[str, Any]) -> Event:
        """Create an event from already type-checked input.

        Raises:
            InvalidEventError: If the data violates an Event invariant.
        """
        now = self._clock()
        try:
            event = Event(
                id=EventId(uuid.uuid4()),
                name=data["name"],
                description=data["description"],
                starts_at=data["starts_at"],
                location=data["location"],
                category=Category(data["category"]),
                price_min=Money(Decimal(data["price_min"])),
                price_max=Money(Decimal(data["price_max"])),
                capacity=Capacity(int(data["capacity"])),
                creator_id=creator_id,
                image_url=data.get("image_url"),
                created_at=now,
                updated_at=now,
            )
        except (KeyError, ValueError, InvalidOperation) as exc:
            raise InvalidEventError(str(exc)) from exc
        if event.capacity.value == 0:
            raise InvalidEventError("capacity must be greater than zero")

        created = self._events.add_event(event)
        logger.info("Event %s created by user %s", created.id, creator_id)
        return created

    def set_favorite(self, user_id: int, event_id: str, is_favorite: bool) -> bool:
        """Mark or unmark an event as a favourite; repeating a call is harmless.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        if not self._events.event_exists(parsed):
            raise EventNotFoundError(event_id)

        if is_favorite:
            self._favorites.add_favorite(
                Favorite(user_id=user_id, event_id=parsed, created_at=self._clock())
            )
        else:
            self._favorites.remove_favorite(user_id, parsed)
        logger.info("User %s set favourite=%s on event %s", user_id, is_favorite, parsed)
        return is_favorite

    def purchase_tickets(
        self, user_id: int, event_id: str, ticket_type: str, quantity: int
    ) -> list[Ticket]:
        """Buy ``quantity`` tickets of one tier for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            InvalidTicketTierError: If ticket_type is not a known tier.
            InvalidParameterError: If quantity is below 1.
        """
        try:
            tier = TicketTier(ticket_type)
        except ValueError as exc:
            raise InvalidTicketTierError(str(ticket_type)) from exc
        if quantity < 1:
            raise InvalidParameterError("quantity", "must be at least 1")

        event = self._require_event(event_id)
        price = tier_price(event, tier)
        purchased_at = self._clock()
        tickets = self._tickets.add_tickets(
            Ticket(
                id=TicketId(uuid.uuid4()),
                event_id=event.id,
                user_id=user_id,
                tier=tier,
                price=price,
                purchased_at=purchased_at,
            )
            for _ in range(quantity)
        )
        logger.info(
            "User %s bought %d %s ticket(s) for event %s at %s",
            user_id,
            quantity,
            tier.value,
            event.id,
            price,
        )
        return tickets

    def list_user_tickets(self, user_id: int) -> list[Ticket]:
        return self._tickets.list_tickets(user_id=user_id)

    def get_ticket(self, user_id: int, ticket_id: str) -> Ticket:
        """Return one of the user's tickets.

        Raises:
            InvalidTicketIdError: If the ticket_id is not a valid UUID.
            TicketNotFoundError: If the ticket does not exist.
            TicketAccessDeniedError: If the ticket belongs to another user.
        """
        ticket = self._tickets.get_ticket(parse_ticket_id(ticket_id))
        if ticket is None:
            raise TicketNotFoundError(ticket_id)
        if ticket.user_id != user_id:
            raise TicketAccessDeniedError()
        return ticket

    def list_user_events(self, user_id: int) -> list[EventListing]:
        return self._to_listings(self._events.list_events_by_creator(user_id), user_id)

    def _require_event(self, event_id: str) -> Event:
        event = self._events.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def _to_listings(self, events: Sequence[Event], user_id: int | None) -> list[EventListing]:
        counts = self._tickets.count_by_event(e.id for e in events)
        if user_id is None:
            favorites: set[EventId] = set()
        elif len(events) == 1:
            favorites = {events[0].id} if self._favorites.is_favorite(user_id, events[0].id) else set()
        else:
            favorites = self._favorites.favorite_event_ids(user_id)
        return [
            EventListing(
                event=e,
                is_favorite=e.id in favorites,
                attendees_count=counts.get(e.id, 0),
            )
            for e in events
        ]
