"""In-memory store implementations.

Used by unit tests and for running the services without a database.
Collections are returned as fresh lists so callers get a stable snapshot.
"""

from collections import Counter
from collections.abc import Iterable

from events.domain import Event, EventId, Favorite, Ticket, TicketId
from events.stores.interfaces import EventStore, FavoriteStore, TicketStore


class InMemoryEventStore(EventStore):
    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._events: dict[EventId, Event] = {e.id: e for e in events}

    def list_events(self) -> list[Event]:
        return sorted(self._events.values(), key=lambda e: e.starts_at)

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def event_exists(self, event_id: EventId) -> bool:
        return event_id in self._events

    def list_events_by_creator(self, creator_id: int) -> list[Event]:
        return [e for e in self.list_events() if e.creator_id == creator_id]

    def add_event(self, event: Event) -> Event:
        self._events[event.id] = event
        return event


class InMemoryTicketStore(TicketStore):
    def __init__(self, tickets: Iterable[Ticket] = ()) -> None:
        self._tickets: list[Ticket] = list(tickets)

    def list_tickets(
        self, event_id: EventId | None = None, user_id: int | None = None
    ) -> list[Ticket]:
        return [
            t
            for t in self._tickets
            if (event_id is None or t.event_id == event_id)
            and (user_id is None or t.user_id == user_id)
        ]

    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        return next((t for t in self._tickets if t.id == ticket_id), None)

    def add_tickets(self, tickets: Iterable[Ticket]) -> list[Ticket]:
        added = list(tickets)
        self._tickets.extend(added)
        return added

    def count_by_event(self, event_ids: Iterable[EventId]) -> dict[EventId, int]:
        counts = Counter(t.event_id for t in self._tickets)
        return {event_id: counts.get(event_id, 0) for event_id in event_ids}


class InMemoryFavoriteStore(FavoriteStore):
    def __init__(self, favorites: Iterable[Favorite] = ()) -> None:
        self._favorites: dict[tuple[int, EventId], Favorite] = {
            (f.user_id, f.event_id): f for f in favorites
        }

    def is_favorite(self, user_id: int, event_id: EventId) -> bool:
        return (user_id, event_id) in self._favorites

    def favorite_event_ids(self, user_id: int) -> set[EventId]:
        return {event_id for (owner, event_id) in self._favorites if owner == user_id}

    def add_favorite(self, favorite: Favorite) -> Favorite:
        return self._favorites.setdefault((favorite.user_id, favorite.event_id), favorite)

    def remove_favorite(self, user_id: int, event_id: EventId) -> None:
        self._favorites.pop((user_id, event_id), None)
