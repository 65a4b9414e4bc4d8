"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from events.domain import Event, EventId, Favorite, Ticket, TicketId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by starts_at ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def list_events_by_creator(self, creator_id: int) -> list[Event]:
        """Return events created by a user, ordered by starts_at ascending."""
        ...

    @abstractmethod
    def add_event(self, event: Event) -> Event:
        """Persist a new event and return it."""
        ...


class TicketStore(ABC):
    """Interface for ticket persistence operations."""

    @abstractmethod
    def list_tickets(
        self, event_id: EventId | None = None, user_id: int | None = None
    ) -> list[Ticket]:
        """Return tickets, optionally restricted to one event and/or one owner."""
        ...

    @abstractmethod
    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        """Return a ticket by ID, or None if not found."""
        ...

    @abstractmethod
    def add_tickets(self, tickets: Iterable[Ticket]) -> list[Ticket]:
        """Persist purchased tickets and return them."""
        ...

    @abstractmethod
    def count_by_event(self, event_ids: Iterable[EventId]) -> dict[EventId, int]:
        """Return the number of tickets sold per event; absent events map to 0."""
        ...


class FavoriteStore(ABC):
    """Interface for per-user favourite lookups."""

    @abstractmethod
    def is_favorite(self, user_id: int, event_id: EventId) -> bool:
        ...

    @abstractmethod
    def favorite_event_ids(self, user_id: int) -> set[EventId]:
        """Return the IDs of every event the user has favourited."""
        ...

    @abstractmethod
    def add_favorite(self, favorite: Favorite) -> Favorite:
        """Store a favourite; adding an existing pair returns the stored one."""
        ...

    @abstractmethod
    def remove_favorite(self, user_id: int, event_id: EventId) -> None:
        """Remove a favourite; removing a missing pair is a no-op."""
        ...
