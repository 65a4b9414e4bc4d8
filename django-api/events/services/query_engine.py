"""Filtering and pagination over a snapshot of events.

The engine holds no state between calls and never touches a store;
callers pass in the events to search and the moment to resolve
relative date buckets against.
"""

import math
from collections.abc import Iterable
from datetime import datetime

from events.domain import Event, EventFilter, EventPage, Pagination
from events.domain.errors import InvalidParameterError

DEFAULT_PAGE_SIZE = 9


class EventQueryEngine:
    """Applies an EventFilter, orders by start time and slices one page."""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size < 1:
            raise InvalidParameterError("page_size", "must be a positive integer")
        self.page_size = page_size

    def filter(self, events: Iterable[Event], event_filter: EventFilter, now: datetime) -> list[Event]:
        """Return every matching event, soonest first."""
        checks = event_filter.predicates(now)
        matches = [e for e in events if all(check(e) for check in checks)]
        matches.sort(key=lambda e: (e.starts_at, str(e.id)))
        return matches

    def query(
        self,
        events: Iterable[Event],
        event_filter: EventFilter,
        page: int,
        now: datetime,
    ) -> EventPage:
        """Return one page of matching events.

        Pages are 1-based. A page past the end yields no events; a search
        with no matches reports zero total pages.

        Raises:
            InvalidParameterError: If page is below 1.
        """
        if page < 1:
            raise InvalidParameterError("page", "must be a positive integer")

        matches = self.filter(events, event_filter, now)
        total_items = len(matches)
        start = (page - 1) * self.page_size

        return EventPage(
            events=tuple(matches[start : start + self.page_size]),
            pagination=Pagination(
                current_page=page,
                total_pages=math.ceil(total_items / self.page_size),
                total_items=total_items,
                page_size=self.page_size,
            ),
        )
