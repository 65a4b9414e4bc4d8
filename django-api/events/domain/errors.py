"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_EVENT = "INVALID_EVENT"
    INVALID_PARAMETER = "INVALID_PARAMETER"
    INVALID_TICKET_TIER = "INVALID_TICKET_TIER"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    INVALID_TICKET_ID = "INVALID_TICKET_ID"
    TICKET_ACCESS_DENIED = "TICKET_ACCESS_DENIED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        object.__setattr__(self, "event_id", event_id)


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidEventError(DomainError):
    """Raised when event data violates an Event invariant."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT,
            message=f"Invalid event: {reason}",
        )


class InvalidParameterError(DomainError):
    """Raised when a query or command argument is malformed."""

    def __init__(self, parameter: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PARAMETER,
            message=f"Invalid value for '{parameter}': {reason}",
        )
        object.__setattr__(self, "parameter", parameter)


class InvalidTicketTierError(DomainError):
    """Raised when a purchase names a tier that does not exist."""

    def __init__(self, tier: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_TIER,
            message=f"Unknown ticket type '{tier}'",
        )


class TicketNotFoundError(DomainError):
    """Raised when a ticket is not found."""

    def __init__(self, ticket_id: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        object.__setattr__(self, "ticket_id", ticket_id)


class InvalidTicketIdError(DomainError):
    """Raised when a ticket ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_ID,
            message="Invalid ticket ID format",
        )


class TicketAccessDeniedError(DomainError):
    """Raised when a user asks for a ticket they do not own."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_ACCESS_DENIED,
            message="Access denied",
        )
