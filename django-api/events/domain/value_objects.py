"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TicketId:
    """Unique identifier for a Ticket."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


class Category(Enum):
    """Canonical event categories."""

    MUSIC = "Music"
    TECHNOLOGY = "Technology"
    ART_CULTURE = "Art & Culture"
    SPORTS = "Sports"
    FOOD_DRINK = "Food & Drink"
    BUSINESS = "Business"


# Short filter codes used by clients, mapped to canonical categories.
CATEGORY_CODES: dict[str, Category] = {
    "music": Category.MUSIC,
    "tech": Category.TECHNOLOGY,
    "art": Category.ART_CULTURE,
    "sports": Category.SPORTS,
    "food": Category.FOOD_DRINK,
    "business": Category.BUSINESS,
}


class TicketTier(Enum):
    """Ticket tiers, cheapest first."""

    BASIC = "Basic"
    STANDARD = "Standard"
    VIP = "VIP"
