import logging
import random
import typing as t
from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from events import models
from events.domain import Category, TicketTier
from events.services.event_service import tier_price
from events.stores.django_store import to_domain_event

logger = logging.getLogger(__name__)

SAMPLES = [
    ("Summer Music Festival", Category.MUSIC, "Central Park, New York"),
    ("Tech Conference", Category.TECHNOLOGY, "Convention Center, San Francisco"),
    ("Modern Art Exhibition", Category.ART_CULTURE, "Metropolitan Museum, Chicago"),
    ("Championship Basketball Game", Category.SPORTS, "Staples Center, Los Angeles"),
    ("Food & Wine Festival", Category.FOOD_DRINK, "Lincoln Center, New York"),
    ("Business Leadership Summit", Category.BUSINESS, "Moscone Center, San Francisco"),
]


class Command(BaseCommand):
    """Populate the database with sample events, tickets and favourites.

    Events start one day apart from now, tickets are spread over the last
    thirty days and the demo user favourites the first three events.
    """

    help = "Seed sample events, tickets and favourites for local development."

    def add_arguments(self, parser) -> None:
        parser.add_argument("--events", type=int, default=18, help="Number of events to create.")
        parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable data.")

    @transaction.atomic
    def handle(self, *args: t.Any, **options: t.Any) -> None:
        rng = random.Random(options["seed"])
        now = timezone.now()
        user, _ = get_user_model().objects.get_or_create(
            username="johndoe",
            defaults={"email": "john.doe@example.com", "first_name": "John", "last_name": "Doe"},
        )
        buyer, _ = get_user_model().objects.get_or_create(username="guest-buyer")

        ticket_total = 0
        for i in range(options["events"]):
            name, category, location = SAMPLES[i % len(SAMPLES)]
            event = models.Event.objects.create(
                name=name,
                description=f"Description for {name}",
                starts_at=now + timedelta(days=i),
                location=location,
                category=category.value,
                price_min=Decimal(25 + i * 5),
                price_max=Decimal(100 + i * 10),
                capacity=300 + i * 50,
                creator=user,
            )
            # auto_now_add ignores explicit values on create.
            models.Event.objects.filter(pk=event.pk).update(created_at=now - timedelta(days=10))

            if i < 3:
                models.Favorite.objects.get_or_create(user=user, event=event)

            prices = {tier: tier_price(to_domain_event(event), tier).amount for tier in TicketTier}
            tickets = []
            for j in range(50 + rng.randrange(200)):
                tier = (TicketTier.VIP, TicketTier.STANDARD, TicketTier.BASIC)[j % 3]
                tickets.append(
                    models.Ticket(
                        event=event,
                        user=user if j < 10 else buyer,
                        ticket_type=tier.value,
                        price=prices[tier],
                        purchased_at=now - timedelta(seconds=rng.random() * 30 * 86400),
                        is_used=rng.random() > 0.7,
                    )
                )
            models.Ticket.objects.bulk_create(tickets)
            ticket_total += len(tickets)

        logger.info("Seeded %d events and %d tickets", options["events"], ticket_total)
        self.stdout.write(
            self.style.SUCCESS(f"Created {options['events']} events and {ticket_total} tickets.")
        )
