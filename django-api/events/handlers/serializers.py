"""Serializers for transforming domain models to API responses and
validating request bodies.

Event fields keep the snake_case names clients already consume; pagination
and analytics payloads use camelCase.
"""

from rest_framework import serializers

from events.domain import Category


def _money(source: str | None = None) -> serializers.DecimalField:
    return serializers.DecimalField(
        source=source, max_digits=None, decimal_places=2, coerce_to_string=False
    )


class EventFieldsSerializer(serializers.Serializer):
    """Fields read from an object's ``event`` attribute."""

    id = serializers.UUIDField(source="event.id.value")
    name = serializers.CharField(source="event.name")
    description = serializers.CharField(source="event.description")
    date = serializers.DateTimeField(source="event.starts_at")
    location = serializers.CharField(source="event.location")
    category = serializers.CharField(source="event.category.value")
    price_min = _money("event.price_min.amount")
    price_max = _money("event.price_max.amount")
    image_url = serializers.CharField(source="event.image_url", allow_null=True)
    creator_id = serializers.IntegerField(source="event.creator_id")
    created_at = serializers.DateTimeField(source="event.created_at")
    updated_at = serializers.DateTimeField(source="event.updated_at")


class EventSerializer(EventFieldsSerializer):
    """Serializer for EventListing domain model."""

    capacity = serializers.IntegerField(source="event.capacity.value")
    is_favorite = serializers.BooleanField()
    attendees_count = serializers.IntegerField()
    price_range = serializers.CharField()


class PaginationSerializer(serializers.Serializer):
    currentPage = serializers.IntegerField(source="current_page")
    totalPages = serializers.IntegerField(source="total_pages")
    totalItems = serializers.IntegerField(source="total_items")
    pageSize = serializers.IntegerField(source="page_size")


class EventPageSerializer(serializers.Serializer):
    events = EventSerializer(many=True)
    pagination = PaginationSerializer()


class EventCreateSerializer(serializers.Serializer):
    """Validates the body of an event creation request."""

    name = serializers.CharField(max_length=255)
    description = serializers.CharField()
    date = serializers.DateTimeField(source="starts_at")
    location = serializers.CharField(max_length=255)
    category = serializers.ChoiceField(choices=[c.value for c in Category])
    price_min = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    price_max = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    capacity = serializers.IntegerField(min_value=1)
    image_url = serializers.URLField(max_length=500, required=False, allow_null=True)

    def validate(self, attrs):
        if attrs["price_min"] > attrs["price_max"]:
            raise serializers.ValidationError(
                {"price_min": "price_min cannot exceed price_max"}
            )
        return attrs


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.UUIDField(source="id.value")
    event_id = serializers.UUIDField(source="event_id.value")
    user_id = serializers.IntegerField()
    ticket_type = serializers.CharField(source="tier.value")
    price = _money("price.amount")
    purchased_at = serializers.DateTimeField()
    is_used = serializers.BooleanField()


class TicketPurchaseSerializer(serializers.Serializer):
    ticketType = serializers.CharField()
    quantity = serializers.IntegerField(default=1)


class FavoriteSerializer(serializers.Serializer):
    isFavorite = serializers.BooleanField()


class AnalyticsMetricsSerializer(serializers.Serializer):
    ticketsSold = serializers.IntegerField(source="tickets_sold")
    ticketsGrowth = serializers.IntegerField(source="tickets_growth")
    revenue = _money()
    revenueGrowth = serializers.IntegerField(source="revenue_growth")
    activeEvents = serializers.IntegerField(source="active_events")
    eventsGrowth = serializers.IntegerField(source="events_growth")
    attendees = serializers.IntegerField()
    attendeesGrowth = serializers.IntegerField(source="attendees_growth")


class MonthlyStatSerializer(serializers.Serializer):
    month = serializers.CharField()
    revenue = _money()


class EventCategoryStatSerializer(serializers.Serializer):
    category = serializers.CharField(source="category.value")
    ticketCount = serializers.IntegerField(source="ticket_count")
    revenue = _money()


class EventPerformanceSerializer(EventFieldsSerializer):
    tickets_sold = serializers.IntegerField()
    capacity = serializers.IntegerField()
    revenue = _money()
    fill_rate = serializers.FloatField()
    status = serializers.CharField(source="status.value")
