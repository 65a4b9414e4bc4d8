"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import DomainError, ErrorCode, InvalidParameterError
from events.handlers import serializers
from events.services.analytics import AnalyticsAggregator, CategoryView
from events.services.analytics_service import AnalyticsService
from events.services.event_service import EventService
from events.services.query_engine import EventQueryEngine
from events.stores.django_store import (
    DjangoEventStore,
    DjangoFavoriteStore,
    DjangoTicketStore,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PARAMETER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TICKET_TIER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TICKET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_TICKET_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TICKET_ACCESS_DENIED: status.HTTP_403_FORBIDDEN,
}


def event_service() -> EventService:
    return EventService(
        DjangoEventStore(),
        DjangoTicketStore(),
        DjangoFavoriteStore(),
        EventQueryEngine(page_size=settings.EVENTHUB["PAGE_SIZE"]),
    )


def analytics_service() -> AnalyticsService:
    return AnalyticsService(
        DjangoEventStore(),
        DjangoTicketStore(),
        AnalyticsAggregator(
            growth_window_days=settings.EVENTHUB["GROWTH_WINDOW_DAYS"],
            performance_limit=settings.EVENTHUB["PERFORMANCE_LIMIT"],
        ),
    )


def error_response(request: Request, error: DomainError) -> Response:
    logger.info("%s %s rejected: %s", request.method, request.path, error)
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


def int_param(request: Request, name: str, default: int) -> int:
    raw = request.query_params.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidParameterError(name, "must be an integer") from None


def current_user_id(request: Request) -> int | None:
    return request.user.id if request.user.is_authenticated else None


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request: Request) -> Response:
        try:
            page = int_param(request, "page", 1)
            result = event_service().search_events(
                request.query_params, page=page, user_id=current_user_id(request)
            )
        except DomainError as error:
            return error_response(request, error)
        return Response(serializers.EventPageSerializer(result).data)

    def post(self, request: Request) -> Response:
        body = serializers.EventCreateSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        try:
            service = event_service()
            event = service.create_event(request.user.id, body.validated_data)
            listing = service.get_event(str(event.id), request.user.id)
        except DomainError as error:
            return error_response(request, error)
        return Response(serializers.EventSerializer(listing).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            listing = event_service().get_event(event_id, current_user_id(request))
        except DomainError as error:
            return error_response(request, error)
        return Response(serializers.EventSerializer(listing).data)


class FavoriteView(APIView):
    """Handler for POST /api/events/{event_id}/favorite"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        body = serializers.FavoriteSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        try:
            is_favorite = event_service().set_favorite(
                request.user.id, event_id, body.validated_data["isFavorite"]
            )
        except DomainError as error:
            return error_response(request, error)
        return Response({"success": True, "isFavorite": is_favorite})


class TicketPurchaseView(APIView):
    """Handler for POST /api/events/{event_id}/tickets"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        body = serializers.TicketPurchaseSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        try:
            tickets = event_service().purchase_tickets(
                request.user.id,
                event_id,
                body.validated_data["ticketType"],
                body.validated_data["quantity"],
            )
        except DomainError as error:
            return error_response(request, error)
        return Response(
            serializers.TicketSerializer(tickets, many=True).data,
            status=status.HTTP_201_CREATED,
        )


class TicketListView(APIView):
    """Handler for GET /api/tickets"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        tickets = event_service().list_user_tickets(request.user.id)
        return Response(serializers.TicketSerializer(tickets, many=True).data)


class TicketDetailView(APIView):
    """Handler for GET /api/tickets/{ticket_id}"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request, ticket_id: str) -> Response:
        try:
            ticket = event_service().get_ticket(request.user.id, ticket_id)
        except DomainError as error:
            return error_response(request, error)
        return Response(serializers.TicketSerializer(ticket).data)


class MyEventsView(APIView):
    """Handler for GET /api/my-events"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        listings = event_service().list_user_events(request.user.id)
        return Response(serializers.EventSerializer(listings, many=True).data)


class AnalyticsMetricsView(APIView):
    """Handler for GET /api/analytics/metrics"""

    def get(self, request: Request) -> Response:
        metrics = analytics_service().get_metrics()
        return Response(serializers.AnalyticsMetricsSerializer(metrics).data)


class MonthlyRevenueView(APIView):
    """Handler for GET /api/analytics/revenue?days=N"""

    def get(self, request: Request) -> Response:
        try:
            days = int_param(request, "days", settings.EVENTHUB["DEFAULT_REVENUE_DAYS"])
            stats = analytics_service().get_monthly_revenue(days)
        except DomainError as error:
            return error_response(request, error)
        return Response(serializers.MonthlyStatSerializer(stats, many=True).data)


class CategoryStatsView(APIView):
    """Handler for GET /api/analytics/categories?view=tickets|revenue"""

    def get(self, request: Request) -> Response:
        view = CategoryView.parse(request.query_params.get("view"))
        stats = analytics_service().get_category_stats(view)
        return Response(serializers.EventCategoryStatSerializer(stats, many=True).data)


class EventPerformanceView(APIView):
    """Handler for GET /api/analytics/events-performance"""

    def get(self, request: Request) -> Response:
        performance = analytics_service().get_event_performance()
        return Response(serializers.EventPerformanceSerializer(performance, many=True).data)
