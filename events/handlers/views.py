"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details outside development
"""

import logging
from typing import Any

from django.conf import settings
from django.http import QueryDict
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import (
    ConflictError,
    DomainError,
    EventNotFoundError,
    StoreError,
    ValidationError,
)
from events.domain.normalization import ARRAY_FIELDS, parse_array_field
from events.handlers.serializers import BookingSerializer, EventSerializer, PaginationSerializer
from events.services import BookingService, EventService
from events.stores import get_booking_store, get_event_store

logger = logging.getLogger(__name__)


def error_status(error: DomainError) -> int:
    if isinstance(error, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(error, EventNotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def domain_error_response(error: DomainError) -> Response:
    return Response(
        {"message": error.message, "code": error.code.value},
        status=error_status(error),
    )


def server_error_response(message: str, exc: Exception) -> Response:
    """500 response; raw detail only when EXPOSE_ERROR_DETAILS is on."""
    body: dict[str, Any] = {"message": message}
    if settings.EXPOSE_ERROR_DETAILS:
        body["error"] = getattr(exc, "detail", "") or str(exc)
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def request_payload(request: Request) -> dict[str, Any]:
    """Plain dict from a JSON body or a form submission.

    Form posts send agenda and tags as repeated fields, or as one
    JSON-encoded array from older clients.
    """
    data = request.data
    if not isinstance(data, QueryDict):
        return dict(data) if isinstance(data, dict) else {}
    payload: dict[str, Any] = {key: data.get(key) for key in data.keys()}
    for key in ARRAY_FIELDS:
        if key in data:
            payload[key] = parse_array_field(data.getlist(key))
    return payload


def int_param(request: Request, name: str) -> int | None:
    try:
        return int(request.query_params.get(name, ""))
    except ValueError:
        return None


def event_service() -> EventService:
    return EventService(get_event_store())


def booking_service() -> BookingService:
    return BookingService(get_booking_store(), get_event_store())


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        try:
            page = event_service().list_events(
                page=int_param(request, "page"), limit=int_param(request, "limit")
            )
        except Exception as exc:
            logger.exception("Error fetching events")
            return server_error_response("Failed to fetch events", exc)

        return Response(
            {
                "message": "Events fetched successfully",
                "events": EventSerializer(page.items, many=True).data,
                "pagination": PaginationSerializer(page).data,
            }
        )

    def post(self, request: Request) -> Response:
        payload = request_payload(request)
        try:
            event = event_service().create_event(payload)
        except StoreError as exc:
            logger.exception("Error creating event")
            return server_error_response("Failed to create event", exc)
        except DomainError as exc:
            return domain_error_response(exc)
        except Exception as exc:
            logger.exception("Error creating event")
            return server_error_response("Failed to create event", exc)

        return Response(
            {"message": "Event created successfully", "event": EventSerializer(event).data},
            status=status.HTTP_201_CREATED,
        )


class EventDetailView(APIView):
    """Handler for GET /api/events/{slug}"""

    def get(self, request: Request, slug: str) -> Response:
        try:
            event = event_service().get_event_by_slug(slug)
        except StoreError as exc:
            logger.exception("Error fetching event by slug")
            return server_error_response("Failed to fetch event", exc)
        except DomainError as exc:
            return domain_error_response(exc)
        except Exception as exc:
            logger.exception("Error fetching event by slug")
            return server_error_response("Failed to fetch event", exc)

        return Response({"message": "Event fetched successfully", "event": EventSerializer(event).data})


class BookingListView(APIView):
    """Handler for GET/POST /api/bookings"""

    def get(self, request: Request) -> Response:
        event_id = request.query_params.get("eventId")
        try:
            bookings = booking_service().list_bookings(event_id or None)
        except StoreError as exc:
            logger.exception("Error fetching bookings")
            return server_error_response("Failed to fetch bookings", exc)
        except DomainError as exc:
            return domain_error_response(exc)
        except Exception as exc:
            logger.exception("Error fetching bookings")
            return server_error_response("Failed to fetch bookings", exc)

        message = "Bookings fetched successfully" if event_id else "All bookings fetched successfully"
        return Response(
            {
                "message": message,
                "bookings": BookingSerializer(bookings, many=True).data,
                "count": len(bookings),
            }
        )

    def post(self, request: Request) -> Response:
        payload = request_payload(request)
        try:
            booking = booking_service().create_booking(payload)
        except StoreError as exc:
            logger.exception("Error creating booking")
            return server_error_response("Failed to create booking", exc)
        except DomainError as exc:
            return domain_error_response(exc)
        except Exception as exc:
            logger.exception("Error creating booking")
            return server_error_response("Failed to create booking", exc)

        return Response(
            {"message": "Booking created successfully", "booking": BookingSerializer(booking).data},
            status=status.HTTP_201_CREATED,
        )
