"""API views for the booking domain."""

from __future__ import annotations

import logging

from django.db import DatabaseError  # type: ignore
from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from .application.command_handlers import CreateBookingCommand, CreateBookingHandler
from .application.queries import BookingQueryService
from .domain.availability import AvailabilityEngine
from .exceptions import (
    BookingError,
    ConflictDetected,
    InvalidRange,
    NotFound,
    StorageFailure,
    ValidationFailed,
)
from .repositories import DjangoInventoryStore
from .serializers import (
    AvailabilityQuerySerializer,
    AvailabilitySearchSerializer,
    BookingCreateSerializer,
    BookingSerializer,
)

logger = logging.getLogger(__name__)


def booking_error_response(exc: BookingError, server_error_message: str) -> Response:
    """Translate a booking core error into an HTTP response."""
    if isinstance(exc, InvalidRange):
        return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, ValidationFailed):
        body = {"error": str(exc), "issues": [issue.to_dict() for issue in exc.issues]}
        code = status.HTTP_409_CONFLICT if isinstance(exc, ConflictDetected) else status.HTTP_400_BAD_REQUEST
        return Response(body, status=code)
    if isinstance(exc, NotFound):
        return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)
    # StorageFailure and anything unexpected: no internals leak to the client
    return Response({"error": server_error_message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class BookingAPIView(APIView):
    permission_classes = [permissions.AllowAny]

    def get_store(self) -> DjangoInventoryStore:
        return DjangoInventoryStore()


class AvailableRoomsView(BookingAPIView):
    """Hotels with enough free rooms for the requested stay."""

    server_error_message = "An error occurred while searching for available rooms"

    def get(self, request):  # type: ignore
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        engine = AvailabilityEngine(self.get_store())
        try:
            search = engine.search(**query.validated_data)
        except BookingError as exc:
            return booking_error_response(exc, self.server_error_message)
        except DatabaseError:
            logger.exception("Availability search failed")
            return booking_error_response(StorageFailure(), self.server_error_message)

        return Response(AvailabilitySearchSerializer(search).data)


class BookingCreateView(BookingAPIView):
    """Reserve rooms. 201 on success, 409 when a room is taken, 400 for bad input."""

    server_error_message = "An error occurred while creating the booking"

    def post(self, request):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        handler = CreateBookingHandler(self.get_store())
        try:
            booking = handler.handle(CreateBookingCommand(**serializer.validated_data))
        except BookingError as exc:
            return booking_error_response(exc, self.server_error_message)

        booking = BookingQueryService(self.get_store()).get_by_reference(booking.booking_reference)
        return Response(
            BookingSerializer(booking).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": f"{request.path.rstrip('/')}/{booking.booking_reference}/"},
        )


class BookingDetailView(BookingAPIView):
    """Booking lookup by its public reference."""

    server_error_message = "An error occurred while loading the booking"

    def get(self, request, reference: str):  # type: ignore
        try:
            booking = BookingQueryService(self.get_store()).get_by_reference(reference)
        except BookingError as exc:
            return booking_error_response(exc, self.server_error_message)
        except DatabaseError:
            logger.exception(f"Loading booking {reference} failed")
            return booking_error_response(StorageFailure(), self.server_error_message)
        return Response(BookingSerializer(booking).data)
