"""Errors raised by the booking core.

The API layer maps each class to a response status; see views.py.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .domain.validation import BookingIssue


class BookingError(Exception):
    """Base class for booking core errors."""


class InvalidRange(BookingError):
    """Malformed or impossible dates or party size."""


class ValidationFailed(BookingError):
    """One or more business rules rejected the booking request."""

    def __init__(self, issues: Sequence["BookingIssue"]):
        self.issues = list(issues)
        super().__init__(
            "Booking validation failed: " + "; ".join(issue.detail for issue in self.issues)
        )

    @property
    def messages(self) -> list[str]:
        return [issue.detail for issue in self.issues]


class ConflictDetected(ValidationFailed):
    """At least one selected room is already booked for the requested dates."""


class NotFound(BookingError):
    """Hotel or booking lookup miss."""


class StorageFailure(BookingError):
    """The database failed while serving the request."""
