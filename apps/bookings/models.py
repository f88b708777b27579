"""Booking models."""

from __future__ import annotations

from django.core.exceptions import ValidationError  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Booking(models.Model):
    """A confirmed stay for one or more rooms of a single hotel.

    Bookings are created only by the booking transaction and never change
    afterwards.
    """

    hotel = models.ForeignKey(
        "hotels.Hotel",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    rooms = models.ManyToManyField(
        "hotels.Room",
        related_name="bookings",
    )
    booking_reference = models.CharField(max_length=32, unique=True, editable=False)
    guest_name = models.CharField(max_length=100)
    people_count = models.PositiveSmallIntegerField()
    check_in = models.DateField()
    check_out = models.DateField()
    total_price = models.DecimalField(max_digits=12, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(check_out__gt=models.F("check_in")),
                name="booking_valid_dates",
            ),
            models.CheckConstraint(
                condition=models.Q(people_count__gte=1),
                name="booking_positive_people_count",
            ),
        ]
        indexes = [
            models.Index(fields=["check_in", "check_out"], name="booking_dates_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.booking_reference} ({self.guest_name})"

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    def save(self, *args, **kwargs):  # type: ignore
        if not self._state.adding:
            raise ValidationError(_("Bookings cannot be modified once created."))
        super().save(*args, **kwargs)
