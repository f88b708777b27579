"""Hotel inventory models."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.exceptions import ValidationError  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models, transaction  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


def max_rooms_per_hotel() -> int:
    return settings.HOTEL_BOOKING["MAX_ROOMS_PER_HOTEL"]


class Hotel(models.Model):
    """A hotel and its contact details."""

    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255, blank=True)
    phone_number = models.CharField(max_length=32, blank=True)
    email = models.EmailField(blank=True)

    class Meta:
        verbose_name = _("Hotel")
        verbose_name_plural = _("Hotels")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["name"], name="hotel_name_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class RoomType(models.Model):
    """Room category shared across hotels (Single, Double, Deluxe...)."""

    name = models.CharField(max_length=100, unique=True)
    max_occupancy = models.PositiveSmallIntegerField(validators=[MinValueValidator(1)])

    class Meta:
        verbose_name = _("Room type")
        verbose_name_plural = _("Room types")
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(max_occupancy__gte=1),
                name="room_type_positive_occupancy",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} (max {self.max_occupancy})"


class Room(models.Model):
    """A bookable room. It belongs to exactly one hotel for its lifetime."""

    hotel = models.ForeignKey(
        Hotel,
        on_delete=models.CASCADE,
        related_name="rooms",
    )
    room_type = models.ForeignKey(
        RoomType,
        on_delete=models.PROTECT,
        related_name="rooms",
    )
    room_number = models.CharField(max_length=20)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("Nightly price."),
    )

    class Meta:
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        ordering = ["hotel__name", "room_number"]
        constraints = [
            models.UniqueConstraint(
                fields=["hotel", "room_number"],
                name="unique_room_number_per_hotel",
            ),
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="room_non_negative_price",
            ),
        ]

    def __str__(self) -> str:
        return f"Room {self.room_number} @ {self.hotel_id}"

    def clean(self) -> None:
        if not self._state.adding and self.pk is not None:
            stored_hotel_id = (
                Room.objects.filter(pk=self.pk).values_list("hotel_id", flat=True).first()
            )
            if stored_hotel_id is not None and stored_hotel_id != self.hotel_id:
                raise ValidationError(_("A room cannot be moved to another hotel."))

        if self._state.adding:
            limit = max_rooms_per_hotel()
            current = Room.objects.filter(hotel_id=self.hotel_id).count()
            if current >= limit:
                raise ValidationError(
                    _("Hotel cannot have more than %(limit)s rooms. Current hotel has %(current)s rooms.")
                    % {"limit": limit, "current": current}
                )

    def save(self, *args, **kwargs):  # type: ignore
        with transaction.atomic():
            if self._state.adding:
                # Serialize room inserts per hotel so the cap holds under concurrency
                list(Hotel.objects.select_for_update().filter(pk=self.hotel_id).values_list("pk", flat=True))
            self.clean()
            super().save(*args, **kwargs)
