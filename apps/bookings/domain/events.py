"""
Booking Domain Events

Published after the booking transaction commits.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from shared.domain.base import DomainEvent
from shared.domain.value_objects import DateRange


@dataclass
class BookingCreated(DomainEvent):
    """
    Event: A new booking was committed

    Triggers:
    - Log the confirmation for the hotel's audit trail
    """
    booking_id: int
    booking_reference: str
    hotel_id: int
    room_ids: List[int] = field(default_factory=list)
    dates: DateRange = None
    people_count: int = 0
    total_price: Decimal = Decimal('0.00')

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update({
            'booking_id': self.booking_id,
            'booking_reference': self.booking_reference,
            'hotel_id': self.hotel_id,
            'room_ids': list(self.room_ids),
            'check_in': self.dates.start_date.isoformat() if self.dates else None,
            'check_out': self.dates.end_date.isoformat() if self.dates else None,
            'people_count': self.people_count,
            'total_price': str(self.total_price),
        })
        return data
