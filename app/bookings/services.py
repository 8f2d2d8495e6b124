# bookings/services.py
import logging
from typing import Any, Dict, List, Tuple

from core.storage import ClinicStorage
from .availability import AvailabilityResult, compute_availability
from .models import Booking

logger = logging.getLogger(__name__)


# ============================================================================
# CUSTOM EXCEPTIONS
# ============================================================================

class BookingServiceError(Exception):
    """Base exception for booking service related errors"""
    pass


class BookingNotFoundError(BookingServiceError):
    """Raised when booking is not found"""
    pass


class InvalidBookingSlotError(BookingServiceError):
    """Raised when the treatment is unknown or the slot is not one of its slots"""
    pass


# ============================================================================
# BOOKING SERVICE
# ============================================================================

class BookingService:
    """
    Booking creation with duplicate guard, lookups and availability
    """

    def __init__(self, storage: ClinicStorage):
        self.storage = storage

    def get_availability(self, date: str) -> List[AvailabilityResult]:
        """
        Every service with its slots narrowed to those still free on ``date``
        """
        services = list(self.storage.services.all())
        bookings = self.storage.bookings.filter(date=date).only(
            'treatment_name', 'date', 'time_slot'
        )
        return compute_availability(services, bookings, date)

    def find_duplicate(self, treatment_name: str, patient_email: str, date: str):
        return self.storage.bookings.filter(
            treatment_name=treatment_name,
            patient_email=patient_email,
            date=date,
        ).first()

    def create_booking(self, data: Dict[str, Any]) -> Tuple[Booking, bool]:
        """
        Insert a booking unless the patient already booked this treatment on this date

        The existence check and the insert are separate statements, so two
        concurrent requests can still both insert.

        Args:
            data: Validated booking fields (model field names)

        Returns:
            (booking, created): the new booking, or the existing one with created=False

        Raises:
            InvalidBookingSlotError: If a new booking names an unknown treatment or slot
        """
        existing = self.find_duplicate(
            data['treatment_name'], data['patient_email'], data['date']
        )
        if existing:
            logger.info(
                f"Duplicate booking rejected: {data['patient_email']} / "
                f"{data['treatment_name']} / {data['date']}"
            )
            return existing, False

        self._validate_slot(data['treatment_name'], data['time_slot'])

        booking = self.storage.bookings.create(**data)
        logger.info(f"Booking {booking.id} created for {booking.patient_email}")
        return booking, True

    def _validate_slot(self, treatment_name: str, time_slot: str):
        service = self.storage.services.filter(name=treatment_name).first()
        if service is None:
            raise InvalidBookingSlotError(f"Unknown treatment: {treatment_name}")
        if time_slot not in service.slots:
            raise InvalidBookingSlotError(f"{time_slot} is not a slot of {treatment_name}")

    def get_patient_bookings(self, patient_email: str) -> List[Booking]:
        return list(self.storage.bookings.filter(patient_email=patient_email))

    def get_booking(self, booking_id) -> Booking:
        """
        Raises:
            BookingNotFoundError: If no booking has this id
        """
        try:
            return self.storage.bookings.get(pk=booking_id)
        except Booking.DoesNotExist:
            raise BookingNotFoundError(f"Booking {booking_id} not found")
