# bookings/tests/test_services.py
import uuid

from django.test import TestCase

from bookings.models import Booking
from bookings.services import (
    BookingService,
    BookingNotFoundError,
    InvalidBookingSlotError,
)
from core.storage import ClinicStorage
from factories.bookings import BookingFactory
from factories.catalog import ServiceFactory


class BookingServiceTest(TestCase):
    """Test BookingService functionality"""

    def setUp(self):
        self.service = ServiceFactory(name='Teeth Cleaning', slots=['9:00 AM', '10:00 AM', '11:00 AM'])
        self.booking_service = BookingService(ClinicStorage.from_models())
        self.booking_data = {
            'treatment_name': 'Teeth Cleaning',
            'patient_email': 'patient@example.com',
            'patient_name': 'Pat Patient',
            'date': 'Jan 5, 2024',
            'time_slot': '10:00 AM',
        }

    def test_create_booking(self):
        """Test a new booking is inserted"""
        booking, created = self.booking_service.create_booking(dict(self.booking_data))

        self.assertTrue(created)
        self.assertEqual(Booking.objects.count(), 1)
        self.assertEqual(booking.time_slot, '10:00 AM')
        self.assertFalse(booking.paid)

    def test_duplicate_booking_returns_existing(self):
        """Test same treatment, patient and date is not inserted twice"""
        first, _ = self.booking_service.create_booking(dict(self.booking_data))

        data = dict(self.booking_data, time_slot='11:00 AM')
        existing, created = self.booking_service.create_booking(data)

        self.assertFalse(created)
        self.assertEqual(existing.pk, first.pk)
        self.assertEqual(Booking.objects.count(), 1)

    def test_same_patient_other_date_is_not_duplicate(self):
        self.booking_service.create_booking(dict(self.booking_data))

        _, created = self.booking_service.create_booking(
            dict(self.booking_data, date='Jan 6, 2024')
        )

        self.assertTrue(created)
        self.assertEqual(Booking.objects.count(), 2)

    def test_duplicate_checked_before_slot(self):
        """Test an existing booking is returned even when the new slot is invalid"""
        first, _ = self.booking_service.create_booking(dict(self.booking_data))

        existing, created = self.booking_service.create_booking(
            dict(self.booking_data, time_slot='7:00 PM')
        )

        self.assertFalse(created)
        self.assertEqual(existing.pk, first.pk)

    def test_unknown_treatment_rejected(self):
        with self.assertRaises(InvalidBookingSlotError):
            self.booking_service.create_booking(dict(self.booking_data, treatment_name='Unknown'))

    def test_slot_not_in_service_rejected(self):
        with self.assertRaises(InvalidBookingSlotError):
            self.booking_service.create_booking(dict(self.booking_data, time_slot='7:00 PM'))

    def test_get_availability_uses_bookings_of_date(self):
        """Test availability reads the catalog and the date's bookings"""
        BookingFactory(service=self.service, date='Jan 5, 2024', time_slot='9:00 AM')
        BookingFactory(service=self.service, date='Jan 6, 2024', time_slot='10:00 AM')

        results = self.booking_service.get_availability('Jan 5, 2024')

        self.assertEqual(len(results), 1)
        self.assertEqual(results[0].name, 'Teeth Cleaning')
        self.assertEqual(results[0].slots, ['10:00 AM', '11:00 AM'])

    def test_get_patient_bookings(self):
        BookingFactory(service=self.service, patient_email='a@example.com')
        BookingFactory(service=self.service, patient_email='b@example.com')

        bookings = self.booking_service.get_patient_bookings('a@example.com')

        self.assertEqual(len(bookings), 1)
        self.assertEqual(bookings[0].patient_email, 'a@example.com')

    def test_get_booking_not_found(self):
        with self.assertRaises(BookingNotFoundError):
            self.booking_service.get_booking(uuid.uuid4())
