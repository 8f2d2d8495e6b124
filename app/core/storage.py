# core/storage.py
"""
Storage context shared by views and services.

Every collection the API reads or writes is reached through one
``ClinicStorage`` instance built at URL configuration time and passed to each
view, instead of being looked up from module globals.
"""
from dataclasses import dataclass

from django.db import models


@dataclass(frozen=True)
class ClinicStorage:
    services: models.Manager
    bookings: models.Manager
    users: models.Manager
    doctors: models.Manager
    payments: models.Manager

    @classmethod
    def from_models(cls) -> 'ClinicStorage':
        """Build the context from the installed models' default managers"""
        from catalog.models import Service
        from bookings.models import Booking
        from users.models import User
        from doctors.models import Doctor
        from payments.models import Payment

        return cls(
            services=Service.objects,
            bookings=Booking.objects,
            users=User.objects,
            doctors=Doctor.objects,
            payments=Payment.objects,
        )
