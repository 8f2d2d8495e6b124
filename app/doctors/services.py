# doctors/services.py
import logging
from typing import Any, Dict, List, Tuple

from core.storage import ClinicStorage
from .models import Doctor

logger = logging.getLogger(__name__)


class DoctorService:
    """
    Doctor roster management
    """

    def __init__(self, storage: ClinicStorage):
        self.storage = storage

    def list_doctors(self) -> List[Doctor]:
        return list(self.storage.doctors.all())

    def add_doctor(self, data: Dict[str, Any]) -> Tuple[Doctor, bool]:
        """
        Add a doctor unless one with the same email exists

        Same check-then-insert shape as bookings: not atomic.

        Returns:
            (doctor, created)
        """
        existing = self.storage.doctors.filter(email=data['email']).first()
        if existing:
            logger.info(f"Duplicate doctor rejected: {data['email']}")
            return existing, False

        doctor = self.storage.doctors.create(**data)
        logger.info(f"Doctor added: {doctor.email}")
        return doctor, True

    def remove_doctor(self, email: str) -> int:
        """
        Delete doctors with this email, returning how many were removed
        """
        deleted, _ = self.storage.doctors.filter(email=email).delete()
        if deleted:
            logger.info(f"Doctor removed: {email}")
        return deleted
