# bookings/availability.py
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional


@dataclass(frozen=True)
class AvailabilityResult:
    """Copy of a service whose slots are narrowed to the free ones"""
    name: str
    slots: List[str] = field(default_factory=list)
    id: Optional[Any] = None
    price: int = 0

    @classmethod
    def from_service(cls, service, slots: List[str]) -> 'AvailabilityResult':
        return cls(
            name=service.name,
            slots=slots,
            id=getattr(service, 'id', None),
            price=getattr(service, 'price', 0) or 0,
        )


def compute_availability(services: Iterable, bookings: Iterable, date: str) -> List[AvailabilityResult]:
    """
    Subtract booked slots from every service's slot list for one date

    Args:
        services: Objects with ``name`` and ordered ``slots``
        bookings: Objects with ``treatment_name``, ``date`` and ``time_slot``
        date: Date label, matched by exact string equality

    Returns:
        One result per service in catalog order. Fully booked services keep
        their entry with an empty slot list.
    """
    booked_by_treatment = {}
    for booking in bookings:
        if booking.date != date:
            continue
        booked_by_treatment.setdefault(booking.treatment_name, set()).add(booking.time_slot)

    results = []
    for service in services:
        booked = booked_by_treatment.get(service.name, set())
        free = [slot for slot in service.slots if slot not in booked]
        results.append(AvailabilityResult.from_service(service, free))
    return results
