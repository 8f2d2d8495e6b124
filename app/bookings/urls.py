# bookings/urls.py
from django.urls import path

from .views import AvailabilityView, BookingCollectionView, BookingDetailView


def build_urlpatterns(storage):
    """Availability and booking routes bound to the shared storage context"""
    return [
        path('available', AvailabilityView.as_view(storage=storage), name='available'),
        path('booking', BookingCollectionView.as_view(storage=storage), name='booking-collection'),
        path('booking/<uuid:booking_id>', BookingDetailView.as_view(storage=storage), name='booking-detail'),
    ]

# The resulting URL patterns will be:
# - GET    /available?date=<label>  -> free slots per service on a date
# - GET    /booking?patient=<email> -> the token holder's bookings
# - POST   /booking                 -> book a slot (duplicate answers success=false)
# - GET    /booking/{id}            -> one booking
# - PATCH  /booking/{id}            -> record payment, mark paid
