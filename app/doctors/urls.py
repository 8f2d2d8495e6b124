# doctors/urls.py
from django.urls import path

from .views import DoctorCollectionView, DoctorDeleteView


def build_urlpatterns(storage):
    """Doctor roster routes bound to the shared storage context"""
    return [
        path('doctor', DoctorCollectionView.as_view(storage=storage), name='doctor-collection'),
        path('doctor/<str:email>', DoctorDeleteView.as_view(storage=storage), name='doctor-delete'),
    ]

# The resulting URL patterns will be:
# - GET    /doctor                  -> list doctors (admins only)
# - POST   /doctor                  -> add doctor unless the email exists (admins only)
# - DELETE /doctor/{email}          -> remove doctor, {deletedCount}
