# catalog/urls.py
from django.urls import path

from .views import ServiceListView


def build_urlpatterns(storage):
    """Catalog routes bound to the shared storage context"""
    return [
        path('services', ServiceListView.as_view(storage=storage), name='services'),
    ]

# The resulting URL patterns will be:
# - GET    /services                -> list treatment services (id, name)
