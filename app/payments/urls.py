# payments/urls.py
from django.urls import path

from .views import CreatePaymentIntentView


def build_urlpatterns(storage):
    """Payment routes bound to the shared storage context"""
    return [
        path('create-payment-intent', CreatePaymentIntentView.as_view(storage=storage), name='create-payment-intent'),
    ]

# The resulting URL patterns will be:
# - POST   /create-payment-intent   -> {clientSecret} for a card payment intent
