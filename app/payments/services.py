# payments/services.py
import logging
from decimal import Decimal
from typing import Any, Dict, Optional

from django.conf import settings
from django.db import transaction

from bookings.models import Booking
from core.storage import ClinicStorage
from .models import Payment
from .providers import get_default_payment_provider

logger = logging.getLogger(__name__)


class PaymentService:
    """
    Payment intents through the gateway and payment records for bookings
    """

    def __init__(self, storage: ClinicStorage):
        self.storage = storage

    def create_payment_intent(self, price: Decimal, currency: Optional[str] = None,
                              metadata: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Create a card payment intent for ``price`` (major currency units)

        Raises:
            PaymentProviderConfigError: If no provider is usable
            PaymentCreateError: If the gateway rejects the request
        """
        currency = (currency or settings.PAYMENT_SETTINGS['DEFAULT_CURRENCY']).lower()
        provider = get_default_payment_provider()
        return provider.create_payment_intent(price, currency, metadata=metadata)

    @transaction.atomic
    def record_payment(self, booking: Booking, transaction_id: str,
                       amount: Optional[Decimal] = None, currency: Optional[str] = None) -> Booking:
        """
        Store the payment and mark the booking paid with its transaction id
        """
        payment = self.storage.payments.create(
            booking=booking,
            transaction_id=transaction_id,
            amount=amount,
            currency=(currency or settings.PAYMENT_SETTINGS['DEFAULT_CURRENCY']).lower(),
        )

        booking.paid = True
        booking.transaction_id = transaction_id
        booking.save(update_fields=['paid', 'transaction_id', 'updated_at'])

        logger.info(f"Payment {payment.id} recorded for booking {booking.id}")
        return booking
