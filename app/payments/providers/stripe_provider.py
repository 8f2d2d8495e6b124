# payments/providers/stripe_provider.py
import stripe
from typing import Dict, Any, Optional
from decimal import Decimal
from django.conf import settings
import logging

from .base_provider import (
    BasePaymentProvider,
    PaymentProviderConfigError,
    PaymentCreateError,
)

logger = logging.getLogger(__name__)


class StripePaymentProvider(BasePaymentProvider):
    """
    Stripe payment provider implementation
    Creates card payment intents whose client secret the frontend confirms
    """

    def __init__(self):
        super().__init__()
        stripe.api_key = self.config['SECRET_KEY']
        stripe.api_version = self.config.get('API_VERSION', '2023-10-16')

    def _get_provider_name(self) -> str:
        return 'stripe'

    def _get_provider_config(self) -> Dict[str, Any]:
        """Get Stripe configuration from Django settings"""
        return settings.PAYMENT_PROVIDERS.get('STRIPE', {})

    def _validate_config(self) -> None:
        """Validate Stripe configuration"""
        secret_key = self.config.get('SECRET_KEY')
        if not secret_key:
            raise PaymentProviderConfigError("Stripe SECRET_KEY is required but not configured")

        if not secret_key.startswith(('sk_test_', 'sk_live_', 'rk_test_', 'rk_live_')):
            raise PaymentProviderConfigError("Invalid Stripe secret key format")

    def create_payment_intent(
        self,
        amount: Decimal,
        currency: str,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ) -> Dict[str, Any]:
        """Create Stripe payment intent"""
        if not self.validate_currency_support(currency):
            raise PaymentCreateError(f"Currency {currency} not supported by Stripe")

        if not self.validate_amount_limits(amount, currency):
            raise PaymentCreateError(f"Amount {amount} {currency} is invalid")

        stripe_amount = self.format_amount_for_provider(amount, currency)

        payment_intent_params = {
            'amount': stripe_amount,
            'currency': currency.lower(),
            'payment_method_types': ['card'],
            'metadata': self.prepare_metadata(metadata),
        }

        if 'description' in kwargs:
            payment_intent_params['description'] = kwargs['description']

        try:
            payment_intent = stripe.PaymentIntent.create(**payment_intent_params)
        except stripe.StripeError as e:
            self.log_provider_interaction('create_payment_intent', {
                'error': str(e),
                'error_type': type(e).__name__
            }, success=False)
            raise PaymentCreateError(f"Stripe error: {str(e)}")

        self.log_provider_interaction('create_payment_intent', {
            'payment_intent_id': payment_intent.id,
            'amount': stripe_amount,
            'currency': currency,
            'status': payment_intent.status
        })

        return {
            'payment_intent_id': payment_intent.id,
            'client_secret': payment_intent.client_secret,
            'status': payment_intent.status,
            'amount': stripe_amount,
        }
