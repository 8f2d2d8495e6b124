# payments/providers/base_provider.py
from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional
from decimal import Decimal
from django.conf import settings
import logging

logger = logging.getLogger(__name__)


class PaymentProviderError(Exception):
    """Base exception for payment provider errors"""
    pass


class PaymentProviderConfigError(PaymentProviderError):
    """Raised when provider configuration is invalid"""
    pass


class PaymentCreateError(PaymentProviderError):
    """Raised when payment creation fails"""
    pass


# Currencies without a minor unit
ZERO_DECIMAL_CURRENCIES = ['JPY', 'KRW']


class BasePaymentProvider(ABC):
    """
    Abstract base class for payment providers
    Defines the interface that all payment providers must implement
    """

    def __init__(self):
        self.provider_name = self._get_provider_name()
        self.config = self._get_provider_config()
        self._validate_config()

    @abstractmethod
    def _get_provider_name(self) -> str:
        """Return the provider name (e.g., 'stripe')"""
        pass

    @abstractmethod
    def _get_provider_config(self) -> Dict[str, Any]:
        """Return provider-specific configuration from settings"""
        pass

    @abstractmethod
    def _validate_config(self) -> None:
        """Validate provider configuration, raise PaymentProviderConfigError if invalid"""
        pass

    @abstractmethod
    def create_payment_intent(
        self,
        amount: Decimal,
        currency: str,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ) -> Dict[str, Any]:
        """
        Create a payment intent with the provider

        Args:
            amount: Payment amount in major currency units
            currency: Currency code (e.g., 'usd')
            metadata: Additional metadata to store with payment
            **kwargs: Provider-specific additional parameters

        Returns:
            Dict containing:
                - payment_intent_id: Provider's payment intent ID
                - client_secret: Secret for client-side payment confirmation
                - status: Provider status of the intent
                - amount: Amount sent to the provider, in the smallest unit

        Raises:
            PaymentCreateError: If payment intent creation fails
        """
        pass

    def is_enabled(self) -> bool:
        """Check if provider is enabled"""
        return self.config.get('ENABLED', False)

    def get_supported_currencies(self) -> List[str]:
        """Get list of currencies supported by this provider"""
        return settings.PAYMENT_SETTINGS.get('SUPPORTED_CURRENCIES', ['usd'])

    def format_amount_for_provider(self, amount: Decimal, currency: str) -> int:
        """
        Convert to the smallest currency unit (e.g., cents for USD)
        """
        if currency.upper() in ZERO_DECIMAL_CURRENCIES:
            return int(amount)
        return int(Decimal(amount) * 100)

    def validate_currency_support(self, currency: str) -> bool:
        """Check if currency is supported by this provider"""
        supported = self.get_supported_currencies()
        return currency.upper() in [c.upper() for c in supported]

    def validate_amount_limits(self, amount: Decimal, currency: str) -> bool:
        """
        Validate amount against provider limits
        Override in provider classes with specific limits
        """
        return amount > Decimal('0.00')

    def prepare_metadata(self, data: Optional[Dict[str, Any]]) -> Dict[str, str]:
        """
        Most providers require string values in metadata
        """
        return {str(key): str(value) for key, value in (data or {}).items() if value is not None}

    def log_provider_interaction(self, action: str, data: Dict[str, Any], success: bool = True):
        """Log provider interactions for debugging and audit"""
        log_data = {
            'provider': self.provider_name,
            'action': action,
            'success': success,
            'data_keys': list(data.keys()) if isinstance(data, dict) else 'non-dict'
        }

        if success:
            logger.info(f"Payment provider interaction: {log_data}")
        else:
            logger.error(f"Payment provider interaction failed: {log_data}")
