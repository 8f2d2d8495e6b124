from typing import Dict, Type
import logging

from .base_provider import (
    BasePaymentProvider,
    PaymentProviderError,
    PaymentProviderConfigError,
    PaymentCreateError,
)
from .stripe_provider import StripePaymentProvider

logger = logging.getLogger(__name__)


class PaymentProviderFactory:
    """
    Factory class for creating payment provider instances
    Maps provider names to classes and caches their instances
    """

    # Registry of available providers
    _providers: Dict[str, Type[BasePaymentProvider]] = {
        'stripe': StripePaymentProvider,
    }

    # Cache for provider instances
    _instances: Dict[str, BasePaymentProvider] = {}

    @classmethod
    def get_provider(cls, name: str) -> BasePaymentProvider:
        """
        Get payment provider instance by name

        Raises:
            PaymentProviderConfigError: If provider not found or misconfigured
        """
        name = name.lower()

        if name in cls._instances:
            return cls._instances[name]

        if name not in cls._providers:
            available = ', '.join(cls._providers.keys())
            raise PaymentProviderConfigError(
                f"Payment provider '{name}' not found. Available providers: {available}"
            )

        instance = cls._providers[name]()
        cls._instances[name] = instance

        logger.info(f"Created payment provider instance: {name}")
        return instance

    @classmethod
    def get_default_provider(cls) -> BasePaymentProvider:
        """
        Get the first enabled provider

        Raises:
            PaymentProviderConfigError: If no providers are enabled
        """
        for name in cls._providers.keys():
            provider = cls.get_provider(name)
            if provider.is_enabled():
                return provider

        raise PaymentProviderConfigError("No payment providers are enabled")

    @classmethod
    def validate_all_providers(cls) -> Dict[str, bool]:
        """
        Validate configuration for all registered providers

        Returns:
            Dict mapping provider names to validation status
        """
        validation_results = {}

        for name in cls._providers.keys():
            try:
                provider = cls.get_provider(name)
                validation_results[name] = provider.is_enabled()
            except PaymentProviderConfigError as e:
                logger.warning(f"Validation failed for provider '{name}': {str(e)}")
                validation_results[name] = False

        return validation_results

    @classmethod
    def clear_cache(cls) -> None:
        """Clear all cached provider instances"""
        cls._instances.clear()


def get_default_payment_provider() -> BasePaymentProvider:
    """Get default payment provider"""
    return PaymentProviderFactory.get_default_provider()


__all__ = [
    'BasePaymentProvider',
    'PaymentProviderError',
    'PaymentProviderConfigError',
    'PaymentCreateError',
    'StripePaymentProvider',
    'PaymentProviderFactory',
    'get_default_payment_provider',
]
