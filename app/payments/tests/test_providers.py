# payments/tests/test_providers.py
from decimal import Decimal
from unittest.mock import patch, Mock

import stripe
from django.test import SimpleTestCase, override_settings

from payments.providers import (
    PaymentProviderFactory,
    PaymentProviderConfigError,
    PaymentCreateError,
    StripePaymentProvider,
    get_default_payment_provider,
)


class StripePaymentProviderTest(SimpleTestCase):
    """Test Stripe payment intent creation"""

    def setUp(self):
        PaymentProviderFactory.clear_cache()
        self.provider = StripePaymentProvider()

    def tearDown(self):
        PaymentProviderFactory.clear_cache()

    @patch('payments.providers.stripe_provider.stripe.PaymentIntent.create')
    def test_create_payment_intent(self, mock_create):
        mock_create.return_value = Mock(
            id='pi_123',
            client_secret='pi_123_secret_abc',
            status='requires_payment_method',
        )

        result = self.provider.create_payment_intent(
            Decimal('49.99'), 'usd', metadata={'email': 'pat@example.com', 'skip': None}
        )

        mock_create.assert_called_once_with(
            amount=4999,
            currency='usd',
            payment_method_types=['card'],
            metadata={'email': 'pat@example.com'},
        )
        self.assertEqual(result['client_secret'], 'pi_123_secret_abc')
        self.assertEqual(result['payment_intent_id'], 'pi_123')
        self.assertEqual(result['amount'], 4999)

    @patch('payments.providers.stripe_provider.stripe.PaymentIntent.create')
    def test_gateway_error(self, mock_create):
        mock_create.side_effect = stripe.StripeError('card declined')

        with self.assertRaises(PaymentCreateError):
            self.provider.create_payment_intent(Decimal('10.00'), 'usd')

    @patch('payments.providers.stripe_provider.stripe.PaymentIntent.create')
    def test_unsupported_currency(self, mock_create):
        with self.assertRaises(PaymentCreateError):
            self.provider.create_payment_intent(Decimal('10.00'), 'chf')
        mock_create.assert_not_called()

    def test_zero_amount_rejected(self):
        with self.assertRaises(PaymentCreateError):
            self.provider.create_payment_intent(Decimal('0'), 'usd')

    def test_format_amount(self):
        self.assertEqual(self.provider.format_amount_for_provider(Decimal('60'), 'usd'), 6000)
        self.assertEqual(self.provider.format_amount_for_provider(Decimal('500'), 'jpy'), 500)

    @override_settings(PAYMENT_PROVIDERS={'STRIPE': {'ENABLED': True, 'SECRET_KEY': ''}})
    def test_missing_secret_key(self):
        with self.assertRaises(PaymentProviderConfigError):
            StripePaymentProvider()

    @override_settings(PAYMENT_PROVIDERS={'STRIPE': {'ENABLED': True, 'SECRET_KEY': 'pk_test_public'}})
    def test_publishable_key_rejected(self):
        with self.assertRaises(PaymentProviderConfigError):
            StripePaymentProvider()


class PaymentProviderFactoryTest(SimpleTestCase):

    def setUp(self):
        PaymentProviderFactory.clear_cache()

    def tearDown(self):
        PaymentProviderFactory.clear_cache()

    def test_default_provider_is_stripe(self):
        provider = get_default_payment_provider()

        self.assertIsInstance(provider, StripePaymentProvider)
        self.assertIs(provider, PaymentProviderFactory.get_provider('stripe'))

    def test_unknown_provider(self):
        with self.assertRaises(PaymentProviderConfigError):
            PaymentProviderFactory.get_provider('paypal')

    @override_settings(PAYMENT_PROVIDERS={'STRIPE': {'ENABLED': False, 'SECRET_KEY': 'sk_test_dummy'}})
    def test_no_enabled_provider(self):
        with self.assertRaises(PaymentProviderConfigError):
            PaymentProviderFactory.get_default_provider()
