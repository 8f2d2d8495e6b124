# payments/serializers.py
from decimal import Decimal
from rest_framework import serializers
from django.conf import settings
from django.utils.translation import gettext_lazy as _


def validate_supported_currency(value):
    supported = [c.lower() for c in settings.PAYMENT_SETTINGS['SUPPORTED_CURRENCIES']]
    if value.lower() not in supported:
        raise serializers.ValidationError(_("Unsupported currency"))
    return value.lower()


class PaymentIntentRequestSerializer(serializers.Serializer):
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
        help_text=_("Amount to charge in major currency units")
    )
    currency = serializers.CharField(max_length=3, required=False)

    def validate_currency(self, value):
        return validate_supported_currency(value)


class PaymentIntentResponseSerializer(serializers.Serializer):
    clientSecret = serializers.CharField()


class PaymentRecordSerializer(serializers.Serializer):
    """
    Body of PATCH /booking/<id> sent after the client confirmed the payment
    """
    transactionId = serializers.CharField(max_length=255)
    amount = serializers.DecimalField(max_digits=10, decimal_places=2, required=False, allow_null=True)
    currency = serializers.CharField(max_length=3, required=False)

    def validate_currency(self, value):
        return validate_supported_currency(value)
