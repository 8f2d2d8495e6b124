# bookings/serializers.py
from rest_framework import serializers
from django.utils.translation import gettext_lazy as _

from .models import Booking


class BookingSerializer(serializers.ModelSerializer):
    """
    Booking in the client's camelCase shape

    Labels are stored exactly as sent; they are later matched by equality.
    """
    treatmentName = serializers.CharField(source='treatment_name', max_length=255, trim_whitespace=False)
    patientEmail = serializers.EmailField(source='patient_email', trim_whitespace=False)
    patientName = serializers.CharField(source='patient_name', max_length=255, required=False, allow_blank=True)
    date = serializers.CharField(max_length=64, trim_whitespace=False)
    timeSlot = serializers.CharField(source='time_slot', max_length=64, trim_whitespace=False)
    transactionId = serializers.CharField(source='transaction_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Booking
        fields = [
            'id',
            'treatmentName',
            'patientEmail',
            'patientName',
            'phone',
            'date',
            'timeSlot',
            'price',
            'paid',
            'transactionId',
            'createdAt',
        ]
        read_only_fields = ['id', 'paid', 'transactionId', 'createdAt']

    def validate_date(self, value):
        if not value.strip():
            raise serializers.ValidationError(_("Date is required"))
        return value


class AvailableServiceSerializer(serializers.Serializer):
    """
    Service with only the slots still free on the requested date
    """
    id = serializers.UUIDField(allow_null=True)
    name = serializers.CharField()
    price = serializers.IntegerField()
    slots = serializers.ListField(child=serializers.CharField())


class BookingCreateResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    result = BookingSerializer(required=False)
    bookingInfoDoc = BookingSerializer(required=False)
