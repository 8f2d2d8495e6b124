# doctors/serializers.py
from rest_framework import serializers

from .models import Doctor


class DoctorSerializer(serializers.ModelSerializer):
    class Meta:
        model = Doctor
        fields = ['id', 'name', 'email', 'specialty', 'img', 'created_at']
        read_only_fields = ['id', 'created_at']


class DoctorCreateResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    result = DoctorSerializer(required=False)
    doctor = DoctorSerializer(required=False)


class DoctorDeleteResponseSerializer(serializers.Serializer):
    deletedCount = serializers.IntegerField()
