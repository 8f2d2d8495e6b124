# catalog/serializers.py
from rest_framework import serializers

from .models import Service


class ServiceNameSerializer(serializers.ModelSerializer):
    """
    Catalog listing: identity and name only
    """
    class Meta:
        model = Service
        fields = ['id', 'name']
        read_only_fields = fields

