# users/serializers.py
from rest_framework import serializers
from django.utils.translation import gettext_lazy as _

from .models import User


class UserSerializer(serializers.ModelSerializer):
    """
    Public representation of a user
    """
    class Meta:
        model = User
        fields = ['id', 'email', 'name', 'role', 'created_at', 'updated_at']
        read_only_fields = fields


class UserProfileSerializer(serializers.Serializer):
    """
    Body of the profile upsert; unknown keys are ignored
    """
    name = serializers.CharField(
        max_length=255,
        required=False,
        allow_blank=True,
        help_text=_("Display name")
    )


class UserUpsertResponseSerializer(serializers.Serializer):
    result = UserSerializer()
    token = serializers.CharField()


class AdminCheckSerializer(serializers.Serializer):
    admin = serializers.BooleanField()
