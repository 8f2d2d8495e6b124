# users/views.py
from rest_framework import status
from rest_framework.response import Response
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.utils.translation import gettext_lazy as _
from drf_spectacular.utils import extend_schema, inline_serializer

from core.permissions import HasValidToken, IsAdminRole
from core.views import StorageAPIView
from .exceptions import UserNotFoundError, TokenConfigurationError, TokenServiceUnavailable
from .serializers import (
    UserSerializer,
    UserProfileSerializer,
    UserUpsertResponseSerializer,
    AdminCheckSerializer,
)
from .services import UserService


@extend_schema(tags=['Users'])
class UserUpsertView(StorageAPIView):
    """
    Create or update a profile and hand back an access token
    """
    public_methods = ('PUT',)

    @extend_schema(
        request=UserProfileSerializer,
        responses={200: UserUpsertResponseSerializer, 400: {'description': 'Invalid email or body'}},
        description="Upsert a user by email; returns the profile and a 1 hour access token"
    )
    def put(self, request, email):
        """
        PUT /user/<email>
        """
        try:
            validate_email(email)
        except ValidationError:
            return Response({'error': _('Invalid email address')}, status=status.HTTP_400_BAD_REQUEST)

        serializer = UserProfileSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            user, created, token = UserService(self.storage).upsert_user(email, serializer.validated_data)
        except TokenConfigurationError:
            raise TokenServiceUnavailable()

        return Response({
            'result': UserSerializer(user).data,
            'token': token,
        }, status=status.HTTP_200_OK)


@extend_schema(tags=['Users'])
class UserListView(StorageAPIView):
    permission_classes = [HasValidToken]

    @extend_schema(
        responses={200: UserSerializer(many=True), 401: {'description': 'No token'}, 403: {'description': 'Invalid token'}},
        description="List all users"
    )
    def get(self, request):
        users = UserService(self.storage).list_users()
        return Response(UserSerializer(users, many=True).data)


@extend_schema(tags=['Users'])
class AdminCheckView(StorageAPIView):
    public_methods = ('GET',)

    @extend_schema(
        responses={200: AdminCheckSerializer},
        description="Check whether the email holds the admin role"
    )
    def get(self, request, email):
        """
        GET /admin/<email>
        """
        return Response({'admin': UserService(self.storage).is_admin(email)})


@extend_schema(tags=['Users'])
class MakeAdminView(StorageAPIView):
    permission_classes = [IsAdminRole]

    @extend_schema(
        request=None,
        responses={
            200: inline_serializer('MakeAdminResponse', fields={'result': UserSerializer()}),
            403: {'description': 'Requester is not an admin'},
            404: {'description': 'User not found'},
        },
        description="Grant the admin role (admins only)"
    )
    def put(self, request, email):
        """
        PUT /user/admin/<email>
        """
        try:
            user = UserService(self.storage).make_admin(email)
        except UserNotFoundError:
            return Response({'error': _('User not found')}, status=status.HTTP_404_NOT_FOUND)

        return Response({'result': UserSerializer(user).data}, status=status.HTTP_200_OK)
