# users/exceptions.py
"""
Custom exceptions for token handling and user management
"""
from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.exceptions import APIException


class UserServiceError(Exception):
    """Base exception for user service errors"""
    pass


class UserNotFoundError(UserServiceError):
    """Raised when no user matches the given email"""
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User {email} not found")


class TokenError(Exception):
    """Base exception for access token errors"""
    pass


class TokenConfigurationError(TokenError):
    """Raised when the signing secret is not configured"""
    pass


class InvalidTokenError(TokenError):
    """Raised when a token fails verification or lacks the email claim"""
    pass


class TokenVerificationFailed(APIException):
    """A bearer token was supplied but did not verify"""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = _('Forbidden access')
    default_code = 'invalid_token'


class TokenServiceUnavailable(APIException):
    """Tokens cannot be issued or verified because signing is not configured"""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = _('Token service is not configured')
    default_code = 'token_service_unavailable'
