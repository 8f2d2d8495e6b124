# users/authentication.py
import logging

from rest_framework import authentication

from .exceptions import (
    InvalidTokenError,
    TokenConfigurationError,
    TokenServiceUnavailable,
    TokenVerificationFailed,
)
from .tokens import token_generator

logger = logging.getLogger(__name__)


class TokenUser:
    """
    Identity carried by a verified bearer token
    """
    is_authenticated = True
    is_anonymous = False

    def __init__(self, email: str):
        self.email = email

    def __str__(self):
        return self.email


class BearerTokenAuthentication(authentication.BaseAuthentication):
    """
    Authorization: Bearer <token>

    No header leaves the request anonymous (401 on protected views); a token
    that fails verification is rejected with 403.
    """
    keyword = 'Bearer'

    def authenticate(self, request):
        auth = authentication.get_authorization_header(request).split()

        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None

        if len(auth) != 2:
            raise TokenVerificationFailed()

        try:
            token = auth[1].decode()
        except UnicodeError:
            raise TokenVerificationFailed()

        try:
            claims = token_generator.decode_token(token)
        except InvalidTokenError as e:
            logger.info(f"Rejected bearer token: {str(e)}")
            raise TokenVerificationFailed()
        except TokenConfigurationError as e:
            logger.error(f"Cannot verify bearer token: {str(e)}")
            raise TokenServiceUnavailable()

        return TokenUser(claims['email']), claims

    def authenticate_header(self, request):
        return self.keyword
