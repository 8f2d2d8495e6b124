# users/tokens.py
from datetime import timedelta
from typing import Any, Dict

from django.conf import settings
from django.utils import timezone
from jose import jwt, JWTError

from .exceptions import TokenConfigurationError, InvalidTokenError


class AccessTokenGenerator:
    """
    Issue and verify signed access tokens bound to an email claim
    """

    def _get_config(self) -> Dict[str, Any]:
        config = settings.ACCESS_TOKEN
        if not config.get('SECRET'):
            raise TokenConfigurationError("ACCESS_TOKEN_SECRET is not configured")
        return config

    def make_token(self, email: str) -> str:
        """
        Sign a token for the email, expiring after the configured lifetime
        """
        config = self._get_config()
        claims = {
            'email': email,
            'exp': timezone.now() + timedelta(seconds=config['LIFETIME_SECONDS']),
        }
        return jwt.encode(claims, config['SECRET'], algorithm=config['ALGORITHM'])

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Verify signature and expiry, return the claims

        Raises:
            InvalidTokenError: If the token is invalid, expired or has no email
        """
        config = self._get_config()
        try:
            claims = jwt.decode(token, config['SECRET'], algorithms=[config['ALGORITHM']])
        except JWTError as e:
            raise InvalidTokenError(str(e))

        if not claims.get('email'):
            raise InvalidTokenError("Token has no email claim")
        return claims


# Instance to use throughout the app
token_generator = AccessTokenGenerator()
