# core/authorization.py
"""
Single authorization capability used by every protected endpoint.

``requires(claims, permission, storage, subject=None)`` answers ALLOW or DENY
for verified token claims. DRF permission classes in ``core.permissions`` wrap
it so that routes declare what they need instead of comparing fields inline.
"""
import logging
from enum import Enum
from typing import Mapping, Any, Optional

from .storage import ClinicStorage

logger = logging.getLogger(__name__)

ADMIN_ROLE = 'admin'


class Permission(Enum):
    AUTHENTICATED = 'authenticated'
    # claim email must equal the subject email of the request
    SUBJECT = 'subject'
    ADMIN = 'admin'


class Decision(Enum):
    ALLOW = 'allow'
    DENY = 'deny'

    def __bool__(self):
        return self is Decision.ALLOW


def requires(claims: Optional[Mapping[str, Any]], permission: Permission,
             storage: ClinicStorage, subject: Optional[str] = None) -> Decision:
    """
    Decide whether verified claims grant a permission

    Args:
        claims: Decoded token claims, None when the request carried no token
        permission: Permission to check
        storage: Storage context used for role lookups
        subject: Email the request acts on (required for SUBJECT)

    Returns:
        Decision.ALLOW or Decision.DENY
    """
    email = (claims or {}).get('email')
    if not email:
        return Decision.DENY

    if permission is Permission.AUTHENTICATED:
        return Decision.ALLOW

    if permission is Permission.SUBJECT:
        if subject is not None and subject == email:
            return Decision.ALLOW
        logger.info(f"Denied {email}: subject mismatch ({subject})")
        return Decision.DENY

    if permission is Permission.ADMIN:
        if storage.users.filter(email=email, role=ADMIN_ROLE).exists():
            return Decision.ALLOW
        logger.info(f"Denied {email}: admin role required")
        return Decision.DENY

    raise ValueError(f"Unknown permission: {permission}")
