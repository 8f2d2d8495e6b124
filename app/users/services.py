# users/services.py
import logging
from typing import Any, Dict, List, Tuple

from django.db import transaction

from core.authorization import ADMIN_ROLE
from core.storage import ClinicStorage
from .exceptions import UserNotFoundError
from .models import User
from .tokens import token_generator

logger = logging.getLogger(__name__)


class UserService:
    """
    Profile upserts, role management and token issuing
    """

    # Fields a client may set through the profile upsert
    PROFILE_FIELDS = ('name',)

    def __init__(self, storage: ClinicStorage):
        self.storage = storage

    def upsert_user(self, email: str, profile: Dict[str, Any]) -> Tuple[User, bool, str]:
        """
        Create or update a user by email and issue an access token

        Args:
            email: User email exactly as the client sends it (the upsert key)
            profile: Profile fields from the request body

        Returns:
            (user, created, token)
        """
        defaults = {
            field: profile[field]
            for field in self.PROFILE_FIELDS
            if field in profile
        }

        with transaction.atomic():
            try:
                user = self.storage.users.get(email=email)
                created = False
                for field, value in defaults.items():
                    setattr(user, field, value)
                if defaults:
                    user.save(update_fields=[*defaults.keys(), 'updated_at'])
            except User.DoesNotExist:
                user = self.storage.users.create_user(email=email, **defaults)
                created = True

        token = token_generator.make_token(user.email)

        if created:
            logger.info(f"New user registered: {user.email}")
        return user, created, token

    def list_users(self) -> List[User]:
        return list(self.storage.users.order_by('created_at'))

    def is_admin(self, email: str) -> bool:
        return self.storage.users.filter(email=email, role=ADMIN_ROLE).exists()

    def make_admin(self, email: str) -> User:
        """
        Grant the admin role

        Raises:
            UserNotFoundError: If no user has this email
        """
        try:
            user = self.storage.users.get(email=email)
        except User.DoesNotExist:
            raise UserNotFoundError(email)

        user.role = ADMIN_ROLE
        user.save(update_fields=['role', 'updated_at'])
        logger.info(f"Admin role granted to {email}")
        return user
