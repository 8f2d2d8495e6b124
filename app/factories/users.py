# factories/users.py
import factory

from users.models import User
from .base import BaseFactory


class UserFactory(BaseFactory):
    """
    Factory for creating User instances (password-less, like upserted profiles)
    """

    class Meta:
        model = User
        django_get_or_create = ('email',)  # Avoid duplicate emails

    email = factory.Sequence(lambda n: f'user{n}@example.com')
    name = factory.Faker('name')
    role = ''


class AdminUserFactory(UserFactory):
    role = 'admin'
