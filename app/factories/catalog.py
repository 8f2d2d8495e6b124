# factories/catalog.py
import factory

from catalog.models import Service
from .base import BaseFactory, SLOT_LABELS


class ServiceFactory(BaseFactory):
    class Meta:
        model = Service
        django_get_or_create = ('name',)

    name = factory.Sequence(lambda n: f'Treatment {n}')
    slots = factory.LazyFunction(lambda: list(SLOT_LABELS))
    price = factory.Faker('random_int', min=20, max=300)
