# factories/bookings.py
import factory

from bookings.models import Booking
from .base import BaseFactory
from .catalog import ServiceFactory


class BookingFactory(BaseFactory):
    """
    Booking for the first slot of a freshly created service unless overridden
    """

    class Meta:
        model = Booking
        exclude = ('service',)

    service = factory.SubFactory(ServiceFactory)

    treatment_name = factory.LazyAttribute(lambda obj: obj.service.name)
    patient_email = factory.Sequence(lambda n: f'patient{n}@example.com')
    patient_name = factory.Faker('name')
    phone = factory.Faker('numerify', text='01#########')
    date = 'Jan 5, 2024'
    time_slot = factory.LazyAttribute(lambda obj: obj.service.slots[0])
    price = factory.LazyAttribute(lambda obj: obj.service.price)
