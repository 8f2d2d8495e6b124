# factories/doctors.py
import factory

from doctors.models import Doctor
from .base import BaseFactory


class DoctorFactory(BaseFactory):
    class Meta:
        model = Doctor

    name = factory.Faker('name')
    email = factory.Sequence(lambda n: f'doctor{n}@clinic.example.com')
    specialty = 'Teeth Cleaning'
    img = ''
