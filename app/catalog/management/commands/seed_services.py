# catalog/management/commands/seed_services.py
from django.core.management.base import BaseCommand
from django.db import transaction

from catalog.models import Service

DEFAULT_SLOTS = [
    '08.00 AM - 08.30 AM',
    '08.30 AM - 09.00 AM',
    '09.00 AM - 09.30 AM',
    '09.30 AM - 10.00 AM',
    '10.00 AM - 10.30 AM',
    '10.30 AM - 11.00 AM',
    '11.00 AM - 11.30 AM',
    '11.30 AM - 12.00 PM',
    '01.00 PM - 01.30 PM',
    '01.30 PM - 02.00 PM',
    '02.00 PM - 02.30 PM',
    '02.30 PM - 03.00 PM',
    '03.00 PM - 03.30 PM',
    '03.30 PM - 04.00 PM',
    '04.00 PM - 04.30 PM',
    '04.30 PM - 05.00 PM',
]

DEFAULT_CATALOG = [
    ('Teeth Orthodontics', 120),
    ('Cosmetic Dentistry', 150),
    ('Teeth Cleaning', 60),
    ('Cavity Protection', 80),
    ('Pediatric Dental', 70),
    ('Oral Surgery', 200),
]


class Command(BaseCommand):
    help = 'Load the default treatment catalog (existing services are left untouched)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset',
            action='store_true',
            help='Delete every service before loading the catalog'
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['reset']:
            deleted, _ = Service.objects.all().delete()
            self.stdout.write(f'Deleted {deleted} services')

        created_count = 0
        for name, price in DEFAULT_CATALOG:
            _, created = Service.objects.get_or_create(
                name=name,
                defaults={'slots': list(DEFAULT_SLOTS), 'price': price},
            )
            if created:
                created_count += 1

        self.stdout.write(self.style.SUCCESS(
            f'Catalog ready: {created_count} created, {len(DEFAULT_CATALOG) - created_count} already present'
        ))
