import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Booking',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('treatment_name', models.CharField(help_text='Name of the booked service', max_length=255, verbose_name='treatment name')),
                ('patient_email', models.EmailField(max_length=254, verbose_name='patient email')),
                ('patient_name', models.CharField(blank=True, default='', max_length=255, verbose_name='patient name')),
                ('phone', models.CharField(blank=True, default='', max_length=32, verbose_name='phone')),
                ('date', models.CharField(help_text='Calendar date label exactly as sent by the client', max_length=64, verbose_name='date')),
                ('time_slot', models.CharField(help_text="One of the service's slot labels", max_length=64, verbose_name='time slot')),
                ('price', models.PositiveIntegerField(blank=True, null=True, verbose_name='price')),
                ('paid', models.BooleanField(default=False, verbose_name='paid')),
                ('transaction_id', models.CharField(blank=True, default='', max_length=255, verbose_name='transaction id')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
            ],
            options={
                'verbose_name': 'Booking',
                'verbose_name_plural': 'Bookings',
                'db_table': 'bookings',
                'ordering': ['created_at'],
                'indexes': [
                    models.Index(fields=['date'], name='bookings_date_idx'),
                    models.Index(fields=['patient_email'], name='bookings_patient_idx'),
                    models.Index(fields=['treatment_name', 'patient_email', 'date'], name='bookings_dedup_idx'),
                ],
            },
        ),
    ]
