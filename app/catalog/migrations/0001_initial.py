import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Service',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(help_text='Treatment name, referenced by bookings', max_length=255, unique=True, verbose_name='name')),
                ('slots', models.JSONField(blank=True, default=list, help_text='Ordered time-slot labels, e.g. "9:00 AM"', verbose_name='slots')),
                ('price', models.PositiveIntegerField(default=0, help_text='Price in whole currency units', verbose_name='price')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
            ],
            options={
                'verbose_name': 'Service',
                'verbose_name_plural': 'Services',
                'db_table': 'services',
                'ordering': ['created_at', 'name'],
            },
        ),
    ]
