import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Doctor',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255, verbose_name='name')),
                ('email', models.EmailField(help_text='Used for the duplicate check and removal', max_length=254, verbose_name='email address')),
                ('specialty', models.CharField(blank=True, default='', help_text='Treatment the doctor provides', max_length=255, verbose_name='specialty')),
                ('img', models.URLField(blank=True, default='', max_length=512, verbose_name='image')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
            ],
            options={
                'verbose_name': 'Doctor',
                'verbose_name_plural': 'Doctors',
                'db_table': 'doctors',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['email'], name='doctors_email_idx')],
            },
        ),
    ]
