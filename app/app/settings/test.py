# app/settings/test.py
from .base import *

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

ALLOWED_HOSTS = ['testserver', 'localhost', '127.0.0.1']

PAYMENT_PROVIDERS = {
    'STRIPE': {
        'ENABLED': True,
        'SECRET_KEY': 'sk_test_dummy',
        'API_VERSION': '2023-10-16',
    },
}

ACCESS_TOKEN = {
    **ACCESS_TOKEN,
    'SECRET': 'insecure-access-token-secret-for-testing',
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

LOGGING['root']['level'] = 'WARNING'
