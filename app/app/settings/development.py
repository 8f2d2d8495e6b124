# app/settings/development.py
from .base import *

# Database for development
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.postgresql',
        'HOST': os.environ.get('DB_HOST', 'db'),
        'NAME': os.environ.get('DB_NAME', 'doctors-portal'),
        'USER': os.environ.get('DB_USER', 'testuser'),
        'PASSWORD': os.environ.get('DB_PASSWORD', os.environ.get('DB_PASS', 'testpass')),
        'PORT': os.environ.get('DB_PORT', '5432'),
    }
}

# Development-specific settings
CORS_ALLOW_ALL_ORIGINS = True  # Be careful with this in production

DEBUG = os.getenv("DEBUG", "False") == "True"
ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

# Override database settings if running tests
if 'test' in sys.argv:
    DATABASES['default'] = {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
    PAYMENT_PROVIDERS['STRIPE']['SECRET_KEY'] = 'sk_test_dummy'
