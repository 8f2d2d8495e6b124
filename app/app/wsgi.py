"""
WSGI entry point for the Doctors Portal API.
"""
import os
from django.core.wsgi import get_wsgi_application

# Web servers run the production overlay unless told otherwise
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'app.settings.production')

application = get_wsgi_application()
