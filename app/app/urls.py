# app/urls.py
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from core.storage import ClinicStorage
from core.views import LivenessView
from catalog import urls as catalog_urls
from bookings import urls as bookings_urls
from users import urls as users_urls
from doctors import urls as doctors_urls
from payments import urls as payments_urls

# One storage context for the whole process, handed to every app's routes
storage = ClinicStorage.from_models()

urlpatterns = [
    path('', LivenessView.as_view(), name='liveness'),

    path('', include(catalog_urls.build_urlpatterns(storage))),
    path('', include(bookings_urls.build_urlpatterns(storage))),
    path('', include(users_urls.build_urlpatterns(storage))),
    path('', include(doctors_urls.build_urlpatterns(storage))),
    path('', include(payments_urls.build_urlpatterns(storage))),

    # Schema & site admin
    path('schema/', SpectacularAPIView.as_view(), name='schema'),
    path('docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='docs'),
    path('django-admin/', admin.site.urls),
]
