# users/urls.py
from django.urls import path

from .views import UserUpsertView, UserListView, AdminCheckView, MakeAdminView


def build_urlpatterns(storage):
    """User and role routes bound to the shared storage context"""
    return [
        path('user', UserListView.as_view(storage=storage), name='user-list'),
        # must precede user/<email>
        path('user/admin/<str:email>', MakeAdminView.as_view(storage=storage), name='user-make-admin'),
        path('user/<str:email>', UserUpsertView.as_view(storage=storage), name='user-upsert'),
        path('admin/<str:email>', AdminCheckView.as_view(storage=storage), name='admin-check'),
    ]

# The resulting URL patterns will be:
# - GET    /user                    -> list users
# - PUT    /user/admin/{email}      -> grant admin role (admins only)
# - PUT    /user/{email}            -> upsert profile, issue access token
# - GET    /admin/{email}           -> {admin: bool}
