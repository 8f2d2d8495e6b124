from django.contrib import admin

from .models import Doctor


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ['name', 'email', 'specialty', 'created_at']
    search_fields = ['name', 'email', 'specialty']
    readonly_fields = ['id', 'created_at', 'updated_at']
