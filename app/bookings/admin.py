from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ['treatment_name', 'patient_email', 'date', 'time_slot', 'paid', 'created_at']
    list_filter = ['paid', 'treatment_name']
    search_fields = ['patient_email', 'patient_name', 'treatment_name', 'transaction_id']
    readonly_fields = ['id', 'created_at', 'updated_at']
