from django.contrib import admin

from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ['transaction_id', 'booking', 'amount', 'currency', 'created_at']
    search_fields = ['transaction_id', 'booking__patient_email']
    readonly_fields = ['id', 'created_at']
