# bookings/models.py
import uuid
from django.db import models
from django.utils.translation import gettext_lazy as _


class Booking(models.Model):
    """
    A patient's reservation of one slot of one treatment on one date.

    ``date`` is an opaque label compared by equality; it is never parsed.
    At most one booking per (treatment_name, patient_email, date) is allowed,
    enforced by BookingService before insert rather than by a constraint.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    treatment_name = models.CharField(
        _('treatment name'),
        max_length=255,
        help_text=_("Name of the booked service")
    )
    patient_email = models.EmailField(_('patient email'))
    patient_name = models.CharField(_('patient name'), max_length=255, blank=True, default='')
    phone = models.CharField(_('phone'), max_length=32, blank=True, default='')
    date = models.CharField(
        _('date'),
        max_length=64,
        help_text=_("Calendar date label exactly as sent by the client")
    )
    time_slot = models.CharField(
        _('time slot'),
        max_length=64,
        help_text=_("One of the service's slot labels")
    )
    price = models.PositiveIntegerField(_('price'), null=True, blank=True)

    # Payment status
    paid = models.BooleanField(_('paid'), default=False)
    transaction_id = models.CharField(_('transaction id'), max_length=255, blank=True, default='')

    created_at = models.DateTimeField(_('created at'), auto_now_add=True)
    updated_at = models.DateTimeField(_('updated at'), auto_now=True)

    class Meta:
        verbose_name = _('Booking')
        verbose_name_plural = _('Bookings')
        db_table = 'bookings'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['date'], name='bookings_date_idx'),
            models.Index(fields=['patient_email'], name='bookings_patient_idx'),
            models.Index(fields=['treatment_name', 'patient_email', 'date'], name='bookings_dedup_idx'),
        ]

    def __str__(self):
        return f"{self.treatment_name} - {self.patient_email} - {self.date} {self.time_slot}"
