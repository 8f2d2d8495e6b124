# payments/models.py
import uuid
from django.db import models
from django.utils.translation import gettext_lazy as _

from bookings.models import Booking


class Payment(models.Model):
    """
    Record of a completed client-side payment for a booking
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    booking = models.ForeignKey(
        Booking,
        on_delete=models.PROTECT,
        related_name='payments',
        help_text=_("Booking this payment settles")
    )
    transaction_id = models.CharField(
        _('transaction id'),
        max_length=255,
        help_text=_("Gateway transaction / payment intent id reported by the client")
    )
    amount = models.DecimalField(
        _('amount'),
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
    )
    currency = models.CharField(_('currency'), max_length=3, default='usd')

    created_at = models.DateTimeField(_('created at'), auto_now_add=True)

    class Meta:
        verbose_name = _('Payment')
        verbose_name_plural = _('Payments')
        db_table = 'payments'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['transaction_id'], name='payments_txn_idx'),
        ]

    def __str__(self):
        return f"{self.transaction_id} ({self.booking_id})"
