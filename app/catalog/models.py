# catalog/models.py
import uuid
from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _


class Service(models.Model):
    """
    A treatment offering with a fixed, ordered list of bookable slot labels
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    name = models.CharField(
        _('name'),
        max_length=255,
        unique=True,
        help_text=_("Treatment name, referenced by bookings")
    )
    slots = models.JSONField(
        _('slots'),
        default=list,
        blank=True,
        help_text=_("Ordered time-slot labels, e.g. \"9:00 AM\"")
    )
    price = models.PositiveIntegerField(
        _('price'),
        default=0,
        help_text=_("Price in whole currency units")
    )

    created_at = models.DateTimeField(_('created at'), auto_now_add=True)
    updated_at = models.DateTimeField(_('updated at'), auto_now=True)

    class Meta:
        verbose_name = _('Service')
        verbose_name_plural = _('Services')
        db_table = 'services'
        ordering = ['created_at', 'name']

    def __str__(self):
        return self.name

    def clean(self):
        if not isinstance(self.slots, list) or not all(isinstance(s, str) for s in self.slots):
            raise ValidationError({'slots': _("Slots must be a list of labels")})
        if len(set(self.slots)) != len(self.slots):
            raise ValidationError({'slots': _("Slot labels must be unique")})
