# doctors/models.py
import uuid
from django.db import models
from django.utils.translation import gettext_lazy as _


class Doctor(models.Model):
    """
    Clinic doctor managed by admins; email is the roster key
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    name = models.CharField(_('name'), max_length=255)
    email = models.EmailField(
        _('email address'),
        help_text=_("Used for the duplicate check and removal")
    )
    specialty = models.CharField(
        _('specialty'),
        max_length=255,
        blank=True,
        default='',
        help_text=_("Treatment the doctor provides")
    )
    img = models.URLField(_('image'), max_length=512, blank=True, default='')

    created_at = models.DateTimeField(_('created at'), auto_now_add=True)
    updated_at = models.DateTimeField(_('updated at'), auto_now=True)

    class Meta:
        verbose_name = _('Doctor')
        verbose_name_plural = _('Doctors')
        db_table = 'doctors'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['email'], name='doctors_email_idx'),
        ]

    def __str__(self):
        return f"{self.name} <{self.email}>"
