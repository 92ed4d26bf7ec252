from django.conf import settings
from django.db import models

from hireflow.common.models import BaseModel, SlugModel


class Agency(BaseModel, SlugModel):
    """Staffing agency; every recruitment record belongs to exactly one."""
    name = models.CharField(
        max_length=255,
        help_text="Name of the Agency.",
    )
    administrators = models.ManyToManyField(
        to=settings.AUTH_USER_MODEL, blank=True, related_name="agencies"
    )
    email = models.EmailField(blank=True)
    website = models.URLField(blank=True)

    class Meta:
        ordering = ('created_at', 'name',)
        verbose_name_plural = 'agencies'

    def __str__(self):
        return self.name

    @property
    def is_demo(self):
        return self.slug == getattr(settings, 'DEMO_AGENCY_SLUG', None)

    def is_member(self, user):
        if not (user and user.is_authenticated):
            return False
        if user.is_superuser:
            return True
        return self.administrators.filter(pk=user.pk).exists()


class Client(BaseModel):
    """Hiring company the agency recruits for."""
    agency = models.ForeignKey(
        to=Agency,
        on_delete=models.CASCADE,
        related_name='clients'
    )
    name = models.CharField(max_length=255)
    contact_name = models.CharField(max_length=255, blank=True)
    contact_email = models.EmailField(blank=True)

    class Meta:
        ordering = ('name',)

    def __str__(self):
        return self.name
