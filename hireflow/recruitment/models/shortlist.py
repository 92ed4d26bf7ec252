from django.conf import settings
from django.db import models

from hireflow.common.models import BaseModel, TimeStampedModel
from hireflow.core.utils.common import generate_share_token, get_frontend_url
from hireflow.organization.models import Agency, Client
from hireflow.recruitment.constants import (
    ClientDecision,
    SHORTLIST_NAME_MAX_LENGTH,
    SHORTLIST_NOTE_MAX_LENGTH,
    FEEDBACK_COMMENT_MAX_LENGTH,
)
from hireflow.recruitment.models.application import Application
from hireflow.recruitment.models.job import Job


class Shortlist(BaseModel):
    agency = models.ForeignKey(
        Agency,
        on_delete=models.CASCADE,
        related_name='shortlists'
    )
    job = models.ForeignKey(
        Job,
        on_delete=models.CASCADE,
        related_name='shortlists'
    )
    client = models.ForeignKey(
        Client,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='shortlists'
    )
    name = models.CharField(max_length=SHORTLIST_NAME_MAX_LENGTH)
    note = models.TextField(max_length=SHORTLIST_NOTE_MAX_LENGTH, blank=True)
    share_token = models.CharField(
        max_length=64,
        unique=True,
        default=generate_share_token,
        editable=False
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_shortlists'
    )
    applications = models.ManyToManyField(
        Application,
        through='ShortlistItem',
        related_name='shortlists'
    )

    def __str__(self):
        return self.name

    @property
    def share_url(self):
        return get_frontend_url(f'shortlist/{self.share_token}')


class ShortlistItem(TimeStampedModel):
    shortlist = models.ForeignKey(
        Shortlist,
        on_delete=models.CASCADE,
        related_name='items'
    )
    application = models.ForeignKey(
        Application,
        on_delete=models.CASCADE,
        related_name='shortlist_items'
    )
    order = models.IntegerField(default=0)

    class Meta:
        ordering = ('order', 'id')
        constraints = [
            models.UniqueConstraint(
                fields=['shortlist', 'application'],
                name='unique_shortlist_application'
            ),
            models.UniqueConstraint(
                fields=['shortlist', 'order'],
                name='unique_shortlist_item_order'
            ),
        ]

    def __str__(self):
        return f"{self.shortlist_id}#{self.order}"


class ClientFeedback(TimeStampedModel):
    """
    Decision of the shortlist's client about one candidate.

    At most one row per (shortlist, application); a missing row means the
    decision is still pending.
    """
    agency = models.ForeignKey(
        Agency,
        on_delete=models.CASCADE,
        related_name='client_feedbacks'
    )
    shortlist = models.ForeignKey(
        Shortlist,
        on_delete=models.CASCADE,
        related_name='feedbacks'
    )
    application = models.ForeignKey(
        Application,
        on_delete=models.CASCADE,
        related_name='client_feedbacks'
    )
    decision = models.CharField(
        choices=ClientDecision.choices,
        max_length=20,
        db_index=True,
        default=ClientDecision.PENDING
    )
    comment = models.TextField(max_length=FEEDBACK_COMMENT_MAX_LENGTH, blank=True)

    class Meta:
        ordering = ('-modified_at',)
        constraints = [
            models.UniqueConstraint(
                fields=['shortlist', 'application'],
                name='unique_shortlist_feedback'
            ),
        ]

    def __str__(self):
        return f"{self.decision} on {self.application_id}"
