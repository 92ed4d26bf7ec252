from django.db import models

from hireflow.common.models.abstract import TimeStampedModel
from hireflow.core.constants.common import EVENT_LOG_TYPE_CHOICES


class EventLog(TimeStampedModel):
    """
    Append only audit trail of an agency.

    Entries are written once and never updated; `payload` keeps the
    structured details of the event so timelines can be built without
    parsing free text.
    """
    agency = models.ForeignKey(
        to='organization.Agency',
        on_delete=models.CASCADE,
        related_name='event_logs'
    )
    type = models.CharField(
        max_length=64,
        choices=EVENT_LOG_TYPE_CHOICES,
        db_index=True
    )
    application = models.ForeignKey(
        to='recruitment.Application',
        on_delete=models.CASCADE,
        related_name='event_logs',
        null=True,
        blank=True
    )
    payload = models.JSONField(default=dict, blank=True)

    class Meta:
        ordering = ('-created_at', '-id')

    def __str__(self):
        return f"{self.type} ({self.agency_id})"
