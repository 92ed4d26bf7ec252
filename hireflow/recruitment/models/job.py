from django.db import models

from hireflow.common.models import BaseModel
from hireflow.organization.models import Agency, Client
from hireflow.recruitment.constants import JOB_STATUS_CHOICES, OPEN


class Job(BaseModel):
    agency = models.ForeignKey(
        Agency,
        on_delete=models.CASCADE,
        related_name='jobs'
    )
    client = models.ForeignKey(
        Client,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='jobs'
    )
    title = models.CharField(max_length=255)
    location = models.CharField(max_length=255, blank=True)
    status = models.CharField(
        choices=JOB_STATUS_CHOICES,
        max_length=20,
        db_index=True,
        default=OPEN
    )

    def __str__(self):
        return self.title
