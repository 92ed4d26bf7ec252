from django.db import models

from hireflow.common.models import TimeStampedModel
from hireflow.organization.models import Agency
from hireflow.recruitment.constants import ApplicationStatus
from hireflow.recruitment.models.job import Job


class Application(TimeStampedModel):
    """
    A candidate's pipeline record for one job.

    `status` only moves forward through the funnel (or to rejected), see
    `hireflow.recruitment.utils.pipeline`. `agency` is stored on the row
    itself so tenant checks never need a join through the job.
    """
    agency = models.ForeignKey(
        Agency,
        on_delete=models.CASCADE,
        related_name='applications'
    )
    job = models.ForeignKey(
        Job,
        on_delete=models.CASCADE,
        related_name='applications'
    )
    full_name = models.CharField(max_length=255)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=25, blank=True)
    cv_url = models.URLField(blank=True)
    status = models.CharField(
        choices=ApplicationStatus.choices,
        max_length=20,
        db_index=True,
        default=ApplicationStatus.NEW
    )
    note = models.TextField(blank=True, default='')
    tags = models.JSONField(default=list, blank=True)

    def __str__(self):
        return f"{self.full_name} - {self.job_id}"

    def save(self, *args, **kwargs):
        # tags behave as a set of strings, keep first occurrence order
        self.tags = list(dict.fromkeys(str(tag) for tag in (self.tags or [])))
        return super().save(*args, **kwargs)
