import logging

from django.db import transaction
from django.db.models import Count, Q
from django.utils.translation import gettext_lazy as _
from rest_framework.exceptions import ValidationError
from rest_framework.generics import get_object_or_404

from hireflow.common.models import EventLog
from hireflow.core.constants.common import SHORTLIST_CREATED, CLIENT_FEEDBACK_RECORDED
from hireflow.recruitment.constants import ClientDecision
from hireflow.recruitment.models import (
    Application,
    ClientFeedback,
    Shortlist,
    ShortlistItem,
)

logger = logging.getLogger(__name__)


def create_shortlist(agency, job, name, application_ids, client=None, note='',
                     created_by=None):
    """
    Create a shortlist of `application_ids` (kept in the given order) for
    `job`. Every application must belong to both `agency` and `job`;
    the client defaults to the client of the job.

    :raises ValidationError: on any foreign or duplicated reference
    """
    application_ids = list(application_ids or [])
    client = client or job.client

    if job.agency_id != agency.id:
        raise ValidationError({'job': _('Job not found.')})

    if client is not None and client.agency_id != agency.id:
        raise ValidationError({'client': _('Client not found.')})

    if len(set(application_ids)) != len(application_ids):
        raise ValidationError({
            'application_ids': _('An application can be shortlisted only once.')
        })

    if application_ids:
        valid_applications = Application.objects.filter(
            id__in=application_ids,
            agency=agency,
            job=job,
        ).count()
        if valid_applications != len(application_ids):
            raise ValidationError({
                'application_ids': _(
                    "Some applications are invalid or don't belong to this job."
                )
            })

    with transaction.atomic():
        shortlist = Shortlist.objects.create(
            agency=agency,
            job=job,
            client=client,
            name=name,
            note=note or '',
            created_by=created_by,
        )
        ShortlistItem.objects.bulk_create([
            ShortlistItem(
                shortlist=shortlist,
                application_id=application_id,
                order=index
            ) for index, application_id in enumerate(application_ids)
        ])
        EventLog.objects.create(
            agency=agency,
            type=SHORTLIST_CREATED,
            payload={
                'shortlistId': shortlist.id,
                'shortlistName': shortlist.name,
                'jobId': job.id,
                'applicationIds': application_ids,
            }
        )

    logger.info(
        f"Created shortlist {shortlist.id} for job {job.id} of agency "
        f"{agency.id} with {len(application_ids)} candidates."
    )
    return shortlist


def record_feedback(shortlist, application, decision, comment=''):
    """
    Store the client's decision about `application` on `shortlist`.

    Resubmission overwrites the previous decision and comment (last write
    wins); the row keeps its id and `created_at`.

    :raises ValidationError: when the application is not on the shortlist
    """
    try:
        decision = ClientDecision(decision)
    except ValueError:
        raise ValidationError({'decision': _('Invalid decision.')})

    is_item = ShortlistItem.objects.filter(
        shortlist=shortlist,
        application=application,
    ).exists()
    if not is_item or application.agency_id != shortlist.agency_id:
        raise ValidationError({
            'application_id': _('Application not found in this shortlist.')
        })

    with transaction.atomic():
        feedback, created = ClientFeedback.objects.update_or_create(
            shortlist=shortlist,
            application=application,
            defaults={
                'agency_id': shortlist.agency_id,
                'decision': decision,
                'comment': comment or '',
            }
        )
        EventLog.objects.create(
            agency_id=shortlist.agency_id,
            type=CLIENT_FEEDBACK_RECORDED,
            application=application,
            payload={
                'shortlistId': shortlist.id,
                'shortlistName': shortlist.name,
                'applicationId': application.id,
                'clientFeedbackId': feedback.id,
                'decision': decision.value,
                'resubmitted': not created,
            }
        )

    logger.info(
        f"Client feedback {feedback.id} recorded on shortlist {shortlist.id} "
        f"for application {application.id}: {decision.value}"
        f"{'' if created else ' (overwritten)'}"
    )
    return feedback


def build_stats(total, approved, rejected):
    return {
        'total': total,
        'approved': approved,
        'rejected': rejected,
        'pending': max(0, total - approved - rejected),
    }


def get_aggregate_stats(shortlist):
    """
    Approved / rejected / pending counts over the shortlist's items.
    Items without feedback count as pending.
    """
    item_applications = ShortlistItem.objects.filter(
        shortlist=shortlist
    ).values('application_id')
    counts = ClientFeedback.objects.filter(
        shortlist=shortlist,
        application_id__in=item_applications,
    ).aggregate(
        approved=Count('id', filter=Q(decision=ClientDecision.APPROVED)),
        rejected=Count('id', filter=Q(decision=ClientDecision.REJECTED)),
    )
    return build_stats(
        total=ShortlistItem.objects.filter(shortlist=shortlist).count(),
        approved=counts['approved'] or 0,
        rejected=counts['rejected'] or 0,
    )


def annotate_stats(queryset):
    """Annotate a Shortlist queryset with the counts used by `build_stats`."""
    return queryset.annotate(
        candidates_count=Count('items', distinct=True),
        approved_count=Count(
            'feedbacks',
            filter=Q(feedbacks__decision=ClientDecision.APPROVED),
            distinct=True
        ),
        rejected_count=Count(
            'feedbacks',
            filter=Q(feedbacks__decision=ClientDecision.REJECTED),
            distinct=True
        ),
    )


def get_feedback_map(shortlist):
    """
    {application_id: {decision, comment, updatedAt}} of every recorded
    decision, used to restore already submitted state on reload.
    """
    return {
        str(feedback.application_id): {
            'decision': feedback.decision,
            'comment': feedback.comment or None,
            'updatedAt': feedback.modified_at.isoformat(),
        }
        for feedback in ClientFeedback.objects.filter(shortlist=shortlist)
    }


def resolve_share_token(share_token):
    """:raises Http404: for unknown tokens"""
    return get_object_or_404(
        Shortlist.objects.select_related('agency'),
        share_token=share_token
    )
