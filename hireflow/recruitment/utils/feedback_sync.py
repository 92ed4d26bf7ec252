"""
Propagates a client's decision on a shared shortlist into the
application's pipeline status.

The application is read first and written with a conditional update that
only matches while the status is still the one that was read. When a
concurrent writer wins, the whole decision is re-evaluated once against the
fresh row.
"""
import logging
from dataclasses import dataclass, asdict
from typing import Optional

from django.conf import settings
from django.db import transaction
from django.db.models import Case, F, TextField, Value, When
from django.db.models.functions import Concat
from django.utils import timezone

from hireflow.common.models import EventLog
from hireflow.core.constants.common import APPLICATION_STATUS_SYNCED_FROM_FEEDBACK
from hireflow.core.utils.common import to_iso_string
from hireflow.recruitment.constants import (
    FEEDBACK_SYNC_NOTE_TEMPLATE,
    SYNC_AGENCY_MISMATCH,
    SYNC_CONCURRENT_MODIFICATION,
    SYNC_DEMO_SIMULATED,
    SYNC_DISABLED,
    SYNC_NO_STATUS_MAPPING,
    SYNC_NOT_FOUND,
    SYNC_UPDATED,
)
from hireflow.recruitment.models import Application
from hireflow.recruitment.utils.pipeline import (
    explain_blocked_transition,
    map_decision_to_status,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncContext:
    feedback_id: int
    application_id: int
    shortlist_id: int
    shortlist_name: str
    agency_id: int
    decision: str
    is_demo: bool = False


@dataclass
class SyncResult:
    synced: bool
    reason: str
    previous_status: Optional[str] = None
    new_status: Optional[str] = None

    def as_dict(self):
        return asdict(self)


class _Conflict(Exception):
    """Conditional update matched no row."""

    def __init__(self, previous_status):
        self.previous_status = previous_status
        super().__init__(previous_status)


class FeedbackSyncEngine:
    def __init__(self, enabled, max_attempts=2, clock=timezone.now):
        self.enabled = enabled
        self.max_attempts = max_attempts
        self.clock = clock

    def sync(self, ctx):
        if not self.enabled:
            return SyncResult(synced=False, reason=SYNC_DISABLED)

        target = map_decision_to_status(ctx.decision)
        if target is None:
            return SyncResult(synced=False, reason=SYNC_NO_STATUS_MAPPING)

        previous_status = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                return self._attempt(ctx, target)
            except _Conflict as conflict:
                previous_status = conflict.previous_status
                logger.info(
                    f"Status of application {ctx.application_id} changed "
                    f"while syncing feedback {ctx.feedback_id} "
                    f"(attempt {attempt}/{self.max_attempts})."
                )

        logger.warning(
            f"Could not sync feedback {ctx.feedback_id} into application "
            f"{ctx.application_id}: concurrent modification."
        )
        return SyncResult(
            synced=False,
            previous_status=previous_status,
            reason=SYNC_CONCURRENT_MODIFICATION,
        )

    def _attempt(self, ctx, target):
        application = self._load_application(ctx.application_id)
        if application is None:
            logger.warning(
                f"Application {ctx.application_id} referenced by feedback "
                f"{ctx.feedback_id} does not exist."
            )
            return SyncResult(synced=False, reason=SYNC_NOT_FOUND)

        if application.agency_id != ctx.agency_id:
            logger.warning(
                f"Refused to sync feedback {ctx.feedback_id}: application "
                f"{application.id} belongs to agency {application.agency_id}, "
                f"shortlist {ctx.shortlist_id} belongs to agency {ctx.agency_id}."
            )
            return SyncResult(synced=False, reason=SYNC_AGENCY_MISMATCH)

        current = application.status
        blocked_reason = explain_blocked_transition(current, target)
        if blocked_reason:
            logger.info(
                f"Feedback {ctx.feedback_id} left application {application.id} "
                f"at {current}: {blocked_reason}."
            )
            return SyncResult(
                synced=False,
                previous_status=current,
                reason=blocked_reason,
            )

        if ctx.is_demo:
            return SyncResult(
                synced=False,
                previous_status=current,
                new_status=target.value,
                reason=SYNC_DEMO_SIMULATED,
            )

        with transaction.atomic():
            if not self._compare_and_swap(application, current, target, ctx):
                raise _Conflict(current)
            EventLog.objects.create(
                agency_id=ctx.agency_id,
                type=APPLICATION_STATUS_SYNCED_FROM_FEEDBACK,
                application_id=application.id,
                payload={
                    'applicationId': application.id,
                    'previousStatus': current,
                    'newStatus': target.value,
                    'shortlistId': ctx.shortlist_id,
                    'shortlistName': ctx.shortlist_name,
                    'clientFeedbackId': ctx.feedback_id,
                    'decision': ctx.decision,
                }
            )

        logger.info(
            f"Application {application.id} moved from {current} to "
            f"{target.value} by feedback {ctx.feedback_id}."
        )
        return SyncResult(
            synced=True,
            previous_status=current,
            new_status=target.value,
            reason=SYNC_UPDATED,
        )

    def _load_application(self, application_id):
        return Application.objects.filter(
            id=application_id
        ).only('id', 'agency', 'status').first()

    def _compare_and_swap(self, application, expected_status, target, ctx):
        """
        :return: True if the row still had `expected_status` and was updated
        """
        now = self.clock()
        line = FEEDBACK_SYNC_NOTE_TEMPLATE.format(
            shortlist_name=ctx.shortlist_name,
            timestamp=to_iso_string(now)
        )
        updated = Application.objects.filter(
            id=application.id,
            status=expected_status,
        ).update(
            status=target,
            note=Case(
                When(note='', then=Value(line)),
                default=Concat(F('note'), Value('\n\n' + line)),
                output_field=TextField(),
            ),
            modified_at=now,
        )
        return updated == 1


def get_feedback_sync_engine():
    return FeedbackSyncEngine(enabled=settings.FEEDBACK_SYNC_ENABLED)


def sync_application_status_from_feedback(ctx, engine=None):
    engine = engine or get_feedback_sync_engine()
    return engine.sync(ctx)
