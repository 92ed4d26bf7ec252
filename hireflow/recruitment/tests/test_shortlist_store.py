import random

from rest_framework.exceptions import ValidationError
from django.http import Http404

from hireflow.common.api.tests.common import BaseTestCase
from hireflow.common.models import EventLog
from hireflow.core.constants.common import CLIENT_FEEDBACK_RECORDED, SHORTLIST_CREATED
from hireflow.organization.api.v1.tests.factory import AgencyFactory, ClientFactory
from hireflow.recruitment.api.v1.tests.factory import ApplicationFactory, JobFactory
from hireflow.recruitment.constants import ClientDecision
from hireflow.recruitment.models import ClientFeedback
from hireflow.recruitment.utils.shortlist import (
    annotate_stats,
    create_shortlist,
    get_aggregate_stats,
    get_feedback_map,
    record_feedback,
    resolve_share_token,
)


class TestShortlistStore(BaseTestCase):

    def setUp(self):
        super().setUp()
        self.job = JobFactory()
        self.agency = self.job.agency
        self.applications = ApplicationFactory.create_batch(4, job=self.job)

    def create_shortlist(self, applications=None, **kwargs):
        applications = self.applications if applications is None else applications
        return create_shortlist(
            agency=self.agency,
            job=self.job,
            name='First round',
            application_ids=[application.id for application in applications],
            **kwargs
        )

    def test_items_keep_given_order(self):
        applications = list(reversed(self.applications))

        shortlist = self.create_shortlist(applications)

        self.assertListEqual(
            list(shortlist.items.values_list('application_id', 'order')),
            [(application.id, index) for index, application in enumerate(applications)]
        )
        self.assertTrue(shortlist.share_token)
        self.assertTrue(shortlist.share_url.endswith(f'/shortlist/{shortlist.share_token}'))
        self.assertTrue(EventLog.objects.filter(
            agency=self.agency,
            type=SHORTLIST_CREATED,
            payload__shortlistId=shortlist.id
        ).exists())

    def test_share_tokens_are_unique(self):
        first, second = self.create_shortlist(), self.create_shortlist()
        self.assertNotEqual(first.share_token, second.share_token)

    def test_empty_shortlist_is_allowed(self):
        shortlist = self.create_shortlist([])
        self.assertEqual(get_aggregate_stats(shortlist)['total'], 0)

    def test_foreign_references_are_rejected(self):
        other_job = JobFactory()
        other_application = ApplicationFactory(job=other_job)
        sibling_job_application = ApplicationFactory(
            job=JobFactory(agency=self.agency)
        )
        cases = (
            ('job', dict(job=other_job)),
            ('client', dict(client=ClientFactory())),
            ('application_ids', dict(application_ids=[other_application.id])),
            ('application_ids', dict(application_ids=[sibling_job_application.id])),
            ('application_ids', dict(
                application_ids=[self.applications[0].id, self.applications[0].id]
            )),
        )
        for field, kwargs in cases:
            with self.atomicSubTest(field=field, kwargs=kwargs):
                data = dict(
                    agency=self.agency,
                    job=self.job,
                    name='Invalid',
                    application_ids=[self.applications[0].id],
                )
                data.update(kwargs)
                with self.assertRaises(ValidationError) as error:
                    create_shortlist(**data)
                self.assertIn(field, error.exception.detail)
        self.assertFalse(self.agency.shortlists.exists())

    def test_record_feedback_of_non_item_is_rejected(self):
        shortlist = self.create_shortlist(self.applications[:2])
        with self.assertRaises(ValidationError):
            record_feedback(shortlist, self.applications[3], ClientDecision.APPROVED)
        self.assertFalse(ClientFeedback.objects.exists())

    def test_resubmission_overwrites_previous_decision(self):
        shortlist = self.create_shortlist()
        application = self.applications[0]

        first = record_feedback(shortlist, application, ClientDecision.APPROVED, 'Strong')
        second = record_feedback(shortlist, application, 'REJECTED', '')

        self.assertEqual(first.id, second.id)
        feedback = ClientFeedback.objects.get(shortlist=shortlist, application=application)
        self.assertEqual(feedback.decision, ClientDecision.REJECTED)
        self.assertEqual(feedback.comment, '')
        self.assertEqual(feedback.agency_id, self.agency.id)
        self.assertEqual(
            EventLog.objects.filter(type=CLIENT_FEEDBACK_RECORDED).count(),
            2
        )

    def test_invalid_decision(self):
        shortlist = self.create_shortlist()
        with self.assertRaises(ValidationError):
            record_feedback(shortlist, self.applications[0], 'MAYBE')

    def test_aggregate_stats_always_add_up(self):
        shortlist = self.create_shortlist()
        decisions = [ClientDecision.APPROVED, ClientDecision.REJECTED, ClientDecision.PENDING]
        total = len(self.applications)

        for _ in range(12):
            record_feedback(
                shortlist,
                random.choice(self.applications),
                random.choice(decisions)
            )
            stats = get_aggregate_stats(shortlist)
            annotated = annotate_stats(type(shortlist).objects.filter(id=shortlist.id)).get()

            self.assertEqual(stats['total'], total)
            self.assertEqual(
                stats['approved'] + stats['rejected'] + stats['pending'],
                total
            )
            self.assertEqual(annotated.candidates_count, total)
            self.assertEqual(annotated.approved_count, stats['approved'])
            self.assertEqual(annotated.rejected_count, stats['rejected'])

    def test_stats(self):
        shortlist = self.create_shortlist()
        record_feedback(shortlist, self.applications[0], ClientDecision.APPROVED)
        record_feedback(shortlist, self.applications[1], ClientDecision.REJECTED)

        self.assertDictEqual(
            get_aggregate_stats(shortlist),
            {'total': 4, 'approved': 1, 'rejected': 1, 'pending': 2}
        )

    def test_feedback_map(self):
        shortlist = self.create_shortlist()
        application = self.applications[2]
        feedback = record_feedback(shortlist, application, ClientDecision.APPROVED, 'Good fit')

        self.assertDictEqual(
            get_feedback_map(shortlist),
            {
                str(application.id): {
                    'decision': 'APPROVED',
                    'comment': 'Good fit',
                    'updatedAt': feedback.modified_at.isoformat(),
                }
            }
        )

    def test_resolve_share_token(self):
        shortlist = self.create_shortlist()
        self.assertEqual(resolve_share_token(shortlist.share_token), shortlist)
        with self.assertRaises(Http404):
            resolve_share_token('unknown-token')

    def test_agency_of_demo_slug_is_demo(self):
        self.assertFalse(self.agency.is_demo)
        self.assertTrue(AgencyFactory(slug='demo-agency').is_demo)
