from io import StringIO

from django.conf import settings
from django.core.management import call_command

from hireflow.common.api.tests.common import BaseTestCase
from hireflow.organization.models import Agency
from hireflow.recruitment.models import Shortlist


class TestSeedDemoAgency(BaseTestCase):

    def test_seeding_is_repeatable(self):
        call_command('seed_demo_agency', stdout=StringIO())
        call_command('seed_demo_agency', stdout=StringIO())

        agency = Agency.objects.get(slug=settings.DEMO_AGENCY_SLUG)
        self.assertTrue(agency.is_demo)
        self.assertEqual(agency.applications.count(), 5)
        shortlist = Shortlist.objects.get(agency=agency)
        self.assertEqual(shortlist.items.count(), 3)
        self.assertEqual(shortlist.client.name, 'Acme Logistics')
