from django.conf import settings
from django.core.management import BaseCommand
from django.db import transaction

from hireflow.organization.models import Agency, Client
from hireflow.recruitment.constants import ApplicationStatus
from hireflow.recruitment.models import Application, Job, Shortlist
from hireflow.recruitment.utils.shortlist import create_shortlist

CANDIDATES = [
    ('Asha Gurung', 'asha.gurung@example.com', ApplicationStatus.NEW),
    ('Bikash Thapa', 'bikash.thapa@example.com', ApplicationStatus.CONTACTED),
    ('Carla Mendes', 'carla.mendes@example.com', ApplicationStatus.CONTACTED),
    ('Deepa Rai', 'deepa.rai@example.com', ApplicationStatus.QUALIFIED),
    ('Erik Larsen', 'erik.larsen@example.com', ApplicationStatus.NEW),
]


class Command(BaseCommand):
    help = "Populate database with the read only demo agency"

    @transaction.atomic()
    def handle(self, *args, **options):
        agency, created = Agency.objects.get_or_create(
            slug=settings.DEMO_AGENCY_SLUG,
            defaults={'name': 'Demo Agency'}
        )
        if not created and Shortlist.objects.filter(agency=agency).exists():
            self.stdout.write(f"Demo agency {agency.slug} is already seeded.")
            return

        client, _ = Client.objects.get_or_create(
            agency=agency,
            name='Acme Logistics',
            defaults={
                'contact_name': 'Jordan Lee',
                'contact_email': 'jordan.lee@example.com',
            }
        )
        job, _ = Job.objects.get_or_create(
            agency=agency,
            title='Warehouse Supervisor',
            defaults={'client': client, 'location': 'Kathmandu'}
        )

        applications = []
        for count, (full_name, email, status) in enumerate(CANDIDATES, start=1):
            application, _ = Application.objects.get_or_create(
                agency=agency,
                job=job,
                email=email,
                defaults={'full_name': full_name, 'status': status}
            )
            applications.append(application)
        self.stdout.write(f"Seeded {len(applications)} applications.")

        shortlist = create_shortlist(
            agency=agency,
            job=job,
            name='Warehouse Supervisor - first round',
            application_ids=[application.id for application in applications[1:4]],
            client=client,
        )
        self.stdout.write(
            self.style.SUCCESS(f"Seeded shortlist, share url: {shortlist.share_url}")
        )
