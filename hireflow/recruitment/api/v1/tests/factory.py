import factory
from factory.django import DjangoModelFactory

from hireflow.organization.api.v1.tests.factory import AgencyFactory, ClientFactory
from hireflow.recruitment.constants import ApplicationStatus, ClientDecision, OPEN
from hireflow.recruitment.models import (
    Application,
    ClientFeedback,
    Job,
    Shortlist,
    ShortlistItem,
)


class JobFactory(DjangoModelFactory):
    class Meta:
        model = Job

    agency = factory.SubFactory(AgencyFactory)
    client = factory.SubFactory(
        ClientFactory,
        agency=factory.SelfAttribute('..agency')
    )
    title = factory.Faker('job')
    location = factory.Faker('city')
    status = OPEN


class ApplicationFactory(DjangoModelFactory):
    class Meta:
        model = Application

    job = factory.SubFactory(JobFactory)
    agency = factory.SelfAttribute('job.agency')
    full_name = factory.Faker('name')
    email = factory.Faker('email')
    phone = factory.Faker('numerify', text='98########')
    status = ApplicationStatus.NEW
    note = ''


class ShortlistFactory(DjangoModelFactory):
    class Meta:
        model = Shortlist

    job = factory.SubFactory(JobFactory)
    agency = factory.SelfAttribute('job.agency')
    client = factory.SelfAttribute('job.client')
    name = factory.Sequence(lambda n: f"Shortlist {n}")
    note = factory.Faker('sentence')


class ShortlistItemFactory(DjangoModelFactory):
    class Meta:
        model = ShortlistItem

    shortlist = factory.SubFactory(ShortlistFactory)
    application = factory.SubFactory(
        ApplicationFactory,
        job=factory.SelfAttribute('..shortlist.job')
    )
    order = factory.Sequence(lambda n: n)


class ClientFeedbackFactory(DjangoModelFactory):
    class Meta:
        model = ClientFeedback

    shortlist = factory.SubFactory(ShortlistFactory)
    agency = factory.SelfAttribute('shortlist.agency')
    application = factory.SubFactory(
        ApplicationFactory,
        job=factory.SelfAttribute('..shortlist.job')
    )
    decision = ClientDecision.APPROVED
    comment = factory.Faker('sentence')
