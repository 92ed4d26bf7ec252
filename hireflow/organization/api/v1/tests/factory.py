import factory
from django.conf import settings
from django.contrib.auth import get_user_model
from factory.django import DjangoModelFactory

from hireflow.organization.models import Agency, Client

USER = get_user_model()


class UserFactory(DjangoModelFactory):
    class Meta:
        model = USER
        django_get_or_create = ('username',)

    email = factory.Sequence(lambda n: f'user{n}@example.com')
    username = factory.LazyAttribute(lambda o: o.email)
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    password = factory.django.Password('password')
    is_active = True


class AgencyFactory(DjangoModelFactory):
    class Meta:
        model = Agency
        skip_postgeneration_save = True

    name = factory.Sequence(lambda n: f"agency {n}")
    email = factory.Faker('company_email')

    @factory.post_generation
    def administrators(self, create, extracted, **kwargs):
        if create and extracted:
            self.administrators.add(*extracted)


class DemoAgencyFactory(AgencyFactory):
    name = 'Demo Agency'
    slug = factory.LazyFunction(lambda: settings.DEMO_AGENCY_SLUG)


class ClientFactory(DjangoModelFactory):
    class Meta:
        model = Client

    agency = factory.SubFactory(AgencyFactory)
    name = factory.Faker('company')
    contact_name = factory.Faker('name')
    contact_email = factory.Faker('email')
