import contextlib

from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.db import transaction
from django.test import TestCase
from rest_framework import status as drf_status
from rest_framework.test import APITestCase

from hireflow.organization.models import Agency

USER = get_user_model()


class BaseTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cache.clear()
        super().setUpTestData()

    def setUp(self):
        # throttle history lives in the cache
        cache.clear()
        super().setUp()

    def tearDown(self) -> None:
        cache.clear()
        super().tearDown()

    @contextlib.contextmanager
    def atomicSubTest(self, **kwargs):
        """
        :keyword kwargs: kwargs to pass in subTest
        :return: A ContextManager which will rollback to initial save point upon exit

        Run all your cases inside a test case. Test execution will not be interrupted when single
        test fails, it will run all test cases and show result at last

        Usage
        ---
        .. code-block:: python

            for case in cases:
                with self.atomicSubTest():
                    run_test(case)
        """
        savepoint = transaction.savepoint()

        try:
            with self.subTest(**kwargs):
                yield savepoint
        finally:
            transaction.savepoint_rollback(savepoint)


class HireflowAPITestCase(APITestCase, BaseTestCase):
    """
    Base Test Case for agency facing APIs

    It creates an agency and populates user model.

    set `agency_name` and `users` to do so.

    agency_name = 'Name of Agency'

    users = [
            ('email1@email.com', 'password'),
            ('email2@email.com', 'password')
        ]

    *Note*: The first user will be administrator of the agency, the others
    are plain users without membership.
    """
    agency_name = None
    agency_slug = None
    users = None
    admin = None
    status = drf_status

    def __init__(self, *args, **kwargs):
        assert self.agency_name is not None
        assert self.users is not None
        self.created_users = list()
        super().__init__(*args, **kwargs)

    def create_users(self):
        for email, password in self.users:
            self.created_users.append(
                USER.objects.create_user(
                    username=email,
                    email=email,
                    password=password,
                    first_name=email.split('@')[0],
                )
            )

    def create_agency(self):
        agency = Agency(name=self.agency_name)
        if self.agency_slug:
            agency.slug = self.agency_slug
        agency.save()
        return agency

    def setUp(self):
        super().setUp()
        self.created_users = list()
        self.create_users()
        self.admin = self.created_users[0]
        self.agency = self.create_agency()
        self.agency.administrators.add(self.admin)
