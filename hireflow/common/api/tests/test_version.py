from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from config import VERSION


class TestVersion(APITestCase):

    def test_version(self):
        response = self.client.get(reverse('get_application_version'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertDictEqual(
            response.json(),
            {
                'version': '.'.join(str(i) for i in VERSION[:4]),
                'status': VERSION[4],
            }
        )

    def test_server_info_is_not_exposed(self):
        response = self.client.get('/api/v1/server-info/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
