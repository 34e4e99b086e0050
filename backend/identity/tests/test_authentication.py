from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from demo_sessions.models import DemoSession
from .tokens import bearer


class OptionalAuthenticationTest(APITestCase):
    """
    Bearer tokens identify the caller but are never required.
    """

    def setUp(self):
        self.url = reverse("session-create")

    def test_anonymous_request_has_no_owner(self):
        response = self.client.post(self.url, {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNone(DemoSession.objects.get().user_id)

    def test_valid_token_sets_owner(self):
        self.client.credentials(HTTP_AUTHORIZATION=bearer("firebase-uid-1"))
        response = self.client.post(self.url, {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(DemoSession.objects.get().user_id, "firebase-uid-1")

    def test_invalid_token_continues_as_guest(self):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer not-a-jwt")
        with self.assertLogs("identity.authentication", level="WARNING"):
            response = self.client.post(self.url, {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNone(DemoSession.objects.get().user_id)

    def test_expired_token_continues_as_guest(self):
        self.client.credentials(HTTP_AUTHORIZATION=bearer("late", ttl=-3600))
        response = self.client.post(self.url, {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNone(DemoSession.objects.get().user_id)
