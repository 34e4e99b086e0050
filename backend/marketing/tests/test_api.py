from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from identity.tests.tokens import bearer
from marketing.models import Feedback, NewsletterSubscriber, WebsiteEvent
from marketing.utils import hash_ip


class TrackTest(APITestCase):
    """
    POST /track
    """

    def test_event_is_stored_with_hashed_ip(self):
        response = self.client.post(
            reverse("track"),
            {"event": "cta_click", "source_page": "/pricing", "utm": {"utm_source": "google"},
             "metadata": {"button": "start"}},
            format="json", HTTP_X_FORWARDED_FOR="203.0.113.7, 10.0.0.1",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"success": True, "stored": True})

        event = WebsiteEvent.objects.get()
        self.assertEqual(event.utm_source, "google")
        self.assertEqual(event.metadata, {"button": "start"})
        self.assertEqual(event.ip_hash, hash_ip("203.0.113.7"))
        self.assertNotIn("203.0.113.7", event.ip_hash)

    def test_no_forwarded_header_means_no_hash(self):
        self.client.post(reverse("track"), {"event": "page_view", "source_page": "/"}, format="json")
        self.assertIsNone(WebsiteEvent.objects.get().ip_hash)

    def test_invalid_event_still_answers_200(self):
        response = self.client.post(reverse("track"), {"source_page": "/"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data["success"])
        self.assertFalse(response.data["stored"])
        self.assertEqual(WebsiteEvent.objects.count(), 0)


class FeedbackTest(APITestCase):
    """
    POST /feedback, GET /feedback (staff)
    """

    def test_submit(self):
        response = self.client.post(reverse("feedback"), {"type": "bug", "message": "Broken link"}, format="json")
        self.assertEqual(response.data, {"success": True, "message": "Feedback received!"})
        fb = Feedback.objects.get()
        self.assertEqual(fb.status, "new")
        self.assertEqual(fb.source_page, "/")

    def test_rejects_unknown_type(self):
        response = self.client.post(reverse("feedback"), {"type": "rant", "message": "x"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(response.data["error"].startswith("type:"))

    def test_listing_requires_staff(self):
        self.assertEqual(self.client.get(reverse("feedback")).status_code, status.HTTP_401_UNAUTHORIZED)
        self.client.credentials(HTTP_AUTHORIZATION=bearer("visitor"))
        self.assertEqual(self.client.get(reverse("feedback")).status_code, status.HTTP_403_FORBIDDEN)

    def test_staff_listing_filters_by_status(self):
        Feedback.objects.create(type="bug", message="a")
        Feedback.objects.create(type="question", message="b", status="resolved")
        self.client.credentials(HTTP_AUTHORIZATION=bearer("admin", is_staff=True))

        response = self.client.get(reverse("feedback"), {"status": "new"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([f["message"] for f in response.data["data"]], ["a"])

    def test_bad_limit(self):
        self.client.credentials(HTTP_AUTHORIZATION=bearer("admin", is_staff=True))
        response = self.client.get(reverse("feedback"), {"limit": "lots"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class NewsletterTest(APITestCase):
    """
    POST /newsletter, GET /newsletter/subscribers (staff)
    """

    def _subscribe(self, **data):
        body = {"email": "jane@example.com"}
        body.update(data)
        return self.client.post(reverse("newsletter"), body, format="json")

    def test_new_subscription_records_signup_event(self):
        response = self._subscribe(source_page="/blog")
        self.assertEqual(response.data["message"], "Successfully subscribed!")
        sub = NewsletterSubscriber.objects.get()
        self.assertEqual(sub.frequency, "monthly")
        event = WebsiteEvent.objects.get()
        self.assertEqual(event.event_type, "newsletter_signup")
        self.assertEqual(event.metadata, {"email_domain": "example.com", "frequency": "monthly"})

    def test_repeat_subscription_is_idempotent(self):
        self._subscribe()
        response = self._subscribe()
        self.assertEqual(response.data["message"], "Already subscribed!")
        self.assertEqual(NewsletterSubscriber.objects.count(), 1)
        self.assertEqual(WebsiteEvent.objects.count(), 1)

    def test_unsubscribed_is_reactivated(self):
        NewsletterSubscriber.objects.create(email="jane@example.com", status="unsubscribed")
        response = self._subscribe(frequency="weekly")
        self.assertEqual(response.data["message"], "Subscription reactivated!")
        sub = NewsletterSubscriber.objects.get()
        self.assertEqual((sub.status, sub.frequency), ("active", "weekly"))

    def test_invalid_email(self):
        response = self._subscribe(email="not-an-email")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(response.data["error"].startswith("email:"))

    def test_subscriber_listing(self):
        NewsletterSubscriber.objects.create(email="a@example.com")
        NewsletterSubscriber.objects.create(email="b@example.com", status="unsubscribed")
        self.client.credentials(HTTP_AUTHORIZATION=bearer("admin", is_staff=True))

        response = self.client.get(reverse("newsletter-subscribers"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["count"], 1)
        self.assertEqual(response.data["data"]["subscribers"][0]["email"], "a@example.com")


class AnalyticsSummaryTest(APITestCase):
    """
    GET /analytics/summary?days=
    """

    def test_summary(self):
        now = timezone.now()
        for page in ("/", "/", "/pricing"):
            WebsiteEvent.objects.create(event_type="page_view", source_page=page)
        WebsiteEvent.objects.create(event_type="cta_click", source_page="/pricing")
        WebsiteEvent.objects.create(event_type="page_view", source_page="/old", created_at=now - timedelta(days=40))
        NewsletterSubscriber.objects.create(email="a@example.com")
        Feedback.objects.create(type="bug", message="x")

        self.client.credentials(HTTP_AUTHORIZATION=bearer("admin", is_staff=True))
        data = self.client.get(reverse("analytics-summary"), {"days": "30"}).data["data"]

        self.assertEqual(data["period_days"], 30)
        self.assertEqual(data["events"], {"page_view": 3, "cta_click": 1})
        self.assertEqual(data["total_events"], 4)
        self.assertEqual(data["active_subscribers"], 1)
        self.assertEqual(data["pending_feedback"], 1)
        self.assertEqual(data["top_source_pages"], [{"page": "/", "count": 2}, {"page": "/pricing", "count": 2}])

    def test_requires_staff(self):
        self.assertEqual(self.client.get(reverse("analytics-summary")).status_code, status.HTTP_401_UNAUTHORIZED)
