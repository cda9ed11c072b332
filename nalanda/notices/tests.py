from datetime import timedelta

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from .forms import NewsAnnouncementForm, NoticeForm
from .models import NewsAnnouncement, Notice


class NoticeFormTests(TestCase):
    def test_description_is_capped(self):
        form = NoticeForm(
            {"title": "Long", "description": "x" * 2001, "category": "General", "priority": "Low"}
        )
        self.assertFalse(form.is_valid())
        self.assertIn("description", form.errors)

    def test_defaults(self):
        notice = Notice.objects.create(title="Welcome")
        self.assertEqual(notice.category, Notice.Category.GENERAL)
        self.assertEqual(notice.priority, Notice.Priority.MEDIUM)
        self.assertTrue(notice.is_new)
        self.assertTrue(notice.is_active)


class NewsAnnouncementFormTests(TestCase):
    def form_data(self, **overrides):
        data = {
            "title": "Placement drive",
            "content": "Forty companies on campus",
            "category": "placement",
            "publish_date": "2025-01-10T09:00",
            "tags": "placements\n\ncareers",
        }
        data.update(overrides)
        return data

    def test_tags_are_one_per_line(self):
        form = NewsAnnouncementForm(self.form_data())
        self.assertTrue(form.is_valid(), form.errors)
        article = form.save()
        self.assertEqual(article.tags, ["placements", "careers"])

    def test_expiry_must_follow_publish_date(self):
        form = NewsAnnouncementForm(self.form_data(expiry_date="2025-01-09T09:00"))
        self.assertFalse(form.is_valid())
        self.assertIn("expiry_date", form.errors)

    def test_is_expired(self):
        article = NewsAnnouncement(
            title="Old", content="-", expiry_date=timezone.now() - timedelta(hours=1)
        )
        self.assertTrue(article.is_expired)
        self.assertFalse(NewsAnnouncement(title="New", content="-").is_expired)


class PublicNoticeTests(TestCase):
    def test_notice_board_shows_active_notices_by_category(self):
        Notice.objects.create(title="Exam hall tickets", category="Examination")
        Notice.objects.create(title="Diwali break", category="Holiday")
        Notice.objects.create(title="Hidden notice", category="Holiday", is_active=False)

        response = self.client.get(reverse("notices"))
        self.assertContains(response, "Exam hall tickets")
        self.assertNotContains(response, "Hidden notice")

        response = self.client.get(reverse("notices"), {"category": "Holiday"})
        titles = [notice.title for notice in response.context["page_obj"]]
        self.assertEqual(titles, ["Diwali break"])

    def test_news_hides_expired_and_inactive(self):
        now = timezone.now()
        NewsAnnouncement.objects.create(title="Fresh", content="-", is_breaking=True)
        NewsAnnouncement.objects.create(
            title="Stale", content="-", expiry_date=now - timedelta(days=1)
        )
        NewsAnnouncement.objects.create(title="Draft", content="-", is_active=False)

        response = self.client.get(reverse("news"))
        titles = [article.title for article in response.context["page_obj"]]
        self.assertEqual(titles, ["Fresh"])
        self.assertEqual(response.context["breaking"].title, "Fresh")

    def test_news_detail(self):
        article = NewsAnnouncement.objects.create(
            title="Convocation", content="Held on campus", category="events"
        )
        NewsAnnouncement.objects.create(title="Alumni meet", content="-", category="events")

        response = self.client.get(reverse("news_detail", args=[article.pk]))
        self.assertContains(response, "Held on campus")
        self.assertEqual([item.title for item in response.context["related"]], ["Alumni meet"])

    def test_inactive_news_detail_is_404(self):
        article = NewsAnnouncement.objects.create(title="Draft", content="-", is_active=False)
        response = self.client.get(reverse("news_detail", args=[article.pk]))
        self.assertEqual(response.status_code, 404)
