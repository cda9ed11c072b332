from datetime import timedelta

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from front_cms.models import CreativeWork
from .forms import CampusEventForm, HostelInfoForm
from .models import (
    Amenity,
    CampusEvent,
    CampusLifeContent,
    Club,
    HostelInfo,
    IncubationCenter,
    Publication,
    SocialInitiative,
    SportsFacility,
    StudentActivity,
    StudentGovernance,
    WellnessProgram,
    WomenForumEvent,
)


class CampusEventFormTests(TestCase):
    def form_data(self, **overrides):
        data = {
            "title": "Tech Fest",
            "event_type": "technical",
            "start_date": "2025-02-10T10:00",
            "end_date": "2025-02-12T18:00",
        }
        data.update(overrides)
        return data

    def test_valid_event(self):
        self.assertTrue(CampusEventForm(self.form_data()).is_valid())

    def test_end_before_start(self):
        form = CampusEventForm(self.form_data(end_date="2025-02-09T10:00"))
        self.assertFalse(form.is_valid())
        self.assertIn("end_date", form.errors)

    def test_registration_needs_a_link(self):
        form = CampusEventForm(self.form_data(registration_required="on"))
        self.assertFalse(form.is_valid())
        self.assertIn("registration_url", form.errors)


class HostelInfoFormTests(TestCase):
    def form_data(self, **overrides):
        data = {
            "name": "Gargi Girls Hostel",
            "hostel_type": "girls",
            "capacity": "300",
            "rooms_available": "20",
            "facilities": "Wi-Fi\nLaundry",
            "fee_structure": '{"double": 55000}',
        }
        data.update(overrides)
        return data

    def test_saves_lists_and_fees(self):
        form = HostelInfoForm(self.form_data())
        self.assertTrue(form.is_valid(), form.errors)
        hostel = form.save()
        self.assertEqual(hostel.facilities, ["Wi-Fi", "Laundry"])
        self.assertEqual(hostel.fee_structure, {"double": 55000})

    def test_empty_fee_structure_becomes_empty_object(self):
        form = HostelInfoForm(self.form_data(fee_structure=""))
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data["fee_structure"], {})

    def test_fee_structure_must_be_an_object(self):
        form = HostelInfoForm(self.form_data(fee_structure="[55000]"))
        self.assertFalse(form.is_valid())
        self.assertIn("fee_structure", form.errors)

    def test_rooms_cannot_exceed_capacity(self):
        form = HostelInfoForm(self.form_data(rooms_available="301"))
        self.assertFalse(form.is_valid())
        self.assertIn("rooms_available", form.errors)


class CampusLifePagesTests(TestCase):
    def test_every_page_renders(self):
        for page in [
            "overview",
            "sports",
            "hostel",
            "wellness",
            "governance",
            "events",
            "amenities",
            "publications",
            "festivals",
            "womens-forum",
            "social-consciousness",
            "other-facilities",
            "clubs",
            "innovation",
            "student-activities",
        ]:
            with self.subTest(page=page):
                response = self.client.get(reverse("campus_life", args=[page]))
                self.assertEqual(response.status_code, 200)

    def test_card_pages_render_their_rows(self):
        now = timezone.now()
        SportsFacility.objects.create(name="Cricket Ground", booking_required=True)
        WellnessProgram.objects.create(name="Morning Yoga", instructor="Meera")
        StudentGovernance.objects.create(
            student_name="Asha Verma", position="President", bio="Final year CSE"
        )
        Amenity.objects.create(name="Cafeteria", category="food")
        Amenity.objects.create(name="Bank Counter", category="other")
        CampusEvent.objects.create(
            title="Holi Utsav",
            event_type="festival",
            start_date=now,
            registration_required=True,
            registration_url="https://example.com/holi",
        )
        WomenForumEvent.objects.create(
            title="Leadership Talk",
            speaker_name="Dr. Rao",
            registration_link="https://example.com/talk",
        )
        SocialInitiative.objects.create(title="Village Literacy Drive", participants_count=30)
        Club.objects.create(name="Chess Club", member_count=40)

        expected = {
            "sports": "Cricket Ground",
            "wellness": "Morning Yoga",
            "governance": "Asha Verma",
            "amenities": "Cafeteria",
            "festivals": "Holi Utsav",
            "womens-forum": "Leadership Talk",
            "social-consciousness": "Village Literacy Drive",
            "other-facilities": "Bank Counter",
            "clubs": "Chess Club",
        }
        for page, text in expected.items():
            with self.subTest(page=page):
                response = self.client.get(reverse("campus_life", args=[page]))
                self.assertContains(response, text)

        response = self.client.get(reverse("campus_life", args=["governance"]))
        self.assertContains(response, "Final year CSE")
        response = self.client.get(reverse("campus_life", args=["womens-forum"]))
        self.assertContains(response, 'href="https://example.com/talk"')

    def test_home_is_the_overview(self):
        response = self.client.get(reverse("campus_life_home"))
        self.assertEqual(response.context["page"], "overview")

    def test_aliases(self):
        response = self.client.get(reverse("campus_life", args=["activities"]))
        self.assertEqual(response.context["page"], "events")
        response = self.client.get(reverse("campus_life", args=["social"]))
        self.assertEqual(response.context["page"], "social-consciousness")

    def test_unknown_page_is_404(self):
        response = self.client.get(reverse("campus_life", args=["casino"]))
        self.assertEqual(response.status_code, 404)

    def test_intro_comes_from_page_content(self):
        CampusLifeContent.objects.create(page_slug="clubs", title="Find your tribe")
        Club.objects.create(name="Chess Club", member_count=40)
        Club.objects.create(name="Secret Club", is_active=False)

        response = self.client.get(reverse("campus_life", args=["clubs"]))
        self.assertContains(response, "Find your tribe")
        self.assertContains(response, "Chess Club")
        self.assertNotContains(response, "Secret Club")

    def test_events_split_into_upcoming_and_past(self):
        now = timezone.now()
        CampusEvent.objects.create(title="Hackathon", start_date=now + timedelta(days=5))
        CampusEvent.objects.create(title="Orientation", start_date=now - timedelta(days=5))

        response = self.client.get(reverse("campus_life", args=["events"]))
        self.assertEqual([e.title for e in response.context["upcoming"]], ["Hackathon"])
        self.assertEqual([e.title for e in response.context["past"]], ["Orientation"])

    def test_festivals_match_event_type_case_insensitively(self):
        now = timezone.now()
        CampusEvent.objects.create(title="Holi", event_type="Festival", start_date=now)
        CampusEvent.objects.create(title="Dance night", event_type="cultural", start_date=now)
        CampusEvent.objects.create(title="Seminar", event_type="technical", start_date=now)

        response = self.client.get(reverse("campus_life", args=["festivals"]))
        self.assertEqual({e.title for e in response.context["items"]}, {"Holi", "Dance night"})

    def test_other_facilities_are_other_amenities(self):
        Amenity.objects.create(name="ATM", category="other")
        Amenity.objects.create(name="Cafeteria", category="food")
        response = self.client.get(reverse("campus_life", args=["other-facilities"]))
        self.assertEqual([a.name for a in response.context["items"]], ["ATM"])

    def test_innovation_lists_centers_and_innovation_works(self):
        IncubationCenter.objects.create(name="Nalanda Incubator", current_startups=12)
        CreativeWork.objects.create(title="Drone", category="Innovation", author_name="Ira")
        CreativeWork.objects.create(title="Poem", category="Writing", author_name="Dev")

        response = self.client.get(reverse("campus_life", args=["innovation"]))
        self.assertEqual([w.title for w in response.context["items"]], ["Drone"])
        self.assertContains(response, "Nalanda Incubator")

    def test_student_activities_category_filter(self):
        StudentActivity.objects.create(name="NSS", category="service")
        StudentActivity.objects.create(name="Drama", category="arts")
        response = self.client.get(
            reverse("campus_life", args=["student-activities"]), {"category": "arts"}
        )
        self.assertEqual([a.name for a in response.context["items"]], ["Drama"])
        self.assertEqual(list(response.context["categories"]), ["arts", "service"])

    def test_hostel_fee_table(self):
        HostelInfo.objects.create(
            name="Aryabhata", hostel_type="boys", capacity=10, fee_structure={"triple": 45000}
        )
        response = self.client.get(reverse("campus_life", args=["hostel"]))
        self.assertContains(response, "Triple")


class PublicationDownloadTests(TestCase):
    def test_missing_file_is_404(self):
        publication = Publication.objects.create(title="Annual Magazine")
        response = self.client.get(reverse("publication_download", args=[publication.pk]))
        self.assertEqual(response.status_code, 404)
