from django.test import TestCase
from django.urls import reverse

from .forms import OfficeLocationForm
from .models import AboutPage, AccreditationInfo, AwardAchievement, ContactInfo, LeadershipMessage


class OfficeLocationFormTests(TestCase):
    def test_coordinates_are_normalised(self):
        form = OfficeLocationForm({"name": "Admin Block", "map_coordinates": " 12.97 , 77.59 "})
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data["map_coordinates"], "12.97,77.59")

    def test_bad_coordinates(self):
        for value in ["north", "12.97", "95,77"]:
            with self.subTest(value=value):
                form = OfficeLocationForm({"name": "Admin Block", "map_coordinates": value})
                self.assertFalse(form.is_valid())
                self.assertIn("map_coordinates", form.errors)


class AboutPagesTests(TestCase):
    def test_about_pages_by_type(self):
        AboutPage.objects.create(
            page_type=AboutPage.PageType.HISTORY, title="Our history", content="Founded in 1998"
        )
        AboutPage.objects.create(
            page_type=AboutPage.PageType.ABOUT, title="About", content="A premier institute"
        )

        response = self.client.get(reverse("history"))
        self.assertContains(response, "Founded in 1998")
        self.assertNotContains(response, "A premier institute")
        for name in ["about", "vision_mission", "governance"]:
            with self.subTest(name=name):
                self.assertEqual(self.client.get(reverse(name)).status_code, 200)

    def test_leadership_messages(self):
        LeadershipMessage.objects.create(
            position=LeadershipMessage.Position.CHAIRMAN,
            name="Shri Anand Mehta",
            message="Education transforms lives.",
        )
        response = self.client.get(reverse("chairman_message"))
        self.assertContains(response, "Education transforms lives.")

        response = self.client.get(reverse("director_message"))
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.context["message"])

    def test_accreditation_by_type(self):
        AccreditationInfo.objects.create(accreditation_type="naac", title="NAAC A++")
        AccreditationInfo.objects.create(accreditation_type="nba", title="NBA Tier 1")

        response = self.client.get(reverse("accreditation_detail", args=["naac"]))
        self.assertEqual([a.title for a in response.context["accreditations"]], ["NAAC A++"])
        self.assertEqual(response.context["accreditation_label"], "NAAC")

        response = self.client.get(reverse("accreditation"))
        self.assertEqual(len(response.context["accreditations"]), 2)

    def test_unknown_accreditation_is_404(self):
        response = self.client.get(reverse("accreditation_detail", args=["iso"]))
        self.assertEqual(response.status_code, 404)

    def test_awards_and_contact(self):
        AwardAchievement.objects.create(title="Best Engineering College", display_order=1)
        ContactInfo.objects.create(office_name="Admissions", email="admissions@nalanda.edu")
        ContactInfo.objects.create(office_name="Closed desk", is_active=False)

        self.assertContains(self.client.get(reverse("awards")), "Best Engineering College")
        response = self.client.get(reverse("contact"))
        self.assertContains(response, "admissions@nalanda.edu")
        self.assertNotContains(response, "Closed desk")
