from django.contrib.auth.models import User
from django.test import TestCase
from django.urls import reverse

from academics.models import Topper
from administration.models import AdminRole
from campus_life.models import Club
from front_cms.models import CampusStat, PhotoGallery
from notices.models import Notice


class HomePageTests(TestCase):
    def test_only_active_content_is_shown(self):
        Notice.objects.create(title="Admissions open")
        Notice.objects.create(title="Withdrawn notice", is_active=False)
        CampusStat.objects.create(stat_name="Students", stat_value="5,000+", display_order=2)
        CampusStat.objects.create(stat_name="Faculty", stat_value="250+", display_order=1)
        Club.objects.create(name="Robotics", member_count=50)
        Topper.objects.create(name="Aditi", department="CSE", year=2024, rank=1, cgpa="9.80")

        response = self.client.get(reverse("home"))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Admissions open")
        self.assertNotContains(response, "Withdrawn notice")
        self.assertEqual(
            [stat.stat_name for stat in response.context["campus_stats"]], ["Faculty", "Students"]
        )
        self.assertContains(response, "Robotics")
        self.assertContains(response, "Aditi")

    def test_home_is_get_only(self):
        self.assertEqual(self.client.post(reverse("home")).status_code, 405)


class NavigationTests(TestCase):
    def test_public_menu(self):
        response = self.client.get(reverse("home"))
        sections = [section for section, _ in response.context["site_menu"]]
        self.assertEqual(
            sections, ["Home", "About", "Academics", "Departments", "Campus Life", "Updates", "Contact"]
        )
        self.assertIsNone(response.context["role"])
        self.assertContains(response, reverse("administration:admin_login"))

    def test_admin_link_for_admins(self):
        user = User.objects.create_user(username="admin@nalanda.edu")
        AdminRole.objects.create(user=user)
        self.client.force_login(user)

        response = self.client.get(reverse("home"))
        self.assertTrue(response.context["is_admin"])
        self.assertContains(response, reverse("dashboard:admin_home"))


class GalleryTests(TestCase):
    def test_category_and_subcategory_filters(self):
        for title, category, subcategory in [
            ("Library", "campus", "buildings"),
            ("Lawn", "campus", "grounds"),
            ("Fest night", "events", ""),
        ]:
            PhotoGallery.objects.create(
                title=title, category=category, subcategory=subcategory, image="photo-gallery/x.png"
            )

        response = self.client.get(reverse("gallery"))
        self.assertEqual(len(response.context["photos"]), 3)
        self.assertEqual(list(response.context["categories"]), ["campus", "events"])

        response = self.client.get(
            reverse("gallery_category", args=["campus"]), {"subcategory": "grounds"}
        )
        self.assertEqual([p.title for p in response.context["photos"]], ["Lawn"])
        self.assertEqual(list(response.context["subcategories"]), ["buildings", "grounds"])
