from io import StringIO
from unittest import mock

from django.contrib.auth.models import Group, User
from django.core.management import call_command
from django.test import RequestFactory, TestCase
from django.urls import reverse

from academics.models import Department
from administration.models import AdminActivityLog, AdminRole, Profile
from front_cms.registry import all_managers
from notices.models import Notice
from students.models import StudentSubmission
from .context_processors import admin_navigation
from .navigation import admin_sections
from .views import get_dashboard_data


def create_admin():
    user = User.objects.create_user(username="admin@nalanda.edu", password="Campus#2024")
    AdminRole.objects.create(user=user, role_level=AdminRole.Level.ADMIN)
    return user


class DashboardDataTests(TestCase):
    def test_counts_only_active_rows(self):
        Notice.objects.create(title="Live")
        Notice.objects.create(title="Hidden", is_active=False)

        data = get_dashboard_data()
        content = dict((group, stats) for group, stats, _ in data["group_stats"])["Content"]
        counts = {item["manager"].slug: item["count"] for item in content}
        self.assertEqual(counts["notices"], 1)
        self.assertEqual(data["content_tables"], len({m.model for m in all_managers()}))

    def test_pending_submissions(self):
        student = User.objects.create_user(username="student@nalanda.edu")
        for status in ("pending", "pending", "approved"):
            StudentSubmission.objects.create(
                user=student,
                title="Work",
                category="Writing",
                department="Civil Engineering",
                status=status,
            )
        self.assertEqual(get_dashboard_data()["pending_submissions"], 2)


class AdminHomeTests(TestCase):
    def test_admin_sees_overview(self):
        admin = create_admin()
        AdminActivityLog.objects.create(admin=admin, action="create", resource_type="notices")
        self.client.force_login(admin)

        response = self.client.get(reverse("dashboard:admin_home"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.context["recent_activity"]), 1)
        self.assertIn("admin_sections", response.context)
        self.assertNotIn("site_menu", response.context)

    def test_non_admin_is_redirected(self):
        self.client.force_login(User.objects.create_user(username="student@nalanda.edu"))
        response = self.client.get(reverse("dashboard:admin_home"))
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response["Location"].startswith(reverse("administration:admin_login")))


class NavigationTests(TestCase):
    def test_sections_include_management_screens_and_managers(self):
        sections = dict(admin_sections())
        self.assertEqual(list(sections)[0], "Dashboard")
        management = [entry["title"] for entry in sections["Management"]]
        self.assertIn("Student Submissions", management)
        self.assertIn("Roles & Permissions", management)

        content_urls = [entry["url"] for entry in sections["Content"]]
        self.assertIn(reverse("front_cms:manage", args=["notices"]), content_urls)

    def test_sidebar_only_under_admin(self):
        factory = RequestFactory()
        self.assertEqual(admin_navigation(factory.get("/notices/")), {})
        self.assertIn("admin_sections", admin_navigation(factory.get("/admin/notices/")))


class SeedContentTests(TestCase):
    def test_seeding_twice_creates_nothing_new(self):
        call_command("seed_content", stdout=StringIO())
        first = Department.objects.count()
        notices = Notice.objects.count()

        out = StringIO()
        call_command("seed_content", stdout=out)
        self.assertEqual(first, 8)
        self.assertEqual(Department.objects.count(), first)
        self.assertEqual(Notice.objects.count(), notices)
        self.assertIn("Done. 0 new rows created.", out.getvalue())


class FirstSetupTests(TestCase):
    settings_values = {
        "DJANGO_SUPERUSER_EMAIL": "owner@nalanda.edu",
        "DJANGO_SUPERUSER_PASSWORD": "Campus#2024",
    }

    def fake_config(self, name, default=None, **kwargs):
        return self.settings_values.get(name, default)

    @mock.patch("dashboard.management.commands.first_setup.call_command")
    def test_creates_super_admin_once(self, migrate):
        with mock.patch(
            "dashboard.management.commands.first_setup.config", side_effect=self.fake_config
        ):
            call_command("first_setup", stdout=StringIO())
            call_command("first_setup", stdout=StringIO())

        migrate.assert_called_with("migrate")
        user = User.objects.get(username="owner@nalanda.edu")
        self.assertTrue(user.is_superuser)
        self.assertEqual(user.profile.role, Profile.Role.ADMIN)
        self.assertEqual(
            AdminRole.objects.filter(user=user, role_level=AdminRole.Level.SUPER_ADMIN).count(), 1
        )
        self.assertEqual(Group.objects.count(), 4)

    @mock.patch("dashboard.management.commands.first_setup.call_command")
    def test_super_admin_can_sign_in_with_email(self, migrate):
        values = {**self.settings_values, "DJANGO_SUPERUSER_EMAIL": "Owner@Nalanda.edu"}
        with mock.patch(
            "dashboard.management.commands.first_setup.config",
            side_effect=lambda name, default=None, **kwargs: values.get(name, default),
        ):
            call_command("first_setup", "--skip-migrate", stdout=StringIO())

        migrate.assert_not_called()
        response = self.client.post(
            reverse("administration:admin_login"),
            {"email": "owner@nalanda.edu", "password": "Campus#2024"},
        )
        self.assertRedirects(response, reverse("dashboard:admin_home"))
