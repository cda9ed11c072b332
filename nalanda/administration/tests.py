import io
import shutil
import tempfile
from datetime import timedelta
from unittest import mock

from django.contrib.auth.models import User
from django.core.files.storage import FileSystemStorage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import RequestFactory, TestCase, override_settings
from django.urls import reverse
from django.utils import timezone
from PIL import Image

from .activity import log_admin_activity
from .models import AdminActivityLog, AdminRole, Profile
from .roles import check_admin_level, is_admin, resolve_user_role


def png_upload(name):
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), "green").save(buffer, format="PNG")
    return SimpleUploadedFile(name, buffer.getvalue(), content_type="image/png")


def create_user(email, role=Profile.Role.STUDENT, **profile_fields):
    user = User.objects.create_user(username=email, email=email, password="Campus#2024")
    Profile.objects.filter(user=user).update(role=role, **profile_fields)
    return user


def create_admin(email="admin@nalanda.edu", level=AdminRole.Level.ADMIN):
    user = create_user(email, role=Profile.Role.ADMIN)
    AdminRole.objects.create(user=user, role_level=level)
    return user


class ProfileSignalTests(TestCase):
    def test_new_user_gets_a_profile(self):
        user = User.objects.create_user(
            username="asha@nalanda.edu",
            email="asha@nalanda.edu",
            first_name="Asha",
            last_name="Rao",
        )
        self.assertEqual(user.profile.email, "asha@nalanda.edu")
        self.assertEqual(user.profile.full_name, "Asha Rao")
        self.assertEqual(user.profile.role, Profile.Role.STUDENT)


class RoleResolutionTests(TestCase):
    def test_anonymous_has_no_role(self):
        self.assertIsNone(resolve_user_role(None))

    def test_profile_role_is_used_without_admin_role(self):
        user = create_user("faculty@nalanda.edu", role=Profile.Role.FACULTY)
        self.assertEqual(resolve_user_role(user), "faculty")
        self.assertFalse(is_admin(user))

    def test_active_admin_role_wins(self):
        user = create_admin()
        self.assertEqual(resolve_user_role(user), "admin")

    def test_expired_or_revoked_roles_do_not_count(self):
        user = create_user("old-admin@nalanda.edu")
        AdminRole.objects.create(
            user=user, expires_at=timezone.now() - timedelta(days=1)
        )
        AdminRole.objects.create(user=user, is_active=False)
        self.assertEqual(resolve_user_role(user), "student")

    def test_future_expiry_still_counts(self):
        user = create_user("temp@nalanda.edu")
        AdminRole.objects.create(user=user, expires_at=timezone.now() + timedelta(days=7))
        self.assertTrue(is_admin(user))

    def test_check_admin_level(self):
        moderator = create_admin("mod@nalanda.edu", level=AdminRole.Level.MODERATOR)
        self.assertTrue(check_admin_level(moderator, AdminRole.Level.MODERATOR))
        self.assertFalse(check_admin_level(moderator, AdminRole.Level.SUPER_ADMIN))

        owner = create_admin("owner@nalanda.edu", level=AdminRole.Level.SUPER_ADMIN)
        self.assertTrue(check_admin_level(owner, AdminRole.Level.ADMIN))


class ActivityLogTests(TestCase):
    def test_records_ip_and_admin(self):
        admin = create_admin()
        request = RequestFactory().post("/", HTTP_X_FORWARDED_FOR="10.0.0.7, 10.0.0.1")
        request.user = admin

        log = log_admin_activity(request, "update", "notices", 12, {"field": "title"})
        self.assertEqual(log.ip_address, "10.0.0.7")
        self.assertEqual(log.resource_id, "12")
        self.assertEqual(log.details, {"field": "title"})
        self.assertEqual(log.admin, admin)


class AuthenticationTests(TestCase):
    def test_admin_sign_in_redirects_to_dashboard(self):
        create_admin()
        response = self.client.post(
            reverse("administration:admin_login"),
            {"email": "Admin@Nalanda.edu", "password": "Campus#2024"},
        )
        self.assertRedirects(response, reverse("dashboard:admin_home"))

    def test_sign_in_follows_safe_next(self):
        create_admin()
        target = reverse("administration:users")
        response = self.client.post(
            reverse("administration:admin_login"),
            {"email": "admin@nalanda.edu", "password": "Campus#2024", "next": target},
        )
        self.assertRedirects(response, target)

    def test_sign_in_ignores_offsite_next(self):
        create_admin()
        response = self.client.post(
            reverse("administration:admin_login"),
            {
                "email": "admin@nalanda.edu",
                "password": "Campus#2024",
                "next": "https://evil.example.com/",
            },
        )
        self.assertRedirects(response, reverse("dashboard:admin_home"))

    def test_wrong_password_shows_error(self):
        create_admin()
        response = self.client.post(
            reverse("administration:admin_login"),
            {"email": "admin@nalanda.edu", "password": "nope"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Sign In Error")
        self.assertNotIn("_auth_user_id", self.client.session)

    def test_signed_in_admin_skips_login_page(self):
        self.client.force_login(create_admin())
        response = self.client.get(reverse("administration:admin_login"))
        self.assertRedirects(response, reverse("dashboard:admin_home"))

    def test_register_creates_profile_with_role(self):
        response = self.client.post(
            reverse("administration:register"),
            {
                "email": "Ravi@Nalanda.edu",
                "full_name": "Ravi Kumar",
                "role": "alumni",
                "password1": "Campus#2024",
                "password2": "Campus#2024",
            },
        )
        self.assertRedirects(response, reverse("students:dashboard"))
        user = User.objects.get(username="ravi@nalanda.edu")
        self.assertEqual(user.profile.full_name, "Ravi Kumar")
        self.assertEqual(user.profile.role, Profile.Role.ALUMNI)
        self.assertEqual(int(self.client.session["_auth_user_id"]), user.pk)

    def test_register_never_offers_admin(self):
        response = self.client.post(
            reverse("administration:register"),
            {
                "email": "sneaky@nalanda.edu",
                "full_name": "Sneaky",
                "role": "admin",
                "password1": "Campus#2024",
                "password2": "Campus#2024",
            },
        )
        self.assertEqual(response.status_code, 200)
        self.assertFalse(User.objects.filter(username="sneaky@nalanda.edu").exists())

    def test_register_rejects_duplicate_email(self):
        create_user("taken@nalanda.edu")
        response = self.client.post(
            reverse("administration:register"),
            {
                "email": "TAKEN@nalanda.edu",
                "full_name": "Second",
                "role": "student",
                "password1": "Campus#2024",
                "password2": "Campus#2024",
            },
        )
        self.assertContains(response, "already exists")

    def test_logout_requires_post(self):
        self.client.force_login(create_user("s@nalanda.edu"))
        self.assertEqual(self.client.get(reverse("administration:logout")).status_code, 405)

        response = self.client.post(reverse("administration:logout"))
        self.assertRedirects(response, reverse("home"))
        self.assertNotIn("_auth_user_id", self.client.session)


class UserManagementTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.admin = create_admin()
        cls.student = create_user("student@nalanda.edu", full_name="Meena Das")

    def setUp(self):
        self.client.force_login(self.admin)

    def test_users_page_filters_by_role(self):
        response = self.client.get(reverse("administration:users"), {"role": "student"})
        self.assertEqual(response.status_code, 200)
        emails = [profile.email for profile in response.context["page_obj"]]
        self.assertIn("student@nalanda.edu", emails)
        self.assertNotIn("admin@nalanda.edu", emails)

    def test_non_admin_is_sent_to_login(self):
        self.client.force_login(self.student)
        response = self.client.get(reverse("administration:users"))
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response["Location"].startswith(reverse("administration:admin_login")))

    def test_update_user_profile(self):
        profile = self.student.profile
        response = self.client.post(
            reverse("administration:update_user", args=[profile.pk]),
            {
                "full_name": "Meena Das",
                "email": "student@nalanda.edu",
                "role": "faculty",
                "role_type": "faculty",
                "designation": "Assistant Professor",
                "research_areas": "Machine Learning\nDatabases",
            },
        )
        self.assertTrue(response.json()["success"])
        profile.refresh_from_db()
        self.assertEqual(profile.role, "faculty")
        self.assertEqual(profile.research_areas, ["Machine Learning", "Databases"])

    def test_photo_swap_survives_storage_errors(self):
        media_root = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, media_root, ignore_errors=True)
        profile = self.student.profile
        url = reverse("administration:update_user", args=[profile.pk])
        data = {"full_name": "Meena Das", "email": "student@nalanda.edu", "role": "student"}

        with override_settings(MEDIA_ROOT=media_root):
            self.client.post(url, {**data, "photo": png_upload("first.png")})
            with mock.patch.object(FileSystemStorage, "delete", side_effect=OSError("busy")):
                with self.assertLogs("front_cms.views", level="WARNING"):
                    response = self.client.post(url, {**data, "photo": png_upload("second.png")})

        self.assertTrue(response.json()["success"])
        profile.refresh_from_db()
        self.assertTrue(profile.photo.name.endswith("second.png"))

    def test_make_admin_sets_profile_role(self):
        profile = self.student.profile
        response = self.client.post(reverse("administration:make_admin", args=[profile.pk]))
        self.assertEqual(response.json()["role"], "admin")
        profile.refresh_from_db()
        self.assertEqual(profile.role, Profile.Role.ADMIN)

    def test_delete_user_removes_account(self):
        profile = self.student.profile
        response = self.client.post(reverse("administration:delete_user", args=[profile.pk]))
        self.assertTrue(response.json()["success"])
        self.assertFalse(User.objects.filter(pk=self.student.pk).exists())

    def test_cannot_delete_yourself(self):
        profile = self.admin.profile
        response = self.client.post(reverse("administration:delete_user", args=[profile.pk]))
        self.assertEqual(response.status_code, 400)
        self.assertTrue(User.objects.filter(pk=self.admin.pk).exists())


class RoleManagementTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.admin = create_admin()
        cls.candidate = create_user("candidate@nalanda.edu")

    def setUp(self):
        self.client.force_login(self.admin)

    def test_grant_and_revoke(self):
        response = self.client.post(
            reverse("administration:grant_role"),
            {"user": self.candidate.pk, "role_level": 3, "permissions": '{"notices": true}'},
        )
        data = response.json()
        self.assertTrue(data["success"])
        role = AdminRole.objects.get(pk=data["id"])
        self.assertEqual(role.granted_by, self.admin)
        self.assertEqual(role.permissions, {"notices": True})
        self.assertTrue(is_admin(self.candidate))

        response = self.client.post(reverse("administration:revoke_role", args=[role.pk]))
        self.assertTrue(response.json()["success"])
        self.assertFalse(is_admin(self.candidate))

        actions = list(AdminActivityLog.objects.order_by("id").values_list("action", flat=True))
        self.assertEqual(actions, ["grant_role", "revoke_role"])

    def test_duplicate_level_rejected(self):
        AdminRole.objects.create(user=self.candidate, role_level=AdminRole.Level.MODERATOR)
        response = self.client.post(
            reverse("administration:grant_role"),
            {"user": self.candidate.pk, "role_level": 3},
        )
        self.assertEqual(response.status_code, 400)

    def test_revoked_level_still_counts_as_duplicate(self):
        AdminRole.objects.create(
            user=self.candidate, role_level=AdminRole.Level.ADMIN, is_active=False
        )
        response = self.client.post(
            reverse("administration:grant_role"),
            {"user": self.candidate.pk, "role_level": 2},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(AdminRole.objects.filter(user=self.candidate).count(), 1)

    def test_permissions_must_be_an_object(self):
        response = self.client.post(
            reverse("administration:grant_role"),
            {"user": self.candidate.pk, "role_level": 2, "permissions": "[1, 2]"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("permissions", response.json()["errors"])

    def test_roles_and_settings_pages_render(self):
        self.assertEqual(self.client.get(reverse("administration:roles")).status_code, 200)

        response = self.client.get(reverse("administration:settings"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["admin_level"], "Admin")
        self.assertEqual(response.context["stats"]["active_admins"], 1)

    def test_faculty_page_lists_faculty_only(self):
        create_user("prof@nalanda.edu", role_type="faculty", full_name="Dr. Iyer")
        response = self.client.get(reverse("administration:faculty"))
        names = [profile.full_name for profile, _ in response.context["faculty_members"]]
        self.assertEqual(names, ["Dr. Iyer"])
