import csv
import io
import json
import shutil
import tempfile

from django.contrib.auth.models import User
from django.core.files.uploadedfile import SimpleUploadedFile
from django.http import Http404
from django.test import TestCase, override_settings
from django.urls import reverse
from PIL import Image

from administration.models import AdminActivityLog, AdminRole
from campus_life.models import Club, HostelInfo
from notices.models import Notice
from .forms import LinesField
from .models import CampusStat, HeroImage
from .registry import ADMIN_GROUPS, all_managers, get_manager, manager_for_model

MEDIA_ROOT = tempfile.mkdtemp()


def png_upload(name="slide.png"):
    buffer = io.BytesIO()
    Image.new("RGB", (2, 2), "blue").save(buffer, format="PNG")
    return SimpleUploadedFile(name, buffer.getvalue(), content_type="image/png")


def create_admin(username="admin@nalanda.edu"):
    user = User.objects.create_user(username=username, email=username, password="pass12345")
    AdminRole.objects.create(user=user, role_level=AdminRole.Level.ADMIN)
    return user


class RegistryTests(TestCase):
    def test_every_website_table_has_a_manager(self):
        slugs = {manager.slug for manager in all_managers()}
        for slug in [
            "notices",
            "news",
            "hero-images",
            "photo-gallery",
            "campus-stats",
            "magazines",
            "creative-gallery",
            "academic-pages",
            "transcripts",
            "timetables",
            "downloads",
            "fees",
            "scholarships",
            "toppers",
            "departments",
            "faculty-departments",
            "events",
            "clubs",
            "hostel",
            "innovation",
            "about-pages",
            "leadership",
            "accreditation",
            "contact",
            "office-locations",
        ]:
            self.assertIn(slug, slugs)

    def test_managers_sorted_by_sidebar_group(self):
        groups = [ADMIN_GROUPS.index(manager.group) for manager in all_managers()]
        self.assertEqual(groups, sorted(groups))

    def test_unknown_manager_is_404(self):
        with self.assertRaises(Http404):
            get_manager("no-such-table")

    def test_capabilities_follow_model_fields(self):
        hero = get_manager("hero-images")
        self.assertTrue(hero.has_display_order)
        self.assertEqual(hero.file_fields, ["image"])
        self.assertFalse(hero.importable)

        notices = get_manager("notices")
        self.assertFalse(notices.has_display_order)
        self.assertTrue(notices.importable)
        self.assertEqual(notices.table_name, "notices")

    def test_manager_for_model(self):
        self.assertEqual([m.slug for m in manager_for_model(Notice)], ["notices"])

    def test_search_matches_any_search_field(self):
        Notice.objects.create(title="Exam schedule", description="Mid term")
        Notice.objects.create(title="Holiday", description="Exam break")
        Notice.objects.create(title="Sports day")
        manager = get_manager("notices")
        found = manager.search(manager.get_queryset(), "exam")
        self.assertEqual(found.count(), 2)


class LinesFieldTests(TestCase):
    def test_splits_lines_and_drops_blanks(self):
        field = LinesField()
        self.assertEqual(field.clean("wifi\n\n  gym  \nmess"), ["wifi", "gym", "mess"])
        self.assertEqual(field.clean(""), [])

    def test_prepares_list_for_textarea(self):
        self.assertEqual(LinesField().prepare_value(["a", "b"]), "a\nb")

    def test_reads_json_array_text(self):
        field = LinesField()
        self.assertEqual(field.clean('["Wifi", " Mess ", ""]'), ["Wifi", "Mess"])
        self.assertEqual(field.clean("[draft] notes"), ["[draft] notes"])


class AccessTests(TestCase):
    def test_anonymous_list_redirects_to_login(self):
        url = reverse("front_cms:manage", args=["notices"])
        response = self.client.get(url)
        self.assertRedirects(
            response,
            f"{reverse('administration:admin_login')}?next={url}",
            fetch_redirect_response=False,
        )

    def test_student_gets_403_from_json_endpoint(self):
        student = User.objects.create_user(username="s@nalanda.edu", password="pass12345")
        self.client.force_login(student)
        response = self.client.post(
            reverse("front_cms:create", args=["notices"]), {"title": "Hacked"}
        )
        self.assertEqual(response.status_code, 403)
        self.assertFalse(Notice.objects.exists())

    def test_revoked_admin_role_is_not_admin(self):
        user = create_admin()
        AdminRole.objects.filter(user=user).update(is_active=False)
        self.client.force_login(user)
        response = self.client.get(reverse("front_cms:manage", args=["notices"]))
        self.assertEqual(response.status_code, 302)


class CrudTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.admin = create_admin()

    def setUp(self):
        self.client.force_login(self.admin)

    def test_list_page_renders_rows_and_filters(self):
        Notice.objects.create(title="Results declared")
        Notice.objects.create(title="Old notice", is_active=False)
        url = reverse("front_cms:manage", args=["notices"])

        response = self.client.get(url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["total_count"], 2)
        self.assertContains(response, "Results declared")

        response = self.client.get(url, {"status": "inactive"})
        self.assertEqual(response.context["total_count"], 1)

        response = self.client.get(url, {"q": "results"})
        self.assertEqual(response.context["total_count"], 1)

    def test_unknown_manager_page_is_404(self):
        response = self.client.get(reverse("front_cms:manage", args=["nothing-here"]))
        self.assertEqual(response.status_code, 404)

    def test_create_logs_activity(self):
        response = self.client.post(
            reverse("front_cms:create", args=["notices"]),
            {
                "title": "Library closed",
                "description": "Stock taking",
                "category": "General",
                "priority": "Low",
                "is_new": "on",
                "is_active": "on",
            },
        )
        data = response.json()
        self.assertTrue(data["success"])
        notice = Notice.objects.get(pk=data["id"])
        self.assertEqual(notice.priority, Notice.Priority.LOW)

        log = AdminActivityLog.objects.get()
        self.assertEqual(log.action, "create")
        self.assertEqual(log.resource_type, "notices")
        self.assertEqual(log.resource_id, str(notice.pk))
        self.assertEqual(log.admin, self.admin)

    def test_create_with_invalid_data_returns_errors(self):
        response = self.client.post(
            reverse("front_cms:create", args=["notices"]), {"category": "Nope"}
        )
        self.assertEqual(response.status_code, 400)
        errors = response.json()["errors"]
        self.assertIn("title", errors)
        self.assertIn("category", errors)

    def test_update_get_returns_item(self):
        notice = Notice.objects.create(title="Fee reminder")
        response = self.client.get(
            reverse("front_cms:update", args=["notices", notice.pk])
        )
        self.assertEqual(response.json()["item"]["title"], "Fee reminder")

    def test_update_saves_changes(self):
        notice = Notice.objects.create(title="Fee reminder")
        response = self.client.post(
            reverse("front_cms:update", args=["notices", notice.pk]),
            {"title": "Fee reminder (revised)", "category": "Academic", "priority": "High"},
        )
        self.assertTrue(response.json()["success"])
        notice.refresh_from_db()
        self.assertEqual(notice.title, "Fee reminder (revised)")
        self.assertEqual(notice.priority, Notice.Priority.HIGH)

    def test_delete(self):
        notice = Notice.objects.create(title="Temporary")
        response = self.client.post(
            reverse("front_cms:delete", args=["notices", notice.pk])
        )
        self.assertTrue(response.json()["success"])
        self.assertFalse(Notice.objects.exists())

    def test_delete_requires_post(self):
        notice = Notice.objects.create(title="Temporary")
        response = self.client.get(
            reverse("front_cms:delete", args=["notices", notice.pk])
        )
        self.assertEqual(response.status_code, 405)

    def test_toggle_status_flips_is_active(self):
        notice = Notice.objects.create(title="Toggle me")
        url = reverse("front_cms:toggle", args=["notices", notice.pk])

        self.assertFalse(self.client.post(url).json()["is_active"])
        self.assertTrue(self.client.post(url).json()["is_active"])
        self.assertEqual(
            list(AdminActivityLog.objects.values_list("action", flat=True).order_by("id")),
            ["deactivated", "activated"],
        )

    def public_notice_titles(self):
        response = self.client.get(reverse("notices"))
        return [notice.title for notice in response.context["page_obj"]]

    def test_toggle_hides_and_restores_on_public_pages(self):
        notice = Notice.objects.create(title="Hall tickets available")
        club = Club.objects.create(name="Photography Club")
        toggle_notice = reverse("front_cms:toggle", args=["notices", notice.pk])
        toggle_club = reverse("front_cms:toggle", args=["clubs", club.pk])
        clubs_url = reverse("campus_life", args=["clubs"])

        self.assertEqual(self.public_notice_titles(), ["Hall tickets available"])
        self.client.post(toggle_notice)
        self.assertEqual(self.public_notice_titles(), [])
        self.client.post(toggle_notice)
        self.assertEqual(self.public_notice_titles(), ["Hall tickets available"])

        self.client.post(toggle_club)
        self.assertEqual(list(self.client.get(clubs_url).context["items"]), [])
        self.client.post(toggle_club)
        self.assertEqual(list(self.client.get(clubs_url).context["items"]), [club])

    def test_delete_removes_from_admin_and_public_pages(self):
        notice = Notice.objects.create(title="Canteen menu revised")
        self.assertEqual(list(self.client.get(reverse("home")).context["notices"]), [notice])

        self.client.post(reverse("front_cms:delete", args=["notices", notice.pk]))
        self.assertEqual(list(self.client.get(reverse("home")).context["notices"]), [])
        self.assertEqual(self.public_notice_titles(), [])
        response = self.client.get(reverse("front_cms:manage", args=["notices"]))
        self.assertEqual(response.context["total_count"], 0)

    def test_reorder_rejects_negative_order(self):
        stat = CampusStat.objects.create(stat_name="Students", stat_value="5,000+")
        url = reverse("front_cms:reorder", args=["campus-stats", stat.pk])

        response = self.client.post(url, {"display_order": "-1"})
        self.assertEqual(response.status_code, 400)

        response = self.client.post(url, {"display_order": "3"})
        self.assertEqual(response.json()["display_order"], 3)
        stat.refresh_from_db()
        self.assertEqual(stat.display_order, 3)

    def test_reorder_unsupported_without_display_order(self):
        notice = Notice.objects.create(title="No ordering")
        response = self.client.post(
            reverse("front_cms:reorder", args=["notices", notice.pk]),
            {"display_order": "1"},
        )
        self.assertEqual(response.status_code, 400)

    def test_bulk_actions(self):
        first = Notice.objects.create(title="One")
        second = Notice.objects.create(title="Two")
        third = Notice.objects.create(title="Three")
        url = reverse("front_cms:bulk", args=["notices"])

        response = self.client.post(
            url, {"action": "deactivate", "ids": [first.pk, second.pk]}
        )
        self.assertEqual(response.json()["count"], 2)
        self.assertEqual(Notice.objects.filter(is_active=False).count(), 2)

        response = self.client.post(url, {"action": "delete", "ids": [third.pk]})
        self.assertEqual(response.json()["count"], 1)
        self.assertEqual(Notice.objects.count(), 2)

    def test_bulk_action_validation(self):
        url = reverse("front_cms:bulk", args=["notices"])
        self.assertEqual(self.client.post(url, {"action": "explode", "ids": [1]}).status_code, 400)
        self.assertEqual(self.client.post(url, {"action": "delete"}).status_code, 400)


class ExportImportTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.admin = create_admin()
        Notice.objects.create(title="Exam timetable", category="Examination")
        Notice.objects.create(title="Sports meet", category="Event")

    def setUp(self):
        self.client.force_login(self.admin)

    def test_export_json(self):
        response = self.client.get(reverse("front_cms:export", args=["notices", "json"]))
        self.assertEqual(response["Content-Type"], "application/json")
        self.assertIn("notices_export_", response["Content-Disposition"])
        rows = json.loads(response.content)
        self.assertEqual({row["title"] for row in rows}, {"Exam timetable", "Sports meet"})

    def test_export_csv(self):
        response = self.client.get(reverse("front_cms:export", args=["notices", "csv"]))
        rows = list(csv.DictReader(io.StringIO(response.content.decode())))
        self.assertEqual(len(rows), 2)
        self.assertIn("priority", rows[0])

    def test_export_excel(self):
        response = self.client.get(reverse("front_cms:export", args=["notices", "excel"]))
        self.assertTrue(response["Content-Disposition"].endswith('.xlsx"'))
        # xlsx files are zip archives
        self.assertEqual(response.content[:2], b"PK")

    def test_export_unknown_format(self):
        response = self.client.get(reverse("front_cms:export", args=["notices", "pdf"]))
        self.assertEqual(response.status_code, 400)

    def test_import_csv_reports_bad_rows(self):
        upload = SimpleUploadedFile(
            "notices.csv",
            b"title,category,priority\n"
            b"Convocation,Event,High\n"
            b",General,Low\n"
            b"Fee deadline,Academic,Medium\n",
            content_type="text/csv",
        )
        response = self.client.post(
            reverse("front_cms:import", args=["notices"]), {"file": upload}
        )
        data = response.json()
        self.assertEqual(data["imported_count"], 2)
        self.assertEqual(len(data["errors"]), 1)
        self.assertTrue(data["errors"][0].startswith("Row 3"))
        # Missing checkbox columns keep their defaults
        self.assertTrue(Notice.objects.get(title="Convocation").is_active)

    def test_csv_export_imports_back_unchanged(self):
        HostelInfo.objects.create(
            name="Aryabhata",
            hostel_type="boys",
            capacity=200,
            rooms_available=12,
            facilities=["Wifi", "Mess"],
            fee_structure={"triple": 45000},
        )
        exported = self.client.get(reverse("front_cms:export", args=["hostel", "csv"]))
        HostelInfo.objects.all().delete()

        upload = SimpleUploadedFile("hostel.csv", exported.content, content_type="text/csv")
        response = self.client.post(reverse("front_cms:import", args=["hostel"]), {"file": upload})
        self.assertEqual(response.json()["imported_count"], 1)

        hostel = HostelInfo.objects.get()
        self.assertEqual(hostel.facilities, ["Wifi", "Mess"])
        self.assertEqual(hostel.fee_structure, {"triple": 45000})
        self.assertEqual(hostel.capacity, 200)
        self.assertTrue(hostel.is_active)

    def test_import_rejects_other_files(self):
        upload = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")
        response = self.client.post(
            reverse("front_cms:import", args=["notices"]), {"file": upload}
        )
        self.assertEqual(response.status_code, 400)

    def test_import_refused_when_upload_required(self):
        upload = SimpleUploadedFile("slides.csv", b"title\nWelcome\n", content_type="text/csv")
        response = self.client.post(
            reverse("front_cms:import", args=["hero-images"]), {"file": upload}
        )
        self.assertEqual(response.status_code, 400)


@override_settings(MEDIA_ROOT=MEDIA_ROOT)
class UploadTests(TestCase):
    @classmethod
    def tearDownClass(cls):
        super().tearDownClass()
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)

    def setUp(self):
        self.client.force_login(create_admin())

    def create_slide(self):
        response = self.client.post(
            reverse("front_cms:create", args=["hero-images"]),
            {"title": "Welcome", "display_order": "0", "is_active": "on", "image": png_upload()},
        )
        self.assertTrue(response.json()["success"])
        return HeroImage.objects.get()

    def test_replacing_an_image_removes_the_old_file(self):
        slide = self.create_slide()
        old_name = slide.image.name
        storage = slide.image.storage
        self.assertTrue(storage.exists(old_name))

        response = self.client.post(
            reverse("front_cms:update", args=["hero-images", slide.pk]),
            {"title": "Welcome", "display_order": "1", "is_active": "on", "image": png_upload("new.png")},
        )
        self.assertTrue(response.json()["success"])
        slide.refresh_from_db()
        self.assertNotEqual(slide.image.name, old_name)
        self.assertFalse(storage.exists(old_name))
        self.assertTrue(storage.exists(slide.image.name))

    def test_deleting_a_row_removes_its_file(self):
        slide = self.create_slide()
        name = slide.image.name
        storage = slide.image.storage

        self.client.post(reverse("front_cms:delete", args=["hero-images", slide.pk]))
        self.assertFalse(storage.exists(name))

    @override_settings(MAX_UPLOAD_SIZE_MB=0)
    def test_oversized_upload_is_rejected(self):
        response = self.client.post(
            reverse("front_cms:create", args=["hero-images"]),
            {"title": "Too big", "display_order": "0", "image": png_upload()},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("image", response.json()["errors"])
