import io
import shutil
import tempfile
from unittest import mock

from django.contrib.auth.models import User
from django.core.files.storage import FileSystemStorage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from django.urls import reverse
from PIL import Image

from administration.models import AdminActivityLog, AdminRole
from .models import StudentSubmission, submission_upload_path

MEDIA_ROOT = tempfile.mkdtemp()


def png_upload(name="art.png"):
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), "red").save(buffer, format="PNG")
    return SimpleUploadedFile(name, buffer.getvalue(), content_type="image/png")


def create_student(email="student@nalanda.edu"):
    return User.objects.create_user(username=email, email=email, password="Campus#2024")


def create_submission(user, **fields):
    defaults = {
        "title": "Monsoon",
        "category": "Photography",
        "department": "Computer Science & Engineering",
    }
    defaults.update(fields)
    return StudentSubmission.objects.create(user=user, **defaults)


@override_settings(MEDIA_ROOT=MEDIA_ROOT)
class StudentAreaTests(TestCase):
    @classmethod
    def tearDownClass(cls):
        super().tearDownClass()
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)

    def setUp(self):
        self.student = create_student()
        self.client.force_login(self.student)

    def test_dashboard_requires_sign_in(self):
        self.client.logout()
        response = self.client.get(reverse("students:dashboard"))
        self.assertEqual(response.status_code, 302)
        self.assertTrue(response["Location"].startswith(reverse("administration:admin_login")))

    def test_dashboard_lists_own_submissions(self):
        create_submission(self.student, title="Mine")
        create_submission(create_student("other@nalanda.edu"), title="Not mine")

        response = self.client.get(reverse("students:dashboard"))
        self.assertEqual([s.title for s in response.context["submissions"]], ["Mine"])

    def test_submit_work_is_pending(self):
        response = self.client.post(
            reverse("students:submit"),
            {
                "title": "Sunset over the lake",
                "description": "Shot on campus",
                "category": "Photography",
                "department": "Information Technology",
                "image": png_upload(),
            },
        )
        self.assertRedirects(response, reverse("students:dashboard"))
        submission = StudentSubmission.objects.get()
        self.assertEqual(submission.user, self.student)
        self.assertEqual(submission.status, StudentSubmission.Status.PENDING)
        self.assertTrue(
            submission.image.name.startswith(f"student-submissions/{self.student.pk}/")
        )

    def test_submit_rejects_unknown_category(self):
        response = self.client.post(
            reverse("students:submit"),
            {"title": "Odd", "category": "Sculpture", "department": "Information Technology"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertFalse(StudentSubmission.objects.exists())

    @override_settings(MAX_UPLOAD_SIZE_MB=0)
    def test_submit_rejects_oversized_upload(self):
        response = self.client.post(
            reverse("students:submit"),
            {
                "title": "Huge scan",
                "category": "Photography",
                "department": "Information Technology",
                "image": png_upload(),
            },
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("image", response.context["form"].errors)
        self.assertFalse(StudentSubmission.objects.exists())

    def test_update_own_profile(self):
        response = self.client.post(
            reverse("students:profile"),
            {"full_name": "Kavya Nair", "branch": "CSE", "semester": "5", "research_areas": ""},
        )
        self.assertRedirects(response, reverse("students:profile"))
        self.student.profile.refresh_from_db()
        self.assertEqual(self.student.profile.full_name, "Kavya Nair")
        self.assertEqual(self.student.profile.role, "student")

    def test_photo_swap_survives_storage_errors(self):
        url = reverse("students:profile")
        self.client.post(url, {"full_name": "Kavya Nair", "photo": png_upload("first.png")})

        with mock.patch.object(FileSystemStorage, "delete", side_effect=OSError("read-only")):
            with self.assertLogs("front_cms.views", level="WARNING"):
                response = self.client.post(
                    url, {"full_name": "Kavya Nair", "photo": png_upload("second.png")}
                )

        self.assertRedirects(response, url)
        self.student.profile.refresh_from_db()
        self.assertTrue(self.student.profile.photo.name.endswith("second.png"))

    def test_upload_path(self):
        submission = StudentSubmission(user=self.student)
        self.assertEqual(
            submission_upload_path(submission, "poem.pdf"),
            f"student-submissions/{self.student.pk}/poem.pdf",
        )


class SubmissionReviewTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.admin = User.objects.create_user(username="admin@nalanda.edu", password="x")
        AdminRole.objects.create(user=cls.admin, role_level=AdminRole.Level.MODERATOR)
        cls.student = create_student()

    def setUp(self):
        self.client.force_login(self.admin)

    def test_approve_and_feature(self):
        submission = create_submission(self.student)
        response = self.client.post(
            reverse("students:review_submission", args=[submission.pk]),
            {"action": "approve", "is_featured": "on", "comments": "Lovely light"},
        )
        self.assertEqual(response.json(), {"success": True, "status": "approved", "is_featured": True})

        submission.refresh_from_db()
        self.assertEqual(submission.reviewed_by, self.admin)
        self.assertIsNotNone(submission.reviewed_at)
        self.assertEqual(submission.review_comments, "Lovely light")
        self.assertEqual(AdminActivityLog.objects.get().action, "approve_submission")

    def test_rejected_work_is_never_featured(self):
        submission = create_submission(self.student)
        response = self.client.post(
            reverse("students:review_submission", args=[submission.pk]),
            {"action": "reject", "is_featured": "on"},
        )
        self.assertFalse(response.json()["is_featured"])
        submission.refresh_from_db()
        self.assertEqual(submission.status, StudentSubmission.Status.REJECTED)

    def test_invalid_action(self):
        submission = create_submission(self.student)
        response = self.client.post(
            reverse("students:review_submission", args=[submission.pk]), {"action": "publish"}
        )
        self.assertEqual(response.status_code, 400)

    def test_students_cannot_review(self):
        submission = create_submission(self.student)
        self.client.force_login(self.student)
        response = self.client.post(
            reverse("students:review_submission", args=[submission.pk]), {"action": "approve"}
        )
        self.assertEqual(response.status_code, 403)

    def test_review_queue_groups_by_status(self):
        create_submission(self.student, title="Waiting")
        create_submission(self.student, title="Done", status="approved")

        response = self.client.get(reverse("students:submissions"))
        self.assertEqual([s.title for s in response.context["pending"]], ["Waiting"])
        self.assertEqual([s.title for s in response.context["approved"]], ["Done"])

    def test_only_approved_work_reaches_home_page(self):
        create_submission(self.student, title="Approved piece", status="approved")
        create_submission(self.student, title="Pending piece")

        response = self.client.get(reverse("home"))
        titles = [work.title for work in response.context["creative_works"]]
        self.assertEqual(titles, ["Approved piece"])
