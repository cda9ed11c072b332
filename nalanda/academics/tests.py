import shutil
import tempfile

from django.contrib.auth.models import User
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from django.urls import reverse

from administration.models import Profile
from front_cms.registry import get_manager
from .forms import DepartmentForm, FacultyDepartmentForm, TranscriptPageForm
from .models import AcademicDownload, AcademicPage, Department, FacultyDepartment, Topper

MEDIA_ROOT = tempfile.mkdtemp()


class TranscriptPageFormTests(TestCase):
    def test_slug_is_prefixed_from_title(self):
        form = TranscriptPageForm({"title": "Apply Online", "content": "Steps"})
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.save().slug, "transcript-apply-online")

    def test_title_already_starting_with_transcript_is_kept(self):
        form = TranscriptPageForm({"title": "Transcript Fees", "content": "INR 500"})
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.save().slug, "transcript-fees")

    def test_clashing_slug_is_rejected(self):
        AcademicPage.objects.create(slug="transcript-fees", title="Transcript Fees")
        form = TranscriptPageForm({"title": "Transcript fees", "content": "-"})
        self.assertFalse(form.is_valid())
        self.assertIn("title", form.errors)

    def test_manager_only_lists_transcript_pages(self):
        AcademicPage.objects.create(slug="transcript-apply", title="Apply")
        AcademicPage.objects.create(slug="exam-rules", title="Exam rules")
        slugs = list(get_manager("transcripts").get_queryset().values_list("slug", flat=True))
        self.assertEqual(slugs, ["transcript-apply"])


class DepartmentFormTests(TestCase):
    def test_code_is_uppercased_and_unique(self):
        form = DepartmentForm({"code": " cse ", "name": "Computer Science"})
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.save().code, "CSE")

        form = DepartmentForm({"code": "Cse", "name": "Duplicate"})
        self.assertFalse(form.is_valid())
        self.assertIn("code", form.errors)

    def test_faculty_choices_limited_to_faculty(self):
        professor = User.objects.create_user(username="prof@nalanda.edu")
        Profile.objects.filter(user=professor).update(role_type="faculty")
        User.objects.create_user(username="kid@nalanda.edu")

        form = FacultyDepartmentForm()
        emails = [profile.email for profile in form.fields["faculty"].queryset]
        self.assertEqual(emails, ["prof@nalanda.edu"])


@override_settings(MEDIA_ROOT=MEDIA_ROOT)
class DownloadTests(TestCase):
    @classmethod
    def tearDownClass(cls):
        super().tearDownClass()
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)

    def test_file_metadata_and_download_count(self):
        item = AcademicDownload.objects.create(
            title="Syllabus",
            category="syllabus",
            file=SimpleUploadedFile("Syllabus.PDF", b"%PDF-1.4 test"),
        )
        self.assertEqual(item.file_type, "pdf")
        self.assertEqual(item.file_size, 13)

        response = self.client.get(reverse("download_file", args=[item.pk]))
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response["Location"], item.file.url)
        item.refresh_from_db()
        self.assertEqual(item.download_count, 1)

    def test_download_without_file_is_404(self):
        item = AcademicDownload.objects.create(title="Placeholder")
        response = self.client.get(reverse("download_file", args=[item.pk]))
        self.assertEqual(response.status_code, 404)

    def test_downloads_page_filters_by_category(self):
        AcademicDownload.objects.create(title="Syllabus", category="syllabus")
        AcademicDownload.objects.create(title="Calendar", category="calendar")
        response = self.client.get(reverse("downloads"), {"category": "calendar"})
        self.assertEqual([d.title for d in response.context["downloads"]], ["Calendar"])
        self.assertEqual(list(response.context["categories"]), ["calendar", "syllabus"])


class PublicAcademicsTests(TestCase):
    def test_academic_pages_render(self):
        AcademicPage.objects.create(slug="transcripts", title="Transcripts", content="Apply here")
        AcademicPage.objects.create(slug="transcript-fees", title="Fees for transcripts")
        for name in ["timetable", "fees", "scholarships", "transcripts"]:
            with self.subTest(name=name):
                self.assertEqual(self.client.get(reverse(name)).status_code, 200)

        response = self.client.get(reverse("transcripts"))
        self.assertContains(response, "Apply here")
        self.assertEqual([p.slug for p in response.context["related"]], ["transcript-fees"])

    def test_inactive_academic_page_is_404(self):
        AcademicPage.objects.create(slug="hidden", title="Hidden", is_active=False)
        response = self.client.get(reverse("academic_page", args=["hidden"]))
        self.assertEqual(response.status_code, 404)

    def test_department_page(self):
        department = Department.objects.create(code="cse", name="Computer Science & Engineering")
        self.assertEqual(department.code, "CSE")

        prof = User.objects.create_user(username="hod@nalanda.edu")
        Profile.objects.filter(user=prof).update(full_name="Dr. Sen", role_type="faculty")
        FacultyDepartment.objects.create(faculty=prof.profile, department=department, is_hod=True)
        Topper.objects.create(
            name="Aditi", department=department.name, year=2024, rank=1, cgpa="9.80"
        )

        response = self.client.get(reverse("department", args=["cse"]))
        self.assertContains(response, "Dr. Sen")
        self.assertContains(response, "Aditi")

    def test_unknown_department_is_404(self):
        response = self.client.get(reverse("department", args=["xyz"]))
        self.assertEqual(response.status_code, 404)
