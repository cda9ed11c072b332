from django import forms
from django.utils.text import slugify

from administration.models import Profile
from front_cms.forms import CmsModelForm, LinesField
from .models import (
    AcademicDownload,
    AcademicPage,
    AcademicService,
    Department,
    FacultyDepartment,
    FeeStructure,
    Scholarship,
    Timetable,
    Topper,
)


class AcademicPageForm(CmsModelForm):
    class Meta:
        model = AcademicPage
        fields = ["slug", "title", "content", "meta_description", "is_active"]
        widgets = {
            "content": forms.Textarea(attrs={"rows": 10}),
        }


class TranscriptPageForm(CmsModelForm):
    """Transcript pages are academic pages whose slug is derived from the title."""

    class Meta:
        model = AcademicPage
        fields = ["title", "content", "meta_description", "is_active"]
        widgets = {
            "content": forms.Textarea(attrs={"rows": 10}),
        }

    def clean_title(self):
        title = self.cleaned_data["title"]
        slug = self.transcript_slug(title)
        clash = AcademicPage.objects.filter(slug=slug).exclude(pk=self.instance.pk)
        if clash.exists():
            raise forms.ValidationError("A transcript page with this title already exists.")
        return title

    @staticmethod
    def transcript_slug(title):
        base = slugify(title)
        if base.startswith("transcript"):
            return base
        return f"transcript-{base}".rstrip("-")

    def save(self, commit=True):
        self.instance.slug = self.transcript_slug(self.cleaned_data["title"])
        return super().save(commit)


class AcademicServiceForm(CmsModelForm):
    class Meta:
        model = AcademicService
        fields = ["name", "description", "icon", "link_url", "is_active"]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class AcademicDownloadForm(CmsModelForm):
    class Meta:
        model = AcademicDownload
        fields = ["title", "description", "category", "department", "file", "is_active"]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class TimetableForm(CmsModelForm):
    class Meta:
        model = Timetable
        fields = [
            "title",
            "description",
            "type",
            "department",
            "semester",
            "academic_year",
            "file",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class FeeStructureForm(CmsModelForm):
    class Meta:
        model = FeeStructure
        fields = [
            "title",
            "description",
            "category",
            "department",
            "semester",
            "academic_year",
            "amount",
            "due_date",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class ScholarshipForm(CmsModelForm):
    class Meta:
        model = Scholarship
        fields = [
            "title",
            "description",
            "eligibility_criteria",
            "amount",
            "application_deadline",
            "application_url",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
            "eligibility_criteria": forms.Textarea(attrs={"rows": 3}),
        }


class TopperForm(CmsModelForm):
    achievements = LinesField()

    class Meta:
        model = Topper
        fields = [
            "name",
            "department",
            "year",
            "rank",
            "cgpa",
            "photo",
            "achievements",
            "is_active",
        ]


class DepartmentForm(CmsModelForm):
    gallery_images = LinesField(help_text="One image URL per line")
    facilities = LinesField()
    programs_offered = LinesField()
    achievements = LinesField()

    class Meta:
        model = Department
        fields = [
            "code",
            "name",
            "description",
            "head_name",
            "contact_email",
            "hero_image",
            "gallery_images",
            "mission",
            "vision",
            "facilities",
            "programs_offered",
            "achievements",
            "location_details",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 4}),
            "mission": forms.Textarea(attrs={"rows": 3}),
            "vision": forms.Textarea(attrs={"rows": 3}),
            "location_details": forms.Textarea(attrs={"rows": 2}),
        }

    def clean_code(self):
        code = self.cleaned_data["code"].strip().upper()
        clash = Department.objects.filter(code__iexact=code).exclude(pk=self.instance.pk)
        if clash.exists():
            raise forms.ValidationError("A department with this code already exists.")
        return code


class FacultyDepartmentForm(CmsModelForm):
    class Meta:
        model = FacultyDepartment
        fields = ["faculty", "department", "is_hod"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["faculty"].queryset = Profile.objects.filter(
            role_type="faculty"
        ).order_by("full_name")
        self.fields["department"].queryset = Department.objects.order_by("name")
