import os
from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from front_cms.models import PublishableModel


class AcademicPage(PublishableModel):
    slug = models.SlugField(max_length=100, unique=True)
    title = models.CharField(max_length=200)
    content = models.TextField(blank=True)
    meta_description = models.CharField(max_length=300, blank=True)

    def __str__(self):
        return self.title

    class Meta:
        db_table = "academic_pages"
        ordering = ["title"]


class AcademicService(PublishableModel):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    icon = models.CharField(max_length=50, blank=True, help_text="Icon name")
    link_url = models.CharField(max_length=300, blank=True)

    def __str__(self):
        return self.name

    class Meta:
        db_table = "academic_services"
        ordering = ["name"]


class AcademicDownload(PublishableModel):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, default="general")
    department = models.CharField(max_length=200, blank=True)
    file = models.FileField(upload_to="academic-downloads/", blank=True, null=True)
    file_type = models.CharField(max_length=20, blank=True)
    file_size = models.PositiveBigIntegerField(blank=True, null=True)
    download_count = models.PositiveIntegerField(default=0)

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        # File metadata follows whatever is currently uploaded
        if self.file:
            self.file_type = os.path.splitext(self.file.name)[1].lstrip(".").lower()
            try:
                self.file_size = self.file.size
            except OSError:
                self.file_size = None
        super().save(*args, **kwargs)

    class Meta:
        db_table = "academic_downloads"
        ordering = ["-created_at"]


class Timetable(PublishableModel):
    class Type(models.TextChoices):
        CLASS = "class", "Class Timetable"
        EXAM = "exam", "Exam Timetable"
        OTHER = "other", "Other"

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    type = models.CharField(max_length=10, choices=Type.choices, default=Type.CLASS)
    department = models.CharField(max_length=200, blank=True)
    semester = models.CharField(max_length=20, blank=True)
    academic_year = models.CharField(max_length=20, blank=True, help_text="e.g. 2024-25")
    file = models.FileField(upload_to="timetables/", blank=True, null=True)

    def __str__(self):
        return self.title

    class Meta:
        db_table = "timetables"
        ordering = ["-created_at"]


class FeeStructure(PublishableModel):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, default="tuition")
    department = models.CharField(max_length=200, blank=True)
    semester = models.CharField(max_length=20, blank=True)
    academic_year = models.CharField(max_length=20)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    due_date = models.DateField(blank=True, null=True)

    def __str__(self):
        return f"{self.title} ({self.academic_year})"

    class Meta:
        db_table = "fees_structure"
        ordering = ["-academic_year", "title"]
        verbose_name = "Fee Structure"
        verbose_name_plural = "Fee Structures"


class Scholarship(PublishableModel):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    eligibility_criteria = models.TextField(blank=True)
    amount = models.DecimalField(
        max_digits=12, decimal_places=2, blank=True, null=True
    )
    application_deadline = models.DateField(blank=True, null=True)
    application_url = models.URLField(blank=True)

    def __str__(self):
        return self.title

    class Meta:
        db_table = "scholarships"
        ordering = ["application_deadline"]


class Topper(PublishableModel):
    name = models.CharField(max_length=200)
    department = models.CharField(max_length=200)
    year = models.PositiveIntegerField()
    rank = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    cgpa = models.DecimalField(
        max_digits=4,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0")), MaxValueValidator(Decimal("10"))],
    )
    photo = models.ImageField(upload_to="toppers/", blank=True, null=True)
    achievements = models.JSONField(default=list, blank=True)

    def __str__(self):
        return f"{self.name} - Rank {self.rank} ({self.year})"

    class Meta:
        db_table = "toppers"
        ordering = ["-year", "rank"]


class Department(PublishableModel):
    code = models.CharField(max_length=20, unique=True, help_text="e.g. CSE")
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    head_name = models.CharField(max_length=200, blank=True)
    contact_email = models.EmailField(blank=True)
    hero_image = models.ImageField(upload_to="departments/", blank=True, null=True)
    gallery_images = models.JSONField(default=list, blank=True)
    mission = models.TextField(blank=True)
    vision = models.TextField(blank=True)
    facilities = models.JSONField(default=list, blank=True)
    programs_offered = models.JSONField(default=list, blank=True)
    achievements = models.JSONField(default=list, blank=True)
    location_details = models.TextField(blank=True)

    def __str__(self):
        return f"{self.code} - {self.name}"

    def save(self, *args, **kwargs):
        self.code = self.code.strip().upper()
        super().save(*args, **kwargs)

    class Meta:
        db_table = "departments"
        ordering = ["name"]


class FacultyDepartment(models.Model):
    faculty = models.ForeignKey(
        "administration.Profile",
        on_delete=models.CASCADE,
        related_name="department_links",
    )
    department = models.ForeignKey(
        Department, on_delete=models.CASCADE, related_name="faculty_links"
    )
    is_hod = models.BooleanField(default=False, verbose_name="Head of department")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.faculty} - {self.department.code}"

    class Meta:
        db_table = "faculty_departments"
        ordering = ["department__name", "-is_hod", "faculty__full_name"]
        unique_together = ("faculty", "department")
