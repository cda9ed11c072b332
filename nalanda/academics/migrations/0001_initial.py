import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


def common_fields():
    return [
        ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
        ("is_active", models.BooleanField(default=True, help_text="Show this on the website")),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("administration", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="AcademicDownload",
            fields=common_fields() + [
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("category", models.CharField(default="general", max_length=100)),
                ("department", models.CharField(blank=True, max_length=200)),
                ("file", models.FileField(blank=True, null=True, upload_to="academic-downloads/")),
                ("file_type", models.CharField(blank=True, max_length=20)),
                ("file_size", models.PositiveBigIntegerField(blank=True, null=True)),
                ("download_count", models.PositiveIntegerField(default=0)),
            ],
            options={"db_table": "academic_downloads", "ordering": ["-created_at"]},
        ),
        migrations.CreateModel(
            name="AcademicPage",
            fields=common_fields() + [
                ("slug", models.SlugField(max_length=100, unique=True)),
                ("title", models.CharField(max_length=200)),
                ("content", models.TextField(blank=True)),
                ("meta_description", models.CharField(blank=True, max_length=300)),
            ],
            options={"db_table": "academic_pages", "ordering": ["title"]},
        ),
        migrations.CreateModel(
            name="AcademicService",
            fields=common_fields() + [
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("icon", models.CharField(blank=True, help_text="Icon name", max_length=50)),
                ("link_url", models.CharField(blank=True, max_length=300)),
            ],
            options={"db_table": "academic_services", "ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="Department",
            fields=common_fields() + [
                ("code", models.CharField(help_text="e.g. CSE", max_length=20, unique=True)),
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("head_name", models.CharField(blank=True, max_length=200)),
                ("contact_email", models.EmailField(blank=True, max_length=254)),
                ("hero_image", models.ImageField(blank=True, null=True, upload_to="departments/")),
                ("gallery_images", models.JSONField(blank=True, default=list)),
                ("mission", models.TextField(blank=True)),
                ("vision", models.TextField(blank=True)),
                ("facilities", models.JSONField(blank=True, default=list)),
                ("programs_offered", models.JSONField(blank=True, default=list)),
                ("achievements", models.JSONField(blank=True, default=list)),
                ("location_details", models.TextField(blank=True)),
            ],
            options={"db_table": "departments", "ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="FeeStructure",
            fields=common_fields() + [
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("category", models.CharField(default="tuition", max_length=100)),
                ("department", models.CharField(blank=True, max_length=200)),
                ("semester", models.CharField(blank=True, max_length=20)),
                ("academic_year", models.CharField(max_length=20)),
                ("amount", models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal("0"))])),
                ("due_date", models.DateField(blank=True, null=True)),
            ],
            options={
                "verbose_name": "Fee Structure",
                "verbose_name_plural": "Fee Structures",
                "db_table": "fees_structure",
                "ordering": ["-academic_year", "title"],
            },
        ),
        migrations.CreateModel(
            name="Scholarship",
            fields=common_fields() + [
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("eligibility_criteria", models.TextField(blank=True)),
                ("amount", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("application_deadline", models.DateField(blank=True, null=True)),
                ("application_url", models.URLField(blank=True)),
            ],
            options={"db_table": "scholarships", "ordering": ["application_deadline"]},
        ),
        migrations.CreateModel(
            name="Timetable",
            fields=common_fields() + [
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("type", models.CharField(choices=[("class", "Class Timetable"), ("exam", "Exam Timetable"), ("other", "Other")], default="class", max_length=10)),
                ("department", models.CharField(blank=True, max_length=200)),
                ("semester", models.CharField(blank=True, max_length=20)),
                ("academic_year", models.CharField(blank=True, help_text="e.g. 2024-25", max_length=20)),
                ("file", models.FileField(blank=True, null=True, upload_to="timetables/")),
            ],
            options={"db_table": "timetables", "ordering": ["-created_at"]},
        ),
        migrations.CreateModel(
            name="Topper",
            fields=common_fields() + [
                ("name", models.CharField(max_length=200)),
                ("department", models.CharField(max_length=200)),
                ("year", models.PositiveIntegerField()),
                ("rank", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ("cgpa", models.DecimalField(decimal_places=2, max_digits=4, validators=[django.core.validators.MinValueValidator(Decimal("0")), django.core.validators.MaxValueValidator(Decimal("10"))])),
                ("photo", models.ImageField(blank=True, null=True, upload_to="toppers/")),
                ("achievements", models.JSONField(blank=True, default=list)),
            ],
            options={"db_table": "toppers", "ordering": ["-year", "rank"]},
        ),
        migrations.CreateModel(
            name="FacultyDepartment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_hod", models.BooleanField(default=False, verbose_name="Head of department")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("department", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="faculty_links", to="academics.department")),
                ("faculty", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="department_links", to="administration.profile")),
            ],
            options={
                "db_table": "faculty_departments",
                "ordering": ["department__name", "-is_hod", "faculty__full_name"],
                "unique_together": {("faculty", "department")},
            },
        ),
    ]
