import django.core.validators
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

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Amenity",
            fields=common_fields() + [
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("category", models.CharField(default="other", max_length=100)),
                ("location", models.CharField(blank=True, max_length=200)),
                ("operating_hours", models.CharField(blank=True, max_length=200)),
                ("contact_person", models.CharField(blank=True, max_length=200)),
                ("contact_email", models.EmailField(blank=True, max_length=254)),
                ("contact_phone", models.CharField(blank=True, max_length=50)),
                ("booking_required", models.BooleanField(default=False)),
                ("features", models.JSONField(blank=True, default=list)),
                ("image", models.ImageField(blank=True, null=True, upload_to="amenities/")),
            ],
            options={"verbose_name_plural": "Amenities", "db_table": "amenities", "ordering": ["category", "name"]},
        ),
        migrations.CreateModel(
            name="CampusEvent",
            fields=common_fields() + [
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("event_type", models.CharField(default="general", help_text="e.g. festival, cultural, technical", max_length=50)),
                ("venue", models.CharField(blank=True, max_length=200)),
                ("organizer", models.CharField(blank=True, max_length=200)),
                ("start_date", models.DateTimeField()),
                ("end_date", models.DateTimeField(blank=True, null=True)),
                ("image", models.ImageField(blank=True, null=True, upload_to="events/")),
                ("is_featured", models.BooleanField(default=False)),
                ("registration_required", models.BooleanField(default=False)),
                ("registration_url", models.URLField(blank=True)),
                ("max_participants", models.PositiveIntegerField(blank=True, null=True)),
            ],
            options={"db_table": "campus_events", "ordering": ["start_date"]},
        ),
        migrations.CreateModel(
            name="CampusLifeContent",
            fields=common_fields() + [
                ("page_slug", models.SlugField(help_text="e.g. overview, sports, hostel", max_length=100)),
                ("title", models.CharField(max_length=200)),
                ("content", models.TextField(blank=True)),
                ("meta_description", models.CharField(blank=True, max_length=300)),
                ("hero_image", models.ImageField(blank=True, null=True, upload_to="campus-life/")),
                ("features", models.JSONField(blank=True, default=list)),
                ("highlights", models.JSONField(blank=True, default=list)),
                ("gallery_images", models.JSONField(blank=True, default=list)),
                ("display_order", models.PositiveIntegerField(default=0)),
            ],
            options={
                "verbose_name": "Campus Life Content",
                "verbose_name_plural": "Campus Life Content",
                "db_table": "campus_life_content",
                "ordering": ["display_order", "-created_at"],
            },
        ),
        migrations.CreateModel(
            name="CampusPage",
            fields=common_fields() + [
                ("slug", models.SlugField(max_length=100, unique=True)),
                ("title", models.CharField(max_length=200)),
                ("content", models.TextField(blank=True)),
                ("meta_description", models.CharField(blank=True, max_length=300)),
                ("hero_image", models.ImageField(blank=True, null=True, upload_to="campus-pages/")),
                ("display_order", models.PositiveIntegerField(default=0)),
            ],
            options={"db_table": "campus_pages", "ordering": ["display_order", "title"]},
        ),
        migrations.CreateModel(
            name="Club",
            fields=common_fields() + [
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("icon", models.CharField(blank=True, max_length=50)),
                ("member_count", models.PositiveIntegerField(default=0)),
                ("event_count", models.PositiveIntegerField(default=0)),
            ],
            options={"db_table": "clubs", "ordering": ["-member_count", "name"]},
        ),
        migrations.CreateModel(
            name="HostelInfo",
            fields=common_fields() + [
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("hostel_type", models.CharField(help_text="e.g. boys, girls", max_length=50)),
                ("capacity", models.PositiveIntegerField(default=0)),
                ("rooms_available", models.PositiveIntegerField(default=0)),
                ("facilities", models.JSONField(blank=True, default=list)),
                ("fee_structure", models.JSONField(blank=True, default=dict, help_text='e.g. {"single": 60000, "double": 45000}')),
                ("rules", models.TextField(blank=True)),
                ("warden_name", models.CharField(blank=True, max_length=200)),
                ("warden_contact", models.CharField(blank=True, max_length=100)),
                ("image", models.ImageField(blank=True, null=True, upload_to="hostels/")),
            ],
            options={"verbose_name": "Hostel", "verbose_name_plural": "Hostels", "db_table": "hostel_info", "ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="IncubationCenter",
            fields=common_fields() + [
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("center_type", models.CharField(default="incubator", max_length=100)),
                ("establishment_date", models.DateField(blank=True, null=True)),
                ("current_startups", models.PositiveIntegerField(default=0)),
                ("grant_amount", models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True)),
                ("grant_currency", models.CharField(default="INR", max_length=10)),
                ("total_funding_raised", models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True)),
                ("website_url", models.URLField(blank=True)),
                ("logo", models.ImageField(blank=True, null=True, upload_to="incubation/logos/")),
                ("image", models.ImageField(blank=True, null=True, upload_to="incubation/")),
                ("features", models.JSONField(blank=True, default=list)),
                ("success_stories", models.JSONField(blank=True, default=list)),
                ("gallery_images", models.JSONField(blank=True, default=list)),
            ],
            options={"db_table": "incubation_centers", "ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="Publication",
            fields=common_fields() + [
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("publication_type", models.CharField(default="magazine", max_length=100)),
                ("author", models.CharField(blank=True, max_length=200)),
                ("department", models.CharField(blank=True, max_length=200)),
                ("issue_number", models.CharField(blank=True, max_length=50)),
                ("publication_date", models.DateField(blank=True, null=True)),
                ("cover_image", models.ImageField(blank=True, null=True, upload_to="publications/covers/")),
                ("file", models.FileField(blank=True, null=True, upload_to="publications/files/")),
                ("download_count", models.PositiveIntegerField(default=0)),
                ("is_featured", models.BooleanField(default=False)),
            ],
            options={"db_table": "publications", "ordering": ["-publication_date", "-created_at"]},
        ),
        migrations.CreateModel(
            name="SocialInitiative",
            fields=common_fields() + [
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("category", models.CharField(default="community", max_length=100)),
                ("status", models.CharField(choices=[("planned", "Planned"), ("ongoing", "Ongoing"), ("completed", "Completed")], default="planned", max_length=20)),
                ("organizer", models.CharField(blank=True, max_length=200)),
                ("start_date", models.DateField(blank=True, null=True)),
                ("end_date", models.DateField(blank=True, null=True)),
                ("participants_count", models.PositiveIntegerField(default=0)),
                ("impact_metrics", models.TextField(blank=True)),
                ("is_featured", models.BooleanField(default=False)),
                ("image", models.ImageField(blank=True, null=True, upload_to="social-initiatives/")),
                ("gallery_images", models.JSONField(blank=True, default=list)),
            ],
            options={"db_table": "social_initiatives", "ordering": ["-start_date"]},
        ),
        migrations.CreateModel(
            name="SportsFacility",
            fields=common_fields() + [
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("facility_type", models.CharField(default="outdoor", max_length=100)),
                ("capacity", models.PositiveIntegerField(blank=True, null=True)),
                ("operating_hours", models.CharField(blank=True, max_length=200)),
                ("contact_person", models.CharField(blank=True, max_length=200)),
                ("contact_email", models.EmailField(blank=True, max_length=254)),
                ("booking_required", models.BooleanField(default=False)),
                ("image", models.ImageField(blank=True, null=True, upload_to="sports/")),
            ],
            options={"verbose_name_plural": "Sports Facilities", "db_table": "sports_facilities", "ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="StudentActivity",
            fields=common_fields() + [
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("category", models.CharField(default="general", max_length=100)),
                ("coordinator_name", models.CharField(blank=True, max_length=200)),
                ("coordinator_email", models.EmailField(blank=True, max_length=254)),
                ("location", models.CharField(blank=True, max_length=200)),
                ("meeting_schedule", models.CharField(blank=True, max_length=200)),
                ("member_count", models.PositiveIntegerField(default=0)),
                ("image", models.ImageField(blank=True, null=True, upload_to="student-activities/")),
                ("achievements", models.JSONField(blank=True, default=list)),
            ],
            options={"verbose_name_plural": "Student Activities", "db_table": "student_activities", "ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="StudentGovernance",
            fields=common_fields() + [
                ("student_name", models.CharField(max_length=200)),
                ("position", models.CharField(max_length=200)),
                ("department", models.CharField(blank=True, max_length=200)),
                ("year", models.CharField(blank=True, max_length=20)),
                ("bio", models.TextField(blank=True)),
                ("contact_email", models.EmailField(blank=True, max_length=254)),
                ("photo", models.ImageField(blank=True, null=True, upload_to="governance/")),
                ("responsibilities", models.JSONField(blank=True, default=list)),
                ("term_start", models.DateField(blank=True, null=True)),
                ("term_end", models.DateField(blank=True, null=True)),
            ],
            options={
                "verbose_name": "Student Governance Member",
                "verbose_name_plural": "Student Governance",
                "db_table": "student_governance",
                "ordering": ["position"],
            },
        ),
        migrations.CreateModel(
            name="WellnessProgram",
            fields=common_fields() + [
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("program_type", models.CharField(default="fitness", max_length=100)),
                ("instructor", models.CharField(blank=True, max_length=200)),
                ("schedule", models.CharField(blank=True, max_length=200)),
                ("location", models.CharField(blank=True, max_length=200)),
                ("duration_minutes", models.PositiveIntegerField(blank=True, null=True)),
                ("fee", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal("0"))])),
                ("max_participants", models.PositiveIntegerField(blank=True, null=True)),
                ("registration_required", models.BooleanField(default=False)),
                ("image", models.ImageField(blank=True, null=True, upload_to="wellness/")),
            ],
            options={"db_table": "wellness_programs", "ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="WomenForumEvent",
            fields=common_fields() + [
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("event_type", models.CharField(default="workshop", max_length=100)),
                ("event_date", models.DateTimeField(blank=True, null=True)),
                ("venue", models.CharField(blank=True, max_length=200)),
                ("speaker_name", models.CharField(blank=True, max_length=200)),
                ("speaker_designation", models.CharField(blank=True, max_length=200)),
                ("registration_link", models.URLField(blank=True)),
                ("max_participants", models.PositiveIntegerField(blank=True, null=True)),
                ("is_featured", models.BooleanField(default=False)),
                ("image", models.ImageField(blank=True, null=True, upload_to="womens-forum/")),
                ("gallery_images", models.JSONField(blank=True, default=list)),
                ("achievements", models.JSONField(blank=True, default=list)),
            ],
            options={
                "verbose_name": "Women's Forum Event",
                "verbose_name_plural": "Women's Forum Events",
                "db_table": "women_forum_events",
                "ordering": ["-event_date"],
            },
        ),
    ]
