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
            name="AboutPage",
            fields=common_fields() + [
                ("page_type", models.CharField(choices=[("about", "About Us"), ("vision-mission", "Vision & Mission"), ("history", "History"), ("governance", "Governance")], max_length=30)),
                ("title", models.CharField(max_length=200)),
                ("content", models.TextField()),
                ("meta_description", models.CharField(blank=True, max_length=300)),
                ("image", models.ImageField(blank=True, null=True, upload_to="about/")),
                ("display_order", models.PositiveIntegerField(default=0)),
            ],
            options={"db_table": "about_pages", "ordering": ["display_order", "-created_at"]},
        ),
        migrations.CreateModel(
            name="AccreditationInfo",
            fields=common_fields() + [
                ("accreditation_type", models.CharField(choices=[("naac", "NAAC"), ("nba", "NBA"), ("siro", "SIRO"), ("other", "Other")], max_length=20)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("grade_rating", models.CharField(blank=True, help_text="e.g. A++", max_length=50)),
                ("validity_period", models.CharField(blank=True, max_length=100)),
                ("benefits", models.TextField(blank=True)),
                ("certificate", models.FileField(blank=True, null=True, upload_to="accreditation/")),
            ],
            options={
                "verbose_name": "Accreditation",
                "verbose_name_plural": "Accreditation",
                "db_table": "accreditation_info",
                "ordering": ["accreditation_type", "-created_at"],
            },
        ),
        migrations.CreateModel(
            name="AwardAchievement",
            fields=common_fields() + [
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("category", models.CharField(default="institutional", max_length=100)),
                ("award_date", models.DateField(blank=True, null=True)),
                ("image", models.ImageField(blank=True, null=True, upload_to="awards/")),
                ("certificate", models.FileField(blank=True, null=True, upload_to="awards/certificates/")),
                ("display_order", models.PositiveIntegerField(default=0)),
            ],
            options={
                "verbose_name": "Award & Achievement",
                "verbose_name_plural": "Awards & Achievements",
                "db_table": "awards_achievements",
                "ordering": ["display_order", "-award_date"],
            },
        ),
        migrations.CreateModel(
            name="ContactInfo",
            fields=common_fields() + [
                ("office_name", models.CharField(max_length=200)),
                ("contact_person", models.CharField(blank=True, max_length=200)),
                ("designation", models.CharField(blank=True, max_length=200)),
                ("department", models.CharField(blank=True, max_length=200)),
                ("email", models.EmailField(blank=True, max_length=254)),
                ("phone", models.CharField(blank=True, max_length=50)),
                ("address", models.TextField(blank=True)),
                ("office_hours", models.CharField(blank=True, max_length=200)),
                ("location_map_url", models.URLField(blank=True, max_length=500)),
                ("image", models.ImageField(blank=True, null=True, upload_to="contacts/")),
                ("display_order", models.PositiveIntegerField(default=0)),
            ],
            options={
                "verbose_name": "Contact",
                "verbose_name_plural": "Contact Information",
                "db_table": "contact_info",
                "ordering": ["display_order", "office_name"],
            },
        ),
        migrations.CreateModel(
            name="LeadershipMessage",
            fields=common_fields() + [
                ("position", models.CharField(choices=[("chairman", "Chairman"), ("vice_chairman", "Vice Chairman"), ("director", "Director")], max_length=20)),
                ("name", models.CharField(max_length=200)),
                ("designation", models.CharField(blank=True, max_length=200)),
                ("qualifications", models.TextField(blank=True)),
                ("message", models.TextField()),
                ("photo", models.ImageField(blank=True, null=True, upload_to="leadership/")),
            ],
            options={"db_table": "leadership_messages", "ordering": ["position", "-updated_at"]},
        ),
        migrations.CreateModel(
            name="OfficeLocation",
            fields=common_fields() + [
                ("name", models.CharField(max_length=200)),
                ("building", models.CharField(blank=True, max_length=200)),
                ("floor", models.CharField(blank=True, max_length=50)),
                ("room_number", models.CharField(blank=True, max_length=50)),
                ("address", models.TextField(blank=True)),
                ("landmark", models.CharField(blank=True, max_length=200)),
                ("map_coordinates", models.CharField(blank=True, help_text="latitude,longitude", max_length=100)),
                ("email", models.EmailField(blank=True, max_length=254)),
                ("phone", models.CharField(blank=True, max_length=50)),
                ("office_hours", models.CharField(blank=True, max_length=200)),
                ("is_main_office", models.BooleanField(default=False)),
                ("image", models.ImageField(blank=True, null=True, upload_to="office-locations/")),
            ],
            options={"db_table": "office_locations", "ordering": ["-is_main_office", "name"]},
        ),
    ]
