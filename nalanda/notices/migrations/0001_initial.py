import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="NewsAnnouncement",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(default=True, help_text="Show this on the website")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("summary", models.TextField(blank=True)),
                ("content", models.TextField()),
                ("category", models.CharField(default="general", max_length=100)),
                ("author", models.CharField(blank=True, max_length=200)),
                ("image", models.ImageField(blank=True, null=True, upload_to="news/")),
                ("external_url", models.URLField(blank=True)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("publish_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("expiry_date", models.DateTimeField(blank=True, null=True)),
                ("is_featured", models.BooleanField(default=False)),
                ("is_breaking", models.BooleanField(default=False)),
            ],
            options={
                "verbose_name": "News & Announcement",
                "verbose_name_plural": "News & Announcements",
                "db_table": "news_announcements",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Notice",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(default=True, help_text="Show this on the website")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True, max_length=2000)),
                ("category", models.CharField(choices=[("General", "General"), ("Academic", "Academic"), ("Examination", "Examination"), ("Admission", "Admission"), ("Event", "Event"), ("Holiday", "Holiday")], default="General", max_length=20)),
                ("priority", models.CharField(choices=[("High", "High"), ("Medium", "Medium"), ("Low", "Low")], default="Medium", max_length=10)),
                ("is_new", models.BooleanField(default=True, help_text="Show the NEW badge")),
            ],
            options={
                "db_table": "notices",
                "ordering": ["-created_at"],
            },
        ),
    ]
