from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CampusStat",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(default=True, help_text="Show this on the website")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("stat_name", models.CharField(help_text="e.g. Students Enrolled", max_length=100)),
                ("stat_value", models.CharField(help_text="e.g. 15,000+", max_length=50)),
                ("description", models.CharField(blank=True, max_length=300)),
                ("icon", models.CharField(blank=True, max_length=50)),
                ("display_order", models.PositiveIntegerField(default=0)),
            ],
            options={
                "verbose_name": "Campus Statistic",
                "verbose_name_plural": "Campus Statistics",
                "db_table": "campus_stats",
                "ordering": ["display_order"],
            },
        ),
        migrations.CreateModel(
            name="CreativeWork",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(default=True, help_text="Show this on the website")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("category", models.CharField(max_length=100)),
                ("author_name", models.CharField(max_length=200)),
                ("author_department", models.CharField(blank=True, max_length=200)),
                ("image", models.ImageField(blank=True, null=True, upload_to="creative-works/")),
                ("content_url", models.URLField(blank=True)),
                ("is_featured", models.BooleanField(default=False)),
            ],
            options={
                "db_table": "creative_works",
                "ordering": ["-is_featured", "-created_at"],
            },
        ),
        migrations.CreateModel(
            name="HeroImage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(default=True, help_text="Show this on the website")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(help_text="Display title for the slide", max_length=200)),
                ("description", models.TextField(blank=True)),
                ("image", models.ImageField(help_text="Slide image (recommended: 1920x800px)", upload_to="hero-images/")),
                ("display_order", models.PositiveIntegerField(default=0, help_text="Order of display (lower numbers appear first)")),
            ],
            options={
                "verbose_name": "Hero Image",
                "verbose_name_plural": "Hero Images",
                "db_table": "hero_images",
                "ordering": ["display_order", "-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Magazine",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(default=True, help_text="Show this on the website")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("cover_image", models.ImageField(blank=True, null=True, upload_to="magazines/covers/")),
                ("file", models.FileField(blank=True, null=True, upload_to="magazines/files/")),
                ("issue_date", models.DateField(blank=True, null=True)),
            ],
            options={
                "db_table": "magazines",
                "ordering": ["-issue_date", "-created_at"],
            },
        ),
        migrations.CreateModel(
            name="PhotoGallery",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(default=True, help_text="Show this on the website")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("image", models.ImageField(upload_to="photo-gallery/")),
                ("alt_text", models.CharField(blank=True, max_length=300)),
                ("caption", models.CharField(blank=True, max_length=300)),
                ("category", models.CharField(default="campus", max_length=100)),
                ("subcategory", models.CharField(blank=True, max_length=100)),
                ("photographer", models.CharField(blank=True, max_length=200)),
                ("photo_date", models.DateField(blank=True, null=True)),
                ("is_featured", models.BooleanField(default=False)),
                ("display_order", models.PositiveIntegerField(default=0)),
            ],
            options={
                "verbose_name": "Gallery Photo",
                "verbose_name_plural": "Photo Gallery",
                "db_table": "photo_galleries",
                "ordering": ["display_order", "-created_at"],
            },
        ),
    ]
