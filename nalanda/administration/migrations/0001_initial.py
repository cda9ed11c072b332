import administration.models
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Profile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("email", models.EmailField(max_length=254)),
                ("full_name", models.CharField(blank=True, max_length=200)),
                ("role", models.CharField(choices=[("admin", "Admin"), ("faculty", "Faculty"), ("student", "Student"), ("alumni", "Alumni")], default="student", max_length=20)),
                ("role_type", models.CharField(blank=True, help_text="e.g. faculty, staff, student", max_length=50)),
                ("department", models.CharField(blank=True, max_length=200)),
                ("designation", models.CharField(blank=True, max_length=200)),
                ("qualifications", models.TextField(blank=True)),
                ("research_areas", models.JSONField(blank=True, default=list)),
                ("photo", models.ImageField(blank=True, null=True, upload_to=administration.models.profile_photo_path)),
                ("branch", models.CharField(blank=True, max_length=100)),
                ("semester", models.CharField(blank=True, max_length=20)),
                ("enrollment_year", models.PositiveIntegerField(blank=True, null=True)),
                ("graduation_year", models.PositiveIntegerField(blank=True, null=True)),
                ("current_position", models.CharField(blank=True, max_length=200)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="profile", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "profiles",
                "ordering": ["full_name"],
            },
        ),
        migrations.CreateModel(
            name="AdminRole",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("role_level", models.PositiveSmallIntegerField(choices=[(1, "Super Admin"), (2, "Admin"), (3, "Moderator")], default=2)),
                ("permissions", models.JSONField(blank=True, default=dict)),
                ("granted_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("expires_at", models.DateTimeField(blank=True, help_text="Leave empty for a role that never expires", null=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("granted_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="granted_admin_roles", to=settings.AUTH_USER_MODEL)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="admin_roles", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "admin_roles",
                "ordering": ["-granted_at"],
            },
        ),
        migrations.CreateModel(
            name="AdminActivityLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("action", models.CharField(max_length=100)),
                ("resource_type", models.CharField(max_length=100)),
                ("resource_id", models.CharField(blank=True, max_length=100)),
                ("details", models.JSONField(blank=True, default=dict)),
                ("ip_address", models.GenericIPAddressField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("admin", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="activity_logs", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "admin_activity_logs",
                "ordering": ["-created_at"],
            },
        ),
    ]
