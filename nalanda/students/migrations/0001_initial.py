import django.db.models.deletion
import students.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="StudentSubmission",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("category", models.CharField(choices=[("Digital Art", "Digital Art"), ("Photography", "Photography"), ("Music Composition", "Music Composition"), ("Writing", "Writing"), ("Design", "Design"), ("Video", "Video"), ("Innovation", "Innovation"), ("Technology", "Technology"), ("Research", "Research"), ("Startup", "Startup")], max_length=50)),
                ("department", models.CharField(choices=[("Computer Science & Engineering", "Computer Science & Engineering"), ("Information Technology", "Information Technology"), ("Mechanical Engineering", "Mechanical Engineering"), ("Electrical Engineering", "Electrical Engineering"), ("Civil Engineering", "Civil Engineering"), ("Master of Computer Applications", "Master of Computer Applications"), ("Bachelor of Computer Applications", "Bachelor of Computer Applications"), ("Master of Business Administration", "Master of Business Administration")], max_length=100)),
                ("image", models.ImageField(blank=True, null=True, upload_to=students.models.submission_upload_path)),
                ("file", models.FileField(blank=True, null=True, upload_to=students.models.submission_upload_path)),
                ("status", models.CharField(choices=[("pending", "Pending"), ("approved", "Approved"), ("rejected", "Rejected")], default="pending", max_length=10)),
                ("is_featured", models.BooleanField(default=False)),
                ("review_comments", models.TextField(blank=True)),
                ("reviewed_at", models.DateTimeField(blank=True, null=True)),
                ("submitted_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("reviewed_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="reviewed_submissions", to=settings.AUTH_USER_MODEL)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="submissions", to=settings.AUTH_USER_MODEL)),
            ],
            options={"db_table": "student_submissions", "ordering": ["-submitted_at"]},
        ),
    ]
