from django.contrib.auth.models import User
from django.db import models


class SubmissionCategories(models.TextChoices):
    DIGITAL_ART = "Digital Art"
    PHOTOGRAPHY = "Photography"
    MUSIC_COMPOSITION = "Music Composition"
    WRITING = "Writing"
    DESIGN = "Design"
    VIDEO = "Video"
    INNOVATION = "Innovation"
    TECHNOLOGY = "Technology"
    RESEARCH = "Research"
    STARTUP = "Startup"


class Departments(models.TextChoices):
    CSE = "Computer Science & Engineering"
    IT = "Information Technology"
    MECHANICAL = "Mechanical Engineering"
    ELECTRICAL = "Electrical Engineering"
    CIVIL = "Civil Engineering"
    MCA = "Master of Computer Applications"
    BCA = "Bachelor of Computer Applications"
    MBA = "Master of Business Administration"


INNOVATION_CATEGORIES = [
    SubmissionCategories.INNOVATION,
    SubmissionCategories.TECHNOLOGY,
    SubmissionCategories.RESEARCH,
    SubmissionCategories.STARTUP,
]


def submission_upload_path(instance, filename):
    return f"student-submissions/{instance.user_id}/{filename}"


class StudentSubmission(models.Model):
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        APPROVED = "approved", "Approved"
        REJECTED = "rejected", "Rejected"

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="submissions")
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=50, choices=SubmissionCategories.choices)
    department = models.CharField(max_length=100, choices=Departments.choices)
    image = models.ImageField(upload_to=submission_upload_path, blank=True, null=True)
    file = models.FileField(upload_to=submission_upload_path, blank=True, null=True)
    status = models.CharField(
        max_length=10, choices=Status.choices, default=Status.PENDING
    )
    is_featured = models.BooleanField(default=False)
    review_comments = models.TextField(blank=True)
    reviewed_by = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        related_name="reviewed_submissions",
        blank=True,
        null=True,
    )
    reviewed_at = models.DateTimeField(blank=True, null=True)
    submitted_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.title} ({self.get_status_display()})"

    @property
    def author_name(self):
        profile = getattr(self.user, "profile", None)
        if profile and profile.full_name:
            return profile.full_name
        return self.user.get_full_name() or self.user.username

    class Meta:
        db_table = "student_submissions"
        ordering = ["-submitted_at"]
