from django.db import models
from django.contrib.auth.models import User
from django.utils import timezone


def profile_photo_path(instance, filename):
    return f"profiles/{instance.user_id}/{filename}"


class Profile(models.Model):
    class Role(models.TextChoices):
        ADMIN = "admin", "Admin"
        FACULTY = "faculty", "Faculty"
        STUDENT = "student", "Student"
        ALUMNI = "alumni", "Alumni"

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="profile")
    email = models.EmailField()
    full_name = models.CharField(max_length=200, blank=True)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.STUDENT)
    role_type = models.CharField(
        max_length=50, blank=True, help_text="e.g. faculty, staff, student"
    )
    department = models.CharField(max_length=200, blank=True)
    designation = models.CharField(max_length=200, blank=True)
    qualifications = models.TextField(blank=True)
    research_areas = models.JSONField(default=list, blank=True)
    photo = models.ImageField(upload_to=profile_photo_path, blank=True, null=True)
    branch = models.CharField(max_length=100, blank=True)
    semester = models.CharField(max_length=20, blank=True)
    enrollment_year = models.PositiveIntegerField(blank=True, null=True)
    graduation_year = models.PositiveIntegerField(blank=True, null=True)
    current_position = models.CharField(max_length=200, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "profiles"
        ordering = ["full_name"]

    def __str__(self):
        return self.full_name or self.email or self.user.username


class AdminRole(models.Model):
    class Level(models.IntegerChoices):
        SUPER_ADMIN = 1, "Super Admin"
        ADMIN = 2, "Admin"
        MODERATOR = 3, "Moderator"

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="admin_roles")
    role_level = models.PositiveSmallIntegerField(
        choices=Level.choices, default=Level.ADMIN
    )
    permissions = models.JSONField(default=dict, blank=True)
    granted_by = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        related_name="granted_admin_roles",
        blank=True,
        null=True,
    )
    granted_at = models.DateTimeField(default=timezone.now)
    expires_at = models.DateTimeField(
        blank=True, null=True, help_text="Leave empty for a role that never expires"
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "admin_roles"
        ordering = ["-granted_at"]

    def __str__(self):
        return f"{self.user} ({self.get_role_level_display()})"

    @property
    def is_expired(self):
        return self.expires_at is not None and self.expires_at <= timezone.now()


class AdminActivityLog(models.Model):
    admin = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        related_name="activity_logs",
        blank=True,
        null=True,
    )
    action = models.CharField(max_length=100)
    resource_type = models.CharField(max_length=100)
    resource_id = models.CharField(max_length=100, blank=True)
    details = models.JSONField(default=dict, blank=True)
    ip_address = models.GenericIPAddressField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "admin_activity_logs"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.action} {self.resource_type} by {self.admin}"
