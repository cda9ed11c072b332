from django.db import models
from django.utils import timezone

from front_cms.models import PublishableModel


class Notice(PublishableModel):
    class Category(models.TextChoices):
        GENERAL = "General", "General"
        ACADEMIC = "Academic", "Academic"
        EXAMINATION = "Examination", "Examination"
        ADMISSION = "Admission", "Admission"
        EVENT = "Event", "Event"
        HOLIDAY = "Holiday", "Holiday"

    class Priority(models.TextChoices):
        HIGH = "High", "High"
        MEDIUM = "Medium", "Medium"
        LOW = "Low", "Low"

    title = models.CharField(max_length=200)
    description = models.TextField(max_length=2000, blank=True)
    category = models.CharField(
        max_length=20, choices=Category.choices, default=Category.GENERAL
    )
    priority = models.CharField(
        max_length=10, choices=Priority.choices, default=Priority.MEDIUM
    )
    is_new = models.BooleanField(default=True, help_text="Show the NEW badge")

    def __str__(self):
        return f"{self.title} ({self.category})"

    class Meta:
        db_table = "notices"
        ordering = ["-created_at"]


class NewsAnnouncement(PublishableModel):
    title = models.CharField(max_length=255)
    summary = models.TextField(blank=True)
    content = models.TextField()
    category = models.CharField(max_length=100, default="general")
    author = models.CharField(max_length=200, blank=True)
    image = models.ImageField(upload_to="news/", blank=True, null=True)
    external_url = models.URLField(blank=True)
    tags = models.JSONField(default=list, blank=True)
    publish_date = models.DateTimeField(default=timezone.now)
    expiry_date = models.DateTimeField(blank=True, null=True)
    is_featured = models.BooleanField(default=False)
    is_breaking = models.BooleanField(default=False)

    def __str__(self):
        return self.title

    @property
    def is_expired(self):
        return self.expiry_date is not None and self.expiry_date <= timezone.now()

    class Meta:
        db_table = "news_announcements"
        ordering = ["-created_at"]
        verbose_name = "News & Announcement"
        verbose_name_plural = "News & Announcements"
