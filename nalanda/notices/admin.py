from django.contrib import admin

from .models import NewsAnnouncement, Notice


@admin.register(Notice)
class NoticeAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "priority", "is_new", "is_active", "created_at")
    list_filter = ("category", "priority", "is_new", "is_active")
    search_fields = ("title", "description")


@admin.register(NewsAnnouncement)
class NewsAnnouncementAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "publish_date", "is_featured", "is_active")
    list_filter = ("category", "is_featured", "is_breaking", "is_active")
    search_fields = ("title", "summary", "author")
    date_hierarchy = "publish_date"
