from django.contrib import admin

from .models import StudentSubmission


@admin.register(StudentSubmission)
class StudentSubmissionAdmin(admin.ModelAdmin):
    list_display = ("title", "user", "category", "department", "status", "is_featured", "submitted_at")
    list_filter = ("status", "category", "department", "is_featured")
    search_fields = ("title", "user__username", "user__email")
    raw_id_fields = ("user", "reviewed_by")
    readonly_fields = ("submitted_at", "reviewed_at")
