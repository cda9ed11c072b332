from django.contrib import admin

from .models import (
    AcademicDownload,
    AcademicPage,
    AcademicService,
    Department,
    FacultyDepartment,
    FeeStructure,
    Scholarship,
    Timetable,
    Topper,
)


@admin.register(AcademicPage)
class AcademicPageAdmin(admin.ModelAdmin):
    list_display = ("title", "slug", "is_active", "updated_at")
    list_filter = ("is_active",)
    search_fields = ("title", "slug")
    prepopulated_fields = {"slug": ("title",)}


@admin.register(AcademicService)
class AcademicServiceAdmin(admin.ModelAdmin):
    list_display = ("name", "icon", "is_active")
    list_filter = ("is_active",)
    search_fields = ("name",)


@admin.register(AcademicDownload)
class AcademicDownloadAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "department", "file_type", "download_count", "is_active")
    list_filter = ("category", "is_active")
    search_fields = ("title", "department")
    readonly_fields = ("file_type", "file_size", "download_count")


@admin.register(Timetable)
class TimetableAdmin(admin.ModelAdmin):
    list_display = ("title", "type", "department", "semester", "academic_year", "is_active")
    list_filter = ("type", "academic_year", "is_active")
    search_fields = ("title", "department")


@admin.register(FeeStructure)
class FeeStructureAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "academic_year", "amount", "due_date", "is_active")
    list_filter = ("category", "academic_year", "is_active")
    search_fields = ("title", "department")


@admin.register(Scholarship)
class ScholarshipAdmin(admin.ModelAdmin):
    list_display = ("title", "amount", "application_deadline", "is_active")
    list_filter = ("is_active",)
    search_fields = ("title",)


@admin.register(Topper)
class TopperAdmin(admin.ModelAdmin):
    list_display = ("name", "department", "year", "rank", "cgpa", "is_active")
    list_filter = ("year", "department", "is_active")
    search_fields = ("name", "department")


class FacultyDepartmentInline(admin.TabularInline):
    model = FacultyDepartment
    extra = 0
    raw_id_fields = ("faculty",)


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "head_name", "contact_email", "is_active")
    list_filter = ("is_active",)
    search_fields = ("code", "name", "head_name")
    inlines = [FacultyDepartmentInline]
