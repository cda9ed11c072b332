from django.contrib import admin

from . import models


@admin.register(models.CampusLifeContent)
class CampusLifeContentAdmin(admin.ModelAdmin):
    list_display = ("title", "page_slug", "display_order", "is_active")
    list_filter = ("page_slug", "is_active")
    search_fields = ("title", "page_slug")


@admin.register(models.CampusPage)
class CampusPageAdmin(admin.ModelAdmin):
    list_display = ("title", "slug", "display_order", "is_active")
    list_filter = ("is_active",)
    search_fields = ("title", "slug")
    prepopulated_fields = {"slug": ("title",)}


@admin.register(models.Club)
class ClubAdmin(admin.ModelAdmin):
    list_display = ("name", "member_count", "event_count", "is_active")
    list_filter = ("is_active",)
    search_fields = ("name",)


@admin.register(models.CampusEvent)
class CampusEventAdmin(admin.ModelAdmin):
    list_display = ("title", "event_type", "start_date", "venue", "is_featured", "is_active")
    list_filter = ("event_type", "is_featured", "is_active")
    search_fields = ("title", "venue", "organizer")
    date_hierarchy = "start_date"


@admin.register(models.StudentActivity)
class StudentActivityAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "coordinator_name", "member_count", "is_active")
    list_filter = ("category", "is_active")
    search_fields = ("name", "coordinator_name")


@admin.register(models.SportsFacility)
class SportsFacilityAdmin(admin.ModelAdmin):
    list_display = ("name", "facility_type", "capacity", "booking_required", "is_active")
    list_filter = ("facility_type", "is_active")
    search_fields = ("name",)


@admin.register(models.HostelInfo)
class HostelInfoAdmin(admin.ModelAdmin):
    list_display = ("name", "hostel_type", "capacity", "rooms_available", "is_active")
    list_filter = ("hostel_type", "is_active")
    search_fields = ("name", "warden_name")


@admin.register(models.WellnessProgram)
class WellnessProgramAdmin(admin.ModelAdmin):
    list_display = ("name", "program_type", "instructor", "fee", "is_active")
    list_filter = ("program_type", "is_active")
    search_fields = ("name", "instructor")


@admin.register(models.StudentGovernance)
class StudentGovernanceAdmin(admin.ModelAdmin):
    list_display = ("student_name", "position", "department", "year", "is_active")
    list_filter = ("is_active",)
    search_fields = ("student_name", "position")


@admin.register(models.Publication)
class PublicationAdmin(admin.ModelAdmin):
    list_display = ("title", "publication_type", "publication_date", "download_count", "is_active")
    list_filter = ("publication_type", "is_featured", "is_active")
    search_fields = ("title", "author")
    readonly_fields = ("download_count",)


@admin.register(models.Amenity)
class AmenityAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "location", "booking_required", "is_active")
    list_filter = ("category", "is_active")
    search_fields = ("name", "location")


@admin.register(models.WomenForumEvent)
class WomenForumEventAdmin(admin.ModelAdmin):
    list_display = ("title", "event_type", "event_date", "is_featured", "is_active")
    list_filter = ("event_type", "is_featured", "is_active")
    search_fields = ("title", "speaker_name")


@admin.register(models.SocialInitiative)
class SocialInitiativeAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "status", "start_date", "is_active")
    list_filter = ("status", "category", "is_active")
    search_fields = ("title", "organizer")


@admin.register(models.IncubationCenter)
class IncubationCenterAdmin(admin.ModelAdmin):
    list_display = ("name", "center_type", "current_startups", "is_active")
    list_filter = ("center_type", "is_active")
    search_fields = ("name",)
