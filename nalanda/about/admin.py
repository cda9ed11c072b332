from django.contrib import admin

from . import models


@admin.register(models.AboutPage)
class AboutPageAdmin(admin.ModelAdmin):
    list_display = ("title", "page_type", "display_order", "is_active")
    list_filter = ("page_type", "is_active")
    search_fields = ("title",)


@admin.register(models.AwardAchievement)
class AwardAchievementAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "award_date", "display_order", "is_active")
    list_filter = ("category", "is_active")
    search_fields = ("title",)


@admin.register(models.LeadershipMessage)
class LeadershipMessageAdmin(admin.ModelAdmin):
    list_display = ("name", "position", "designation", "is_active")
    list_filter = ("position", "is_active")
    search_fields = ("name",)


@admin.register(models.AccreditationInfo)
class AccreditationInfoAdmin(admin.ModelAdmin):
    list_display = ("title", "accreditation_type", "grade_rating", "validity_period", "is_active")
    list_filter = ("accreditation_type", "is_active")
    search_fields = ("title",)


@admin.register(models.ContactInfo)
class ContactInfoAdmin(admin.ModelAdmin):
    list_display = ("office_name", "contact_person", "email", "phone", "display_order", "is_active")
    list_filter = ("is_active",)
    search_fields = ("office_name", "contact_person", "email")


@admin.register(models.OfficeLocation)
class OfficeLocationAdmin(admin.ModelAdmin):
    list_display = ("name", "building", "room_number", "is_main_office", "is_active")
    list_filter = ("is_main_office", "is_active")
    search_fields = ("name", "building")
