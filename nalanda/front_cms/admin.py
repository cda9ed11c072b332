from django.contrib import admin

from .models import CampusStat, CreativeWork, HeroImage, Magazine, PhotoGallery


@admin.register(HeroImage)
class HeroImageAdmin(admin.ModelAdmin):
    list_display = ("title", "display_order", "is_active", "created_at")
    list_filter = ("is_active",)
    search_fields = ("title", "description")
    list_editable = ("display_order", "is_active")


@admin.register(PhotoGallery)
class PhotoGalleryAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "subcategory", "is_featured", "is_active")
    list_filter = ("category", "is_featured", "is_active")
    search_fields = ("title", "caption", "photographer")


@admin.register(CampusStat)
class CampusStatAdmin(admin.ModelAdmin):
    list_display = ("stat_name", "stat_value", "display_order", "is_active")
    list_filter = ("is_active",)
    search_fields = ("stat_name",)


@admin.register(Magazine)
class MagazineAdmin(admin.ModelAdmin):
    list_display = ("title", "issue_date", "is_active")
    list_filter = ("is_active",)
    search_fields = ("title",)
    date_hierarchy = "issue_date"


@admin.register(CreativeWork)
class CreativeWorkAdmin(admin.ModelAdmin):
    list_display = ("title", "author_name", "category", "is_featured", "is_active")
    list_filter = ("category", "is_featured", "is_active")
    search_fields = ("title", "author_name")
