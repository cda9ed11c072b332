from django.contrib import admin

from .models import AdminActivityLog, AdminRole, Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ("full_name", "email", "role", "role_type", "department")
    list_filter = ("role", "role_type")
    search_fields = ("full_name", "email", "department")


@admin.register(AdminRole)
class AdminRoleAdmin(admin.ModelAdmin):
    list_display = ("user", "role_level", "is_active", "granted_by", "granted_at", "expires_at")
    list_filter = ("role_level", "is_active")
    search_fields = ("user__username", "user__email")
    raw_id_fields = ("user", "granted_by")


@admin.register(AdminActivityLog)
class AdminActivityLogAdmin(admin.ModelAdmin):
    list_display = ("created_at", "admin", "action", "resource_type", "resource_id", "ip_address")
    list_filter = ("action", "resource_type")
    search_fields = ("admin__username", "resource_type", "resource_id")
    readonly_fields = [f.name for f in AdminActivityLog._meta.fields]
