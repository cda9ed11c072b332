from django.apps import AppConfig


class AdministrationConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "administration"
    verbose_name = "Users & Roles"

    def ready(self):
        from . import signals  # noqa: F401
