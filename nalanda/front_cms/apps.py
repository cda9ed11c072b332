from django.apps import AppConfig
from django.utils.module_loading import autodiscover_modules


class FrontCmsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "front_cms"
    verbose_name = "Website Content"

    def ready(self):
        # Every app declares its admin managers in managers.py
        autodiscover_modules("managers")
