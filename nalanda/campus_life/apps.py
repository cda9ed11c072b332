from django.apps import AppConfig


class CampusLifeConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "campus_life"
    verbose_name = "Campus Life"
