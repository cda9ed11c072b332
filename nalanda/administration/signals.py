from django.contrib.auth.models import User
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Profile


@receiver(post_save, sender=User)
def create_profile(sender, instance, created, raw=False, **kwargs):
    """Every account gets a profile row, as the public site reads roles from it."""
    if not created or raw:
        return
    Profile.objects.get_or_create(
        user=instance,
        defaults={
            "email": instance.email or instance.username,
            "full_name": instance.get_full_name(),
        },
    )
