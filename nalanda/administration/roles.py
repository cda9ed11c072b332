"""
Role lookup shared by the public site and the admin dashboard.

A user is an admin when they hold an active, unexpired ``AdminRole``.
Everyone else falls back to the role stored on their ``Profile``.
"""

import logging
from typing import Optional

from django.db import DatabaseError
from django.db.models import Q
from django.utils import timezone

from .models import AdminRole, Profile

logger = logging.getLogger(__name__)


def active_admin_roles(user):
    return AdminRole.objects.filter(user=user, is_active=True).filter(
        Q(expires_at__isnull=True) | Q(expires_at__gt=timezone.now())
    )


def resolve_user_role(user) -> Optional[str]:
    if user is None or not user.is_authenticated:
        return None

    try:
        if active_admin_roles(user).exists():
            return Profile.Role.ADMIN

        profile = Profile.objects.filter(user=user).only("role").first()
        return profile.role if profile else None
    except DatabaseError:
        logger.exception("Error checking admin status for user %s", user.pk)
        return None


def is_admin(user) -> bool:
    return resolve_user_role(user) == Profile.Role.ADMIN


def check_admin_level(user, required_level: int) -> bool:
    """Lower levels are more privileged: 1 Super Admin, 2 Admin, 3 Moderator."""
    if user is None or not user.is_authenticated:
        return False
    return active_admin_roles(user).filter(role_level__lte=required_level).exists()
