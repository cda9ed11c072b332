import logging

from django.db import DatabaseError

from .models import AdminActivityLog

logger = logging.getLogger(__name__)


def client_ip(request):
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR")


def log_admin_activity(request, action, resource_type, resource_id="", details=None):
    """Record an admin action. A failed write is logged and never breaks the action."""
    try:
        return AdminActivityLog.objects.create(
            admin=request.user if request.user.is_authenticated else None,
            action=action,
            resource_type=resource_type,
            resource_id=str(resource_id or ""),
            details=details or {},
            ip_address=client_ip(request),
        )
    except DatabaseError:
        logger.exception("Could not log %s on %s", action, resource_type)
        return None
