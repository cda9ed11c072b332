from django.http import HttpRequest
from django.shortcuts import render
from django.views.decorators.http import require_GET

from administration.decorators import admin_required
from administration.models import AdminActivityLog
from front_cms.registry import ADMIN_GROUPS, all_managers
from students.models import StudentSubmission


def get_dashboard_data():
    """Active-row counts per content table, grouped the way the sidebar is"""
    groups = {group: [] for group in ADMIN_GROUPS}
    counted = set()

    for manager in all_managers():
        queryset = manager.get_queryset()
        if manager.has_active_flag:
            queryset = queryset.filter(is_active=True)
        groups[manager.group].append(
            {"manager": manager, "count": queryset.count()}
        )
        counted.add(manager.model)

    return {
        "group_stats": [
            (group, stats, sum(item["count"] for item in stats))
            for group, stats in groups.items()
            if stats
        ],
        "content_tables": len(counted),
        "pending_submissions": StudentSubmission.objects.filter(
            status=StudentSubmission.Status.PENDING
        ).count(),
    }


@admin_required
@require_GET
def admin_home(request: HttpRequest):
    """Admin dashboard landing page"""
    context = {
        "recent_activity": AdminActivityLog.objects.select_related("admin")[:10],
        **get_dashboard_data(),
    }
    return render(request, "dashboard/index.html", context)
