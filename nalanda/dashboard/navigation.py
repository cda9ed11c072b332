"""Grouped sidebar entries for the admin dashboard."""

from django.urls import reverse

from front_cms.registry import ADMIN_GROUPS, all_managers

# Screens that are not plain content managers, keyed by sidebar group
SPECIAL_SCREENS = {
    "Dashboard": [
        ("Overview", "dashboard:admin_home"),
    ],
    "Management": [
        ("Student Submissions", "students:submissions"),
        ("Users", "administration:users"),
        ("Faculty", "administration:faculty"),
        ("Roles & Permissions", "administration:roles"),
        ("Settings", "administration:settings"),
    ],
}


def admin_sections():
    """Return ``[(group, [{"title", "url", "slug"}, ...]), ...]`` in sidebar order."""
    entries = {group: [] for group in ADMIN_GROUPS}

    for group, screens in SPECIAL_SCREENS.items():
        for title, url_name in screens:
            entries[group].append({"title": title, "url": reverse(url_name), "slug": None})

    for manager in all_managers():
        entries[manager.group].append(
            {
                "title": manager.title,
                "url": reverse("front_cms:manage", args=[manager.slug]),
                "slug": manager.slug,
            }
        )

    return [(group, entries[group]) for group in ADMIN_GROUPS if entries[group]]
