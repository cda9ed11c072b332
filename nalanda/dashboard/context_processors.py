from .navigation import admin_sections


def admin_navigation(request):
    """Sidebar entries for pages under /admin/"""
    if not request.path.startswith("/admin/"):
        return {}
    return {"admin_sections": admin_sections()}
