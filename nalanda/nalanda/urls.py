from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

urlpatterns = [
    path("django-admin/", admin.site.urls),
    path("", include("administration.urls")),
    path("", include("students.urls")),
    path("admin/", include("dashboard.urls")),
    # Content managers resolve "<manager>/" last so the fixed admin screens win
    path("admin/", include("front_cms.urls")),
    path("", include("base.urls")),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

if "django_browser_reload" in settings.INSTALLED_APPS:
    urlpatterns.append(path("__reload__/", include("django_browser_reload.urls")))
