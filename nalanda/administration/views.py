import logging

from django.contrib import messages
from django.contrib.auth import authenticate, login, logout
from django.contrib.auth.models import User
from django.core.paginator import Paginator
from django.db import DatabaseError
from django.db.models import Q
from django.http import HttpRequest, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.utils import timezone
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_GET, require_POST

from academics.models import Department, FacultyDepartment
from campus_life.models import CampusEvent
from front_cms.models import PhotoGallery
from front_cms.registry import all_managers
from front_cms.views import delete_stored_file
from notices.models import NewsAnnouncement, Notice
from .activity import log_admin_activity
from .decorators import admin_required
from .forms import GrantRoleForm, ProfileForm, SignInForm, SignUpForm
from .models import AdminActivityLog, AdminRole, Profile
from .roles import active_admin_roles, is_admin

logger = logging.getLogger(__name__)


def safe_next(request, default="dashboard:admin_home"):
    next_url = request.POST.get("next") or request.GET.get("next")
    if next_url and url_has_allowed_host_and_scheme(
        next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        return next_url
    return default


# ===== AUTHENTICATION =====


def admin_login(request: HttpRequest):
    if request.method == "GET" and is_admin(request.user):
        return redirect("dashboard:admin_home")

    form = SignInForm(request.POST or None)
    if request.method == "POST":
        if form.is_valid():
            user = authenticate(
                request,
                username=form.cleaned_data["email"].lower(),
                password=form.cleaned_data["password"],
            )
            if user is not None:
                login(request, user)
                messages.success(request, "Welcome back!")
                return redirect(safe_next(request))
        logger.info("Failed sign in for %s", request.POST.get("email", ""))
        messages.error(request, "Sign In Error: invalid email or password.")

    context = {"form": form, "next": request.GET.get("next", "")}
    return render(request, "administration/login.html", context)


def register(request: HttpRequest):
    form = SignUpForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        user = form.save()
        login(request, user, backend="django.contrib.auth.backends.ModelBackend")
        messages.success(request, "Account Created! Welcome to the institute portal.")
        return redirect("students:dashboard")

    return render(request, "administration/register.html", {"form": form})


@require_POST
def logout_view(request: HttpRequest):
    logout(request)
    messages.info(request, "Signed Out")
    return redirect("home")


# ===== USERS =====


@admin_required
@require_GET
def users(request: HttpRequest):
    profiles = Profile.objects.select_related("user").order_by("full_name")
    query = request.GET.get("q", "").strip()
    if query:
        profiles = profiles.filter(
            Q(full_name__icontains=query)
            | Q(email__icontains=query)
            | Q(department__icontains=query)
        )
    role = request.GET.get("role", "")
    if role in Profile.Role.values:
        profiles = profiles.filter(role=role)

    page_obj = Paginator(profiles, 20).get_page(request.GET.get("page", 1))
    context = {
        "page_obj": page_obj,
        "query": query,
        "role": role,
        "roles": Profile.Role.choices,
        "form": ProfileForm(),
    }
    return render(request, "administration/users.html", context)


@admin_required(json=True)
def update_user(request: HttpRequest, profile_id: int):
    profile = get_object_or_404(Profile, pk=profile_id)

    if request.method == "GET":
        return JsonResponse(
            {
                "success": True,
                "profile": {
                    "id": profile.pk,
                    "full_name": profile.full_name,
                    "email": profile.email,
                    "role": profile.role,
                    "role_type": profile.role_type,
                    "department": profile.department,
                    "designation": profile.designation,
                    "qualifications": profile.qualifications,
                    "research_areas": profile.research_areas,
                    "photo": profile.photo.url if profile.photo else None,
                },
            }
        )
    if request.method != "POST":
        return JsonResponse({"error": "Method not allowed"}, status=405)

    old_photo = profile.photo.name if profile.photo else None
    form = ProfileForm(request.POST, request.FILES, instance=profile)
    if not form.is_valid():
        return JsonResponse({"success": False, "errors": form.errors}, status=400)

    try:
        profile = form.save()
    except DatabaseError:
        logger.exception("Failed to update profile %s", profile_id)
        return JsonResponse({"success": False, "error": "Operation failed"}, status=500)

    if old_photo and (not profile.photo or profile.photo.name != old_photo):
        delete_stored_file(profile.photo.storage, old_photo)

    log_admin_activity(request, "update", "profiles", profile.pk)
    messages.success(request, f"Profile for {profile} updated successfully.")
    return JsonResponse({"success": True})


@admin_required(json=True)
@require_POST
def make_admin(request: HttpRequest, profile_id: int):
    profile = get_object_or_404(Profile, pk=profile_id)
    profile.role = Profile.Role.ADMIN
    try:
        profile.save(update_fields=["role", "updated_at"])
    except DatabaseError:
        logger.exception("Failed to promote profile %s", profile_id)
        return JsonResponse({"success": False, "error": "Operation failed"}, status=500)

    log_admin_activity(request, "make_admin", "profiles", profile.pk)
    messages.success(request, f"{profile} is now an admin.")
    return JsonResponse({"success": True, "role": profile.role})


@admin_required(json=True)
@require_POST
def delete_user(request: HttpRequest, profile_id: int):
    profile = get_object_or_404(Profile.objects.select_related("user"), pk=profile_id)
    if profile.user_id == request.user.pk:
        return JsonResponse(
            {"success": False, "error": "You cannot delete your own account"}, status=400
        )

    label = str(profile)
    try:
        profile.user.delete()
    except DatabaseError:
        logger.exception("Failed to delete user for profile %s", profile_id)
        return JsonResponse({"success": False, "error": "Operation failed"}, status=500)

    log_admin_activity(request, "delete", "profiles", profile_id, {"label": label})
    messages.success(request, f"User {label} deleted successfully.")
    return JsonResponse({"success": True})


# ===== FACULTY =====


@admin_required
@require_GET
def faculty(request: HttpRequest):
    profiles = Profile.objects.filter(role_type="faculty").order_by("full_name")
    query = request.GET.get("q", "").strip()
    if query:
        profiles = profiles.filter(
            Q(full_name__icontains=query)
            | Q(department__icontains=query)
            | Q(designation__icontains=query)
        )

    assignments = {}
    for link in FacultyDepartment.objects.filter(faculty__in=profiles).select_related(
        "department"
    ):
        assignments.setdefault(link.faculty_id, []).append(link)

    context = {
        "faculty_members": [(p, assignments.get(p.pk, [])) for p in profiles],
        "query": query,
    }
    return render(request, "administration/faculty.html", context)


# ===== ROLE MANAGEMENT =====


@admin_required
@require_GET
def roles(request: HttpRequest):
    context = {
        "profiles": Profile.objects.select_related("user").order_by("full_name"),
        "admin_roles": AdminRole.objects.select_related("user", "granted_by").order_by(
            "-granted_at"
        ),
        "activity_logs": AdminActivityLog.objects.select_related("admin")[:50],
        "form": GrantRoleForm(),
        "now": timezone.now(),
    }
    return render(request, "administration/roles.html", context)


@admin_required(json=True)
@require_POST
def grant_role(request: HttpRequest):
    form = GrantRoleForm(request.POST)
    if not form.is_valid():
        return JsonResponse({"success": False, "errors": form.errors}, status=400)

    role = form.save(commit=False)
    role.granted_by = request.user
    role.granted_at = timezone.now()
    try:
        role.save()
    except DatabaseError:
        logger.exception("Failed to grant admin role to user %s", role.user_id)
        return JsonResponse({"success": False, "error": "Operation failed"}, status=500)

    log_admin_activity(
        request,
        "grant_role",
        "admin_roles",
        role.pk,
        {"user_id": role.user_id, "role_level": role.role_level},
    )
    messages.success(request, "Admin role granted successfully")
    return JsonResponse({"success": True, "id": role.pk})


@admin_required(json=True)
@require_POST
def revoke_role(request: HttpRequest, role_id: int):
    role = get_object_or_404(AdminRole, pk=role_id)
    role.is_active = False
    try:
        role.save(update_fields=["is_active", "updated_at"])
    except DatabaseError:
        logger.exception("Failed to revoke admin role %s", role_id)
        return JsonResponse({"success": False, "error": "Operation failed"}, status=500)

    log_admin_activity(request, "revoke_role", "admin_roles", role.pk)
    messages.success(request, "Admin role revoked successfully")
    return JsonResponse({"success": True})


# ===== SETTINGS =====


def system_statistics():
    active_admins = (
        AdminRole.objects.filter(is_active=True)
        .filter(Q(expires_at__isnull=True) | Q(expires_at__gt=timezone.now()))
        .values("user")
        .distinct()
        .count()
    )
    return {
        "total_users": User.objects.count(),
        "active_admins": active_admins,
        "total_notices": Notice.objects.count(),
        "total_news": NewsAnnouncement.objects.count(),
        "total_events": CampusEvent.objects.count(),
        "total_photos": PhotoGallery.objects.count(),
        "total_departments": Department.objects.count(),
        "total_faculty": Profile.objects.filter(role_type="faculty").count(),
    }


@admin_required
@require_GET
def settings_view(request: HttpRequest):
    level = (
        active_admin_roles(request.user)
        .order_by("role_level")
        .values_list("role_level", flat=True)
        .first()
    )
    context = {
        "stats": system_statistics(),
        "managers": all_managers(),
        "admin_level": AdminRole.Level(level).label if level else None,
    }
    return render(request, "administration/settings.html", context)
