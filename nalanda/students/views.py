import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.http import HttpRequest, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.utils import timezone
from django.views.decorators.http import require_GET, require_POST

from administration.activity import log_admin_activity
from administration.decorators import admin_required
from administration.forms import OwnProfileForm
from administration.models import Profile
from front_cms.views import delete_stored_file
from .forms import ReviewForm, SubmissionForm
from .models import StudentSubmission

logger = logging.getLogger(__name__)


def own_profile(user):
    profile, _ = Profile.objects.get_or_create(
        user=user, defaults={"email": user.email or user.username}
    )
    return profile


# ===== STUDENT AREA =====


@login_required
@require_GET
def dashboard(request: HttpRequest):
    context = {
        "profile": own_profile(request.user),
        "submissions": StudentSubmission.objects.filter(user=request.user),
        "form": SubmissionForm(),
    }
    return render(request, "students/dashboard.html", context)


@login_required
def submit(request: HttpRequest):
    form = SubmissionForm(request.POST or None, request.FILES or None)
    if request.method == "POST":
        if form.is_valid():
            submission = form.save(commit=False)
            submission.user = request.user
            submission.status = StudentSubmission.Status.PENDING
            try:
                submission.save()
            except DatabaseError:
                logger.exception("Failed to store submission for user %s", request.user.pk)
                messages.error(request, "Upload Error: your work could not be submitted.")
            else:
                messages.success(
                    request, "Submission received! It will appear once it is reviewed."
                )
                return redirect("students:dashboard")
        else:
            messages.error(request, "Please correct the errors below.")

    return render(request, "students/submit.html", {"form": form})


@login_required
def profile(request: HttpRequest):
    profile = own_profile(request.user)
    old_photo = profile.photo.name if profile.photo else None

    if request.method == "POST":
        form = OwnProfileForm(request.POST, request.FILES, instance=profile)
        if form.is_valid():
            profile = form.save()
            if old_photo and (not profile.photo or profile.photo.name != old_photo):
                delete_stored_file(profile.photo.storage, old_photo)
            messages.success(request, "Profile updated successfully.")
            return redirect("students:profile")
        messages.error(request, "Please correct the errors below.")
    else:
        form = OwnProfileForm(instance=profile)

    return render(request, "students/profile.html", {"form": form, "profile": profile})


# ===== SUBMISSION REVIEW =====


@admin_required
@require_GET
def submissions(request: HttpRequest):
    queryset = StudentSubmission.objects.select_related("user", "user__profile", "reviewed_by")
    context = {
        "pending": queryset.filter(status=StudentSubmission.Status.PENDING),
        "approved": queryset.filter(status=StudentSubmission.Status.APPROVED),
        "rejected": queryset.filter(status=StudentSubmission.Status.REJECTED),
        "form": ReviewForm(),
    }
    return render(request, "students/submissions.html", context)


@admin_required(json=True)
@require_POST
def review_submission(request: HttpRequest, submission_id: int):
    submission = get_object_or_404(StudentSubmission, pk=submission_id)
    form = ReviewForm(request.POST)
    if not form.is_valid():
        return JsonResponse({"success": False, "errors": form.errors}, status=400)

    approve = form.cleaned_data["action"] == "approve"
    submission.status = (
        StudentSubmission.Status.APPROVED if approve else StudentSubmission.Status.REJECTED
    )
    # Only approved work can be featured on the public site
    submission.is_featured = approve and form.cleaned_data["is_featured"]
    submission.review_comments = form.cleaned_data["comments"]
    submission.reviewed_by = request.user
    submission.reviewed_at = timezone.now()
    try:
        submission.save()
    except DatabaseError:
        logger.exception("Failed to review submission %s", submission_id)
        return JsonResponse({"success": False, "error": "Operation failed"}, status=500)

    log_admin_activity(
        request,
        f"{form.cleaned_data['action']}_submission",
        "student_submissions",
        submission.pk,
        {"is_featured": submission.is_featured},
    )
    messages.success(request, f"Submission {submission.get_status_display().lower()}.")
    return JsonResponse(
        {
            "success": True,
            "status": submission.status,
            "is_featured": submission.is_featured,
        }
    )
