from django.urls import path
from . import views

app_name = "students"

urlpatterns = [
    path("student/", views.dashboard, name="dashboard"),
    path("student/submit/", views.submit, name="submit"),
    path("student/profile/", views.profile, name="profile"),
    path("admin/submissions/", views.submissions, name="submissions"),
    path(
        "admin/submissions/<int:submission_id>/review/",
        views.review_submission,
        name="review_submission",
    ),
]
