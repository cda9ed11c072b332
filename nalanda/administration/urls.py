from django.urls import path
from . import views

app_name = "administration"

urlpatterns = [
    # Authentication
    path("admin/login/", views.admin_login, name="admin_login"),
    path("register/", views.register, name="register"),
    path("logout/", views.logout_view, name="logout"),
    # Users
    path("admin/users/", views.users, name="users"),
    path("admin/users/<int:profile_id>/update/", views.update_user, name="update_user"),
    path(
        "admin/users/<int:profile_id>/make-admin/", views.make_admin, name="make_admin"
    ),
    path("admin/users/<int:profile_id>/delete/", views.delete_user, name="delete_user"),
    path("admin/faculty/", views.faculty, name="faculty"),
    # Role management
    path("admin/roles/", views.roles, name="roles"),
    path("admin/roles/grant/", views.grant_role, name="grant_role"),
    path("admin/roles/<int:role_id>/revoke/", views.revoke_role, name="revoke_role"),
    path("admin/settings/", views.settings_view, name="settings"),
]
