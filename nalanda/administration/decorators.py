from functools import wraps
from urllib.parse import urlencode

from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import redirect
from django.urls import reverse

from .roles import is_admin


def admin_required(view=None, *, json=False):
    """Gate a view on the admin role.

    Page views send anyone else to the admin login page; JSON endpoints
    answer 403 instead.
    """

    def decorator(view_func):
        @wraps(view_func)
        def wrapped(request, *args, **kwargs):
            if is_admin(request.user):
                return view_func(request, *args, **kwargs)

            if json:
                return JsonResponse({"error": "Access denied"}, status=403)

            if request.user.is_authenticated:
                messages.error(
                    request,
                    "You don't have permission to access the admin dashboard.",
                )
            login_url = reverse("administration:admin_login")
            return redirect(f"{login_url}?{urlencode({'next': request.get_full_path()})}")

        return wrapped

    if view is not None:
        return decorator(view)
    return decorator
