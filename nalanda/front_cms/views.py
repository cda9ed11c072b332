import logging

from django.contrib import messages
from django.core.paginator import Paginator
from django.db import DatabaseError, transaction
from django.db.models.fields.files import FieldFile
from django.forms.models import model_to_dict
from django.http import HttpRequest, JsonResponse
from django.shortcuts import get_object_or_404, render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_POST

from administration.activity import log_admin_activity
from administration.decorators import admin_required
from .exports import import_from_dataframe, read_file_to_dataframe, write_export
from .registry import get_manager

logger = logging.getLogger(__name__)

BULK_ACTIONS = ("delete", "activate", "deactivate")


def serialize_instance(instance):
    data = model_to_dict(instance)
    for name, value in data.items():
        if isinstance(value, FieldFile):
            data[name] = value.url if value else None
    data["id"] = instance.pk
    return data


def stored_files(instance, field_names):
    files = {}
    for name in field_names:
        field_file = getattr(instance, name)
        if field_file:
            files[name] = field_file.name
    return files


def delete_stored_file(storage, name):
    try:
        storage.delete(name)
    except OSError:
        logger.warning("Could not remove %s from storage", name)


def remove_files(instance, field_names, only=None):
    """Remove uploaded files from storage; a missing file is not an error."""
    for name in field_names:
        field_file = getattr(instance, name)
        if not field_file or (only is not None and field_file.name not in only):
            continue
        delete_stored_file(field_file.storage, field_file.name)


def manager_url(manager):
    return reverse("front_cms:manage", args=[manager.slug])


def operation_failed(action, manager):
    logger.exception("Failed to %s %s", action, manager.verbose_name)
    return JsonResponse({"success": False, "error": "Operation failed"}, status=500)


# ===== LIST =====


@admin_required
@require_GET
def manage(request: HttpRequest, manager: str):
    """List, search and filter the rows of one content table"""
    manager = get_manager(manager)

    queryset = manager.get_queryset()
    query = request.GET.get("q", "").strip()
    queryset = manager.search(queryset, query)

    status = request.GET.get("status", "")
    if status == "active":
        queryset = queryset.filter(is_active=True)
    elif status == "inactive":
        queryset = queryset.filter(is_active=False)

    paginator = Paginator(queryset, manager.paginate_by)
    page_obj = paginator.get_page(request.GET.get("page", 1))

    context = {
        "manager": manager,
        "page_obj": page_obj,
        "rows": [(obj, manager.row(obj)) for obj in page_obj],
        "columns": manager.columns(),
        "form": manager.form_class(),
        "query": query,
        "status": status,
        "total_count": paginator.count,
    }
    return render(request, "front_cms/manage.html", context)


# ===== CRUD OPERATIONS =====


@admin_required(json=True)
@require_POST
def create_item(request: HttpRequest, manager: str):
    manager = get_manager(manager)

    form = manager.form_class(request.POST, request.FILES)
    if not form.is_valid():
        return JsonResponse({"success": False, "errors": form.errors}, status=400)

    try:
        with transaction.atomic():
            item = form.save()
    except DatabaseError:
        return operation_failed("create", manager)

    log_admin_activity(request, "create", manager.table_name, item.pk)
    messages.success(request, f"{manager.verbose_name.title()} '{item}' created successfully.")
    return JsonResponse(
        {"success": True, "id": item.pk, "redirect": manager_url(manager)}
    )


@admin_required(json=True)
def update_item(request: HttpRequest, manager: str, item_id: int):
    manager = get_manager(manager)
    item = get_object_or_404(manager.get_queryset(), pk=item_id)

    if request.method == "GET":
        return JsonResponse({"success": True, "item": serialize_instance(item)})

    if request.method != "POST":
        return JsonResponse({"error": "Method not allowed"}, status=405)

    previous_files = stored_files(item, manager.file_fields)
    form = manager.form_class(request.POST, request.FILES, instance=item)
    if not form.is_valid():
        return JsonResponse({"success": False, "errors": form.errors}, status=400)

    try:
        with transaction.atomic():
            updated = form.save()
    except DatabaseError:
        return operation_failed("update", manager)

    # Replaced or cleared uploads are dropped from storage
    current = stored_files(updated, manager.file_fields)
    replaced = {
        name: path for name, path in previous_files.items() if current.get(name) != path
    }
    for name, path in replaced.items():
        try:
            updated._meta.get_field(name).storage.delete(path)
        except OSError:
            logger.warning("Could not remove %s from storage", path)

    log_admin_activity(request, "update", manager.table_name, updated.pk)
    messages.success(request, f"{manager.verbose_name.title()} '{updated}' updated successfully.")
    return JsonResponse(
        {"success": True, "id": updated.pk, "redirect": manager_url(manager)}
    )


@admin_required(json=True)
@require_POST
def delete_item(request: HttpRequest, manager: str, item_id: int):
    manager = get_manager(manager)
    item = get_object_or_404(manager.get_queryset(), pk=item_id)
    label = str(item)

    try:
        item.delete()
    except DatabaseError:
        return operation_failed("delete", manager)

    remove_files(item, manager.file_fields)
    log_admin_activity(
        request, "delete", manager.table_name, item_id, {"label": label}
    )
    messages.success(request, f"{manager.verbose_name.title()} '{label}' deleted successfully.")
    return JsonResponse({"success": True})


@admin_required(json=True)
@require_POST
def toggle_status(request: HttpRequest, manager: str, item_id: int):
    """Toggle active status"""
    manager = get_manager(manager)
    if not manager.has_active_flag:
        return JsonResponse({"success": False, "error": "Not supported"}, status=400)

    item = get_object_or_404(manager.get_queryset(), pk=item_id)
    item.is_active = not item.is_active
    try:
        item.save(update_fields=["is_active", "updated_at"])
    except DatabaseError:
        return operation_failed("update status of", manager)

    status = "activated" if item.is_active else "deactivated"
    log_admin_activity(
        request, status, manager.table_name, item.pk
    )
    messages.success(request, f"{manager.verbose_name.title()} '{item}' {status} successfully.")
    return JsonResponse({"success": True, "is_active": item.is_active})


@admin_required(json=True)
@require_POST
def reorder_item(request: HttpRequest, manager: str, item_id: int):
    manager = get_manager(manager)
    if not manager.has_display_order:
        return JsonResponse({"success": False, "error": "Not supported"}, status=400)

    item = get_object_or_404(manager.get_queryset(), pk=item_id)
    try:
        display_order = int(request.POST.get("display_order", ""))
    except ValueError:
        display_order = -1
    if display_order < 0:
        return JsonResponse(
            {"success": False, "error": "Display order must be a non-negative number"},
            status=400,
        )

    item.display_order = display_order
    try:
        item.save(update_fields=["display_order", "updated_at"])
    except DatabaseError:
        return operation_failed("reorder", manager)

    return JsonResponse({"success": True, "display_order": item.display_order})


@admin_required(json=True)
@require_POST
def bulk_action(request: HttpRequest, manager: str):
    manager = get_manager(manager)
    action = request.POST.get("action")
    ids = request.POST.getlist("ids")

    if action not in BULK_ACTIONS:
        return JsonResponse({"success": False, "error": "Invalid action"}, status=400)
    if not ids:
        return JsonResponse({"success": False, "error": "No items selected"}, status=400)
    if action != "delete" and not manager.has_active_flag:
        return JsonResponse({"success": False, "error": "Not supported"}, status=400)

    queryset = manager.get_queryset().filter(pk__in=ids)
    try:
        if action == "delete":
            items = list(queryset)
            count = len(items)
            queryset.delete()
            for item in items:
                remove_files(item, manager.file_fields)
        else:
            count = queryset.update(is_active=(action == "activate"))
    except DatabaseError:
        return operation_failed(action, manager)

    log_admin_activity(
        request,
        f"bulk_{action}",
        manager.table_name,
        details={"ids": ids, "count": count},
    )
    past = {"delete": "Deleted", "activate": "Enabled", "deactivate": "Disabled"}[action]
    messages.success(request, f"{past} {count} item(s).")
    return JsonResponse({"success": True, "count": count})


# ===== IMPORT / EXPORT =====


@admin_required
@require_GET
def export_items(request: HttpRequest, manager: str, file_format: str):
    """Export a content table as JSON, CSV or Excel"""
    manager = get_manager(manager)
    response = write_export(manager, file_format)
    if response is None:
        return JsonResponse({"error": "Invalid format"}, status=400)

    log_admin_activity(
        request, "export", manager.table_name, details={"format": file_format}
    )
    return response


@admin_required(json=True)
@require_POST
def import_items(request: HttpRequest, manager: str):
    """Import rows from a CSV or Excel file"""
    manager = get_manager(manager)
    if not manager.importable:
        return JsonResponse(
            {"success": False, "error": "This content needs an upload per row"},
            status=400,
        )

    file = request.FILES.get("file")
    if file is None:
        return JsonResponse({"success": False, "error": "No file provided"}, status=400)

    df, error = read_file_to_dataframe(file)
    if error:
        return JsonResponse({"success": False, "error": error}, status=400)

    result = import_from_dataframe(manager, df)
    log_admin_activity(
        request,
        "import",
        manager.table_name,
        details={"imported": result["imported_count"]},
    )
    if result["imported_count"]:
        messages.success(request, f"Successfully imported {result['imported_count']} records.")
    if result["errors"]:
        messages.warning(request, f"Errors during import: {', '.join(result['errors'])}")
    return JsonResponse(result)
