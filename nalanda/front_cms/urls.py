from django.urls import path
from . import views

app_name = "front_cms"

urlpatterns = [
    # Listing
    path("<slug:manager>/", views.manage, name="manage"),
    # CRUD Operations
    path("<slug:manager>/create/", views.create_item, name="create"),
    path("<slug:manager>/<int:item_id>/update/", views.update_item, name="update"),
    path("<slug:manager>/<int:item_id>/delete/", views.delete_item, name="delete"),
    path("<slug:manager>/<int:item_id>/toggle/", views.toggle_status, name="toggle"),
    path("<slug:manager>/<int:item_id>/reorder/", views.reorder_item, name="reorder"),
    path("<slug:manager>/bulk/", views.bulk_action, name="bulk"),
    # Import / export
    path(
        "<slug:manager>/export/<str:file_format>/",
        views.export_items,
        name="export",
    ),
    path("<slug:manager>/import/", views.import_items, name="import"),
]
