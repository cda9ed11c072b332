"""
Content manager registry.

Each website table gets one ``ContentManager`` describing how the admin
dashboard lists, searches, edits and exports it. Apps register their
managers in a ``managers.py`` module, collected when the app registry is ready.
"""

from django.db import models
from django.http import Http404

ADMIN_GROUPS = [
    "Dashboard",
    "Content",
    "Media",
    "Academic Management",
    "Academic Content",
    "Campus Life",
    "About Us",
    "Management",
]

_registry = {}


class ContentManager:
    paginate_by = 20

    def __init__(
        self,
        slug,
        model,
        form_class,
        *,
        title,
        group,
        description="",
        ordering=None,
        search_fields=(),
        list_display=(),
        queryset_filter=None,
        nav_order=0,
    ):
        if group not in ADMIN_GROUPS:
            raise ValueError(f"Unknown admin group {group!r}")
        self.slug = slug
        self.model = model
        self.form_class = form_class
        self.title = title
        self.group = group
        self.description = description
        self.ordering = list(ordering or model._meta.ordering or ["-created_at"])
        self.search_fields = list(search_fields)
        self.list_display = list(list_display)
        self.queryset_filter = queryset_filter
        self.nav_order = nav_order

    def __repr__(self):
        return f"<ContentManager {self.slug}: {self.model.__name__}>"

    @property
    def verbose_name(self):
        return self.model._meta.verbose_name

    @property
    def table_name(self):
        return self.model._meta.db_table

    @property
    def has_display_order(self):
        return any(f.name == "display_order" for f in self.model._meta.fields)

    @property
    def has_active_flag(self):
        return any(f.name == "is_active" for f in self.model._meta.fields)

    @property
    def file_fields(self):
        return [
            f.name for f in self.model._meta.fields if isinstance(f, models.FileField)
        ]

    @property
    def importable(self):
        """Rows can be imported from a spreadsheet unless an upload is mandatory."""
        form_fields = self.form_class.base_fields
        return not any(
            form_fields[name].required
            for name in self.file_fields
            if name in form_fields
        )

    def get_queryset(self):
        queryset = self.model.objects.all()
        if self.queryset_filter is not None:
            queryset = queryset.filter(self.queryset_filter)
        return queryset.order_by(*self.ordering)

    def search(self, queryset, term):
        if not term or not self.search_fields:
            return queryset
        condition = models.Q()
        for field in self.search_fields:
            condition |= models.Q(**{f"{field}__icontains": term})
        return queryset.filter(condition)

    def columns(self):
        return [
            self.model._meta.get_field(name).verbose_name.title()
            for name in self.list_display
        ]

    def row(self, obj):
        values = []
        for name in self.list_display:
            display = getattr(obj, f"get_{name}_display", None)
            values.append(display() if display else getattr(obj, name))
        return values


def register(manager):
    if manager.slug in _registry:
        raise ValueError(f"A content manager is already registered as {manager.slug!r}")
    _registry[manager.slug] = manager
    return manager


def get_manager(slug):
    try:
        return _registry[slug]
    except KeyError:
        raise Http404(f"No content manager named {slug!r}")


def all_managers():
    return sorted(
        _registry.values(),
        key=lambda m: (ADMIN_GROUPS.index(m.group), m.nav_order, m.title),
    )


def manager_for_model(model):
    return [m for m in _registry.values() if m.model is model]
