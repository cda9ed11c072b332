import json

from django import forms
from django.conf import settings
from django.core.files.uploadedfile import UploadedFile

from .models import CampusStat, CreativeWork, HeroImage, Magazine, PhotoGallery


class LinesField(forms.CharField):
    """Edits a list of strings as a textarea, one item per line."""

    widget = forms.Textarea(attrs={"rows": 3, "placeholder": "One item per line"})

    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        super().__init__(**kwargs)

    def prepare_value(self, value):
        if isinstance(value, (list, tuple)):
            return "\n".join(str(item) for item in value)
        return value

    def to_python(self, value):
        value = self.from_json_array(value)
        if isinstance(value, (list, tuple)):
            return [str(item).strip() for item in value if str(item).strip()]
        value = super().to_python(value)
        return [line.strip() for line in value.splitlines() if line.strip()]

    @staticmethod
    def from_json_array(value):
        """Spreadsheet exports store lists as JSON text"""
        if isinstance(value, str) and value.strip().startswith("["):
            try:
                parsed = json.loads(value)
            except ValueError:
                return value
            if isinstance(parsed, list):
                return parsed
        return value


class CmsModelForm(forms.ModelForm):
    """Base form for every content manager.

    Styles widgets for the dashboard and rejects uploads over the configured size.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            widget = field.widget
            if isinstance(widget, forms.CheckboxInput):
                widget.attrs.setdefault("class", "form-check-input")
                continue
            widget.attrs.setdefault("class", "form-control")
            if isinstance(field, forms.DateTimeField):
                widget.input_type = "datetime-local"
                widget.format = "%Y-%m-%dT%H:%M"
            elif isinstance(field, forms.DateField):
                widget.input_type = "date"
                widget.format = "%Y-%m-%d"

    def clean(self):
        cleaned_data = super().clean()
        max_mb = settings.MAX_UPLOAD_SIZE_MB
        for name, value in list(cleaned_data.items()):
            if isinstance(value, UploadedFile) and value.size > max_mb * 1024 * 1024:
                self.add_error(name, f"File size must be less than {max_mb}MB")
        return cleaned_data


class HeroImageForm(CmsModelForm):
    class Meta:
        model = HeroImage
        fields = ["title", "description", "image", "display_order", "is_active"]
        widgets = {
            "title": forms.TextInput(attrs={"placeholder": "Enter slide title"}),
            "description": forms.Textarea(attrs={"rows": 2}),
            "display_order": forms.NumberInput(attrs={"min": "0"}),
        }


class PhotoGalleryForm(CmsModelForm):
    class Meta:
        model = PhotoGallery
        fields = [
            "title",
            "description",
            "image",
            "alt_text",
            "caption",
            "category",
            "subcategory",
            "photographer",
            "photo_date",
            "is_featured",
            "display_order",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class CampusStatForm(CmsModelForm):
    class Meta:
        model = CampusStat
        fields = [
            "stat_name",
            "stat_value",
            "description",
            "icon",
            "display_order",
            "is_active",
        ]


class MagazineForm(CmsModelForm):
    class Meta:
        model = Magazine
        fields = [
            "title",
            "description",
            "cover_image",
            "file",
            "issue_date",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class CreativeWorkForm(CmsModelForm):
    class Meta:
        model = CreativeWork
        fields = [
            "title",
            "description",
            "category",
            "author_name",
            "author_department",
            "image",
            "content_url",
            "is_featured",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }
