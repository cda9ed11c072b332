from django import forms

from front_cms.forms import CmsModelForm, LinesField
from .models import NewsAnnouncement, Notice


class NoticeForm(CmsModelForm):
    class Meta:
        model = Notice
        fields = ["title", "description", "category", "priority", "is_new", "is_active"]
        widgets = {
            "title": forms.TextInput(attrs={"placeholder": "Notice title"}),
            "description": forms.Textarea(attrs={"rows": 4}),
        }


class NewsAnnouncementForm(CmsModelForm):
    tags = LinesField(help_text="One tag per line")

    class Meta:
        model = NewsAnnouncement
        fields = [
            "title",
            "summary",
            "content",
            "category",
            "author",
            "image",
            "external_url",
            "tags",
            "publish_date",
            "expiry_date",
            "is_featured",
            "is_breaking",
            "is_active",
        ]
        widgets = {
            "summary": forms.Textarea(attrs={"rows": 2}),
            "content": forms.Textarea(attrs={"rows": 6}),
        }

    def clean(self):
        cleaned_data = super().clean()
        publish_date = cleaned_data.get("publish_date")
        expiry_date = cleaned_data.get("expiry_date")
        if publish_date and expiry_date and expiry_date <= publish_date:
            self.add_error("expiry_date", "Expiry date must be after the publish date.")
        return cleaned_data
