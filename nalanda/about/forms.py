from django import forms

from front_cms.forms import CmsModelForm
from .models import (
    AboutPage,
    AccreditationInfo,
    AwardAchievement,
    ContactInfo,
    LeadershipMessage,
    OfficeLocation,
)


class AboutPageForm(CmsModelForm):
    class Meta:
        model = AboutPage
        fields = [
            "page_type",
            "title",
            "content",
            "meta_description",
            "image",
            "display_order",
            "is_active",
        ]
        widgets = {
            "content": forms.Textarea(attrs={"rows": 10}),
        }


class AwardAchievementForm(CmsModelForm):
    class Meta:
        model = AwardAchievement
        fields = [
            "title",
            "description",
            "category",
            "award_date",
            "image",
            "certificate",
            "display_order",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class LeadershipMessageForm(CmsModelForm):
    class Meta:
        model = LeadershipMessage
        fields = [
            "position",
            "name",
            "designation",
            "qualifications",
            "message",
            "photo",
            "is_active",
        ]
        widgets = {
            "qualifications": forms.Textarea(attrs={"rows": 2}),
            "message": forms.Textarea(attrs={"rows": 8}),
        }


class AccreditationInfoForm(CmsModelForm):
    class Meta:
        model = AccreditationInfo
        fields = [
            "accreditation_type",
            "title",
            "description",
            "grade_rating",
            "validity_period",
            "benefits",
            "certificate",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 4}),
            "benefits": forms.Textarea(attrs={"rows": 3}),
        }


class ContactInfoForm(CmsModelForm):
    class Meta:
        model = ContactInfo
        fields = [
            "office_name",
            "contact_person",
            "designation",
            "department",
            "email",
            "phone",
            "address",
            "office_hours",
            "location_map_url",
            "image",
            "display_order",
            "is_active",
        ]
        widgets = {
            "address": forms.Textarea(attrs={"rows": 2}),
        }


class OfficeLocationForm(CmsModelForm):
    class Meta:
        model = OfficeLocation
        fields = [
            "name",
            "building",
            "floor",
            "room_number",
            "address",
            "landmark",
            "map_coordinates",
            "email",
            "phone",
            "office_hours",
            "is_main_office",
            "image",
            "is_active",
        ]
        widgets = {
            "address": forms.Textarea(attrs={"rows": 2}),
        }

    def clean_map_coordinates(self):
        value = self.cleaned_data["map_coordinates"].strip()
        if not value:
            return value
        try:
            lat, lng = (float(part) for part in value.split(","))
        except ValueError:
            raise forms.ValidationError("Use the form latitude,longitude")
        if not (-90 <= lat <= 90 and -180 <= lng <= 180):
            raise forms.ValidationError("Coordinates are out of range.")
        return f"{lat},{lng}"
