from django import forms

from front_cms.forms import CmsModelForm, LinesField
from .models import (
    Amenity,
    CampusEvent,
    CampusLifeContent,
    CampusPage,
    Club,
    HostelInfo,
    IncubationCenter,
    Publication,
    SocialInitiative,
    SportsFacility,
    StudentActivity,
    StudentGovernance,
    WellnessProgram,
    WomenForumEvent,
)


class CampusLifeContentForm(CmsModelForm):
    features = LinesField()
    highlights = LinesField()
    gallery_images = LinesField(help_text="One image URL per line")

    class Meta:
        model = CampusLifeContent
        fields = [
            "page_slug",
            "title",
            "content",
            "meta_description",
            "hero_image",
            "features",
            "highlights",
            "gallery_images",
            "display_order",
            "is_active",
        ]
        widgets = {
            "content": forms.Textarea(attrs={"rows": 6}),
        }


class CampusPageForm(CmsModelForm):
    class Meta:
        model = CampusPage
        fields = [
            "slug",
            "title",
            "content",
            "meta_description",
            "hero_image",
            "display_order",
            "is_active",
        ]
        widgets = {
            "content": forms.Textarea(attrs={"rows": 8}),
        }


class ClubForm(CmsModelForm):
    class Meta:
        model = Club
        fields = ["name", "description", "icon", "member_count", "event_count", "is_active"]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class CampusEventForm(CmsModelForm):
    class Meta:
        model = CampusEvent
        fields = [
            "title",
            "description",
            "event_type",
            "venue",
            "organizer",
            "start_date",
            "end_date",
            "image",
            "is_featured",
            "registration_required",
            "registration_url",
            "max_participants",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 4}),
        }

    def clean(self):
        cleaned_data = super().clean()
        start, end = cleaned_data.get("start_date"), cleaned_data.get("end_date")
        if start and end and end < start:
            self.add_error("end_date", "End date cannot be before the start date.")
        if cleaned_data.get("registration_required") and not cleaned_data.get(
            "registration_url"
        ):
            self.add_error("registration_url", "Add a registration link.")
        return cleaned_data


class StudentActivityForm(CmsModelForm):
    achievements = LinesField()

    class Meta:
        model = StudentActivity
        fields = [
            "name",
            "description",
            "category",
            "coordinator_name",
            "coordinator_email",
            "location",
            "meeting_schedule",
            "member_count",
            "image",
            "achievements",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class SportsFacilityForm(CmsModelForm):
    class Meta:
        model = SportsFacility
        fields = [
            "name",
            "description",
            "facility_type",
            "capacity",
            "operating_hours",
            "contact_person",
            "contact_email",
            "booking_required",
            "image",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class HostelInfoForm(CmsModelForm):
    facilities = LinesField()

    class Meta:
        model = HostelInfo
        fields = [
            "name",
            "description",
            "hostel_type",
            "capacity",
            "rooms_available",
            "facilities",
            "fee_structure",
            "rules",
            "warden_name",
            "warden_contact",
            "image",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
            "fee_structure": forms.Textarea(attrs={"rows": 3}),
            "rules": forms.Textarea(attrs={"rows": 3}),
        }

    def clean_fee_structure(self):
        value = self.cleaned_data.get("fee_structure")
        if value in (None, ""):
            return {}
        if not isinstance(value, dict):
            raise forms.ValidationError("Fee structure must be a JSON object.")
        return value

    def clean(self):
        cleaned_data = super().clean()
        capacity = cleaned_data.get("capacity")
        rooms = cleaned_data.get("rooms_available")
        if capacity is not None and rooms is not None and rooms > capacity:
            self.add_error("rooms_available", "Available rooms cannot exceed capacity.")
        return cleaned_data


class WellnessProgramForm(CmsModelForm):
    class Meta:
        model = WellnessProgram
        fields = [
            "name",
            "description",
            "program_type",
            "instructor",
            "schedule",
            "location",
            "duration_minutes",
            "fee",
            "max_participants",
            "registration_required",
            "image",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class StudentGovernanceForm(CmsModelForm):
    responsibilities = LinesField()

    class Meta:
        model = StudentGovernance
        fields = [
            "student_name",
            "position",
            "department",
            "year",
            "bio",
            "contact_email",
            "photo",
            "responsibilities",
            "term_start",
            "term_end",
            "is_active",
        ]
        widgets = {
            "bio": forms.Textarea(attrs={"rows": 3}),
        }


class PublicationForm(CmsModelForm):
    class Meta:
        model = Publication
        fields = [
            "title",
            "description",
            "publication_type",
            "author",
            "department",
            "issue_number",
            "publication_date",
            "cover_image",
            "file",
            "is_featured",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class AmenityForm(CmsModelForm):
    features = LinesField()

    class Meta:
        model = Amenity
        fields = [
            "name",
            "description",
            "category",
            "location",
            "operating_hours",
            "contact_person",
            "contact_email",
            "contact_phone",
            "booking_required",
            "features",
            "image",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class WomenForumEventForm(CmsModelForm):
    gallery_images = LinesField(help_text="One image URL per line")
    achievements = LinesField()

    class Meta:
        model = WomenForumEvent
        fields = [
            "title",
            "description",
            "event_type",
            "event_date",
            "venue",
            "speaker_name",
            "speaker_designation",
            "registration_link",
            "max_participants",
            "is_featured",
            "image",
            "gallery_images",
            "achievements",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }


class SocialInitiativeForm(CmsModelForm):
    gallery_images = LinesField(help_text="One image URL per line")

    class Meta:
        model = SocialInitiative
        fields = [
            "title",
            "description",
            "category",
            "status",
            "organizer",
            "start_date",
            "end_date",
            "participants_count",
            "impact_metrics",
            "is_featured",
            "image",
            "gallery_images",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
            "impact_metrics": forms.Textarea(attrs={"rows": 2}),
        }


class IncubationCenterForm(CmsModelForm):
    features = LinesField()
    success_stories = LinesField()
    gallery_images = LinesField(help_text="One image URL per line")

    class Meta:
        model = IncubationCenter
        fields = [
            "name",
            "description",
            "center_type",
            "establishment_date",
            "current_startups",
            "grant_amount",
            "grant_currency",
            "total_funding_raised",
            "website_url",
            "logo",
            "image",
            "features",
            "success_stories",
            "gallery_images",
            "is_active",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 3}),
        }
