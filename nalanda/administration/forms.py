import json

from django import forms
from django.contrib.auth.forms import UserCreationForm
from django.contrib.auth.models import User

from front_cms.forms import LinesField
from .models import AdminRole, Profile


class SignInForm(forms.Form):
    email = forms.EmailField(
        widget=forms.EmailInput(
            attrs={"class": "form-control", "placeholder": "admin@nalanda.edu"}
        )
    )
    password = forms.CharField(
        widget=forms.PasswordInput(attrs={"class": "form-control"})
    )


class SignUpForm(UserCreationForm):
    """Public registration. Admin is never offered as a role."""

    SIGNUP_ROLES = [
        (Profile.Role.STUDENT, "Student"),
        (Profile.Role.FACULTY, "Faculty"),
        (Profile.Role.ALUMNI, "Alumni"),
    ]

    email = forms.EmailField(required=True)
    full_name = forms.CharField(max_length=200, required=True)
    role = forms.ChoiceField(choices=SIGNUP_ROLES, initial=Profile.Role.STUDENT)

    class Meta:
        model = User
        fields = ("email",)

    def clean_email(self):
        email = self.cleaned_data["email"].lower()
        if User.objects.filter(username__iexact=email).exists():
            raise forms.ValidationError("An account with this email already exists.")
        return email

    def save(self, commit=True):
        user = super().save(commit=False)
        user.username = self.cleaned_data["email"]
        user.email = self.cleaned_data["email"]
        first, _, last = self.cleaned_data["full_name"].partition(" ")
        user.first_name = first[:150]
        user.last_name = last[:150]
        if commit:
            user.save()
            profile = user.profile
            profile.full_name = self.cleaned_data["full_name"]
            profile.role = self.cleaned_data["role"]
            profile.role_type = self.cleaned_data["role"]
            profile.save()
        return user


class ProfileForm(forms.ModelForm):
    """Admin-side profile editor used by the users manager."""

    research_areas = LinesField()

    class Meta:
        model = Profile
        fields = [
            "full_name",
            "email",
            "role",
            "role_type",
            "department",
            "designation",
            "qualifications",
            "research_areas",
            "photo",
        ]
        widgets = {
            "full_name": forms.TextInput(attrs={"class": "form-control"}),
            "email": forms.EmailInput(attrs={"class": "form-control"}),
            "role": forms.Select(attrs={"class": "form-control"}),
            "role_type": forms.TextInput(attrs={"class": "form-control"}),
            "department": forms.TextInput(attrs={"class": "form-control"}),
            "designation": forms.TextInput(attrs={"class": "form-control"}),
            "qualifications": forms.Textarea(attrs={"class": "form-control", "rows": 2}),
        }


class OwnProfileForm(forms.ModelForm):
    """What a signed-in visitor may change about themselves."""

    research_areas = LinesField()

    class Meta:
        model = Profile
        fields = [
            "full_name",
            "department",
            "designation",
            "qualifications",
            "research_areas",
            "branch",
            "semester",
            "enrollment_year",
            "graduation_year",
            "current_position",
            "photo",
        ]
        widgets = {
            "qualifications": forms.Textarea(attrs={"rows": 2}),
        }


class GrantRoleForm(forms.ModelForm):
    permissions = forms.CharField(
        required=False,
        initial="{}",
        widget=forms.Textarea(attrs={"class": "form-control", "rows": 3}),
        help_text="JSON object of extra permissions",
    )

    class Meta:
        model = AdminRole
        fields = ["user", "role_level", "expires_at", "permissions"]
        widgets = {
            "user": forms.Select(attrs={"class": "form-control"}),
            "role_level": forms.Select(attrs={"class": "form-control"}),
            "expires_at": forms.DateTimeInput(
                attrs={"class": "form-control", "type": "datetime-local"}
            ),
        }

    def clean_permissions(self):
        raw = self.cleaned_data.get("permissions") or "{}"
        try:
            value = json.loads(raw)
        except ValueError:
            raise forms.ValidationError("Permissions must be valid JSON.")
        if not isinstance(value, dict):
            raise forms.ValidationError("Permissions must be a JSON object.")
        return value

    def clean(self):
        cleaned_data = super().clean()
        user = cleaned_data.get("user")
        role_level = cleaned_data.get("role_level")
        if (
            user
            and role_level
            and AdminRole.objects.filter(user=user, role_level=role_level).exists()
        ):
            raise forms.ValidationError("User already has this role level")
        return cleaned_data
