from django import forms

from front_cms.forms import CmsModelForm
from .models import StudentSubmission


class SubmissionForm(CmsModelForm):
    class Meta:
        model = StudentSubmission
        fields = ["title", "description", "category", "department", "image", "file"]
        widgets = {
            "title": forms.TextInput(attrs={"placeholder": "Give your work a title"}),
            "description": forms.Textarea(attrs={"rows": 4}),
        }


class ReviewForm(forms.Form):
    ACTIONS = [("approve", "Approve"), ("reject", "Reject")]

    action = forms.ChoiceField(choices=ACTIONS)
    comments = forms.CharField(
        required=False,
        widget=forms.Textarea(attrs={"class": "form-control", "rows": 3}),
    )
    is_featured = forms.BooleanField(required=False)
