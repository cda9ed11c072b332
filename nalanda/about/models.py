from django.db import models

from front_cms.models import PublishableModel


class AboutPage(PublishableModel):
    class PageType(models.TextChoices):
        ABOUT = "about", "About Us"
        VISION_MISSION = "vision-mission", "Vision & Mission"
        HISTORY = "history", "History"
        GOVERNANCE = "governance", "Governance"

    page_type = models.CharField(max_length=30, choices=PageType.choices)
    title = models.CharField(max_length=200)
    content = models.TextField()
    meta_description = models.CharField(max_length=300, blank=True)
    image = models.ImageField(upload_to="about/", blank=True, null=True)
    display_order = models.PositiveIntegerField(default=0)

    def __str__(self):
        return f"{self.title} ({self.get_page_type_display()})"

    class Meta:
        db_table = "about_pages"
        ordering = ["display_order", "-created_at"]


class AwardAchievement(PublishableModel):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, default="institutional")
    award_date = models.DateField(blank=True, null=True)
    image = models.ImageField(upload_to="awards/", blank=True, null=True)
    certificate = models.FileField(upload_to="awards/certificates/", blank=True, null=True)
    display_order = models.PositiveIntegerField(default=0)

    def __str__(self):
        return self.title

    class Meta:
        db_table = "awards_achievements"
        ordering = ["display_order", "-award_date"]
        verbose_name = "Award & Achievement"
        verbose_name_plural = "Awards & Achievements"


class LeadershipMessage(PublishableModel):
    class Position(models.TextChoices):
        CHAIRMAN = "chairman", "Chairman"
        VICE_CHAIRMAN = "vice_chairman", "Vice Chairman"
        DIRECTOR = "director", "Director"

    position = models.CharField(max_length=20, choices=Position.choices)
    name = models.CharField(max_length=200)
    designation = models.CharField(max_length=200, blank=True)
    qualifications = models.TextField(blank=True)
    message = models.TextField()
    photo = models.ImageField(upload_to="leadership/", blank=True, null=True)

    def __str__(self):
        return f"{self.get_position_display()}: {self.name}"

    class Meta:
        db_table = "leadership_messages"
        ordering = ["position", "-updated_at"]


class AccreditationInfo(PublishableModel):
    class AccreditationType(models.TextChoices):
        NAAC = "naac", "NAAC"
        NBA = "nba", "NBA"
        SIRO = "siro", "SIRO"
        OTHER = "other", "Other"

    accreditation_type = models.CharField(
        max_length=20, choices=AccreditationType.choices
    )
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    grade_rating = models.CharField(max_length=50, blank=True, help_text="e.g. A++")
    validity_period = models.CharField(max_length=100, blank=True)
    benefits = models.TextField(blank=True)
    certificate = models.FileField(
        upload_to="accreditation/", blank=True, null=True
    )

    def __str__(self):
        return f"{self.get_accreditation_type_display()}: {self.title}"

    class Meta:
        db_table = "accreditation_info"
        ordering = ["accreditation_type", "-created_at"]
        verbose_name = "Accreditation"
        verbose_name_plural = "Accreditation"


class ContactInfo(PublishableModel):
    office_name = models.CharField(max_length=200)
    contact_person = models.CharField(max_length=200, blank=True)
    designation = models.CharField(max_length=200, blank=True)
    department = models.CharField(max_length=200, blank=True)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=50, blank=True)
    address = models.TextField(blank=True)
    office_hours = models.CharField(max_length=200, blank=True)
    location_map_url = models.URLField(blank=True, max_length=500)
    image = models.ImageField(upload_to="contacts/", blank=True, null=True)
    display_order = models.PositiveIntegerField(default=0)

    def __str__(self):
        return self.office_name

    class Meta:
        db_table = "contact_info"
        ordering = ["display_order", "office_name"]
        verbose_name = "Contact"
        verbose_name_plural = "Contact Information"


class OfficeLocation(PublishableModel):
    name = models.CharField(max_length=200)
    building = models.CharField(max_length=200, blank=True)
    floor = models.CharField(max_length=50, blank=True)
    room_number = models.CharField(max_length=50, blank=True)
    address = models.TextField(blank=True)
    landmark = models.CharField(max_length=200, blank=True)
    map_coordinates = models.CharField(
        max_length=100, blank=True, help_text="latitude,longitude"
    )
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=50, blank=True)
    office_hours = models.CharField(max_length=200, blank=True)
    is_main_office = models.BooleanField(default=False)
    image = models.ImageField(upload_to="office-locations/", blank=True, null=True)

    def __str__(self):
        return self.name

    class Meta:
        db_table = "office_locations"
        ordering = ["-is_main_office", "name"]
