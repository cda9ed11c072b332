from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from front_cms.models import PublishableModel


class CampusLifeContent(PublishableModel):
    """Intro copy and highlights for one campus-life page, keyed by its slug."""

    page_slug = models.SlugField(max_length=100, help_text="e.g. overview, sports, hostel")
    title = models.CharField(max_length=200)
    content = models.TextField(blank=True)
    meta_description = models.CharField(max_length=300, blank=True)
    hero_image = models.ImageField(upload_to="campus-life/", blank=True, null=True)
    features = models.JSONField(default=list, blank=True)
    highlights = models.JSONField(default=list, blank=True)
    gallery_images = models.JSONField(default=list, blank=True)
    display_order = models.PositiveIntegerField(default=0)

    def __str__(self):
        return f"{self.title} ({self.page_slug})"

    class Meta:
        db_table = "campus_life_content"
        ordering = ["display_order", "-created_at"]
        verbose_name = "Campus Life Content"
        verbose_name_plural = "Campus Life Content"


class CampusPage(PublishableModel):
    slug = models.SlugField(max_length=100, unique=True)
    title = models.CharField(max_length=200)
    content = models.TextField(blank=True)
    meta_description = models.CharField(max_length=300, blank=True)
    hero_image = models.ImageField(upload_to="campus-pages/", blank=True, null=True)
    display_order = models.PositiveIntegerField(default=0)

    def __str__(self):
        return self.title

    class Meta:
        db_table = "campus_pages"
        ordering = ["display_order", "title"]


class Club(PublishableModel):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    icon = models.CharField(max_length=50, blank=True)
    member_count = models.PositiveIntegerField(default=0)
    event_count = models.PositiveIntegerField(default=0)

    def __str__(self):
        return self.name

    class Meta:
        db_table = "clubs"
        ordering = ["-member_count", "name"]


class CampusEvent(PublishableModel):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    event_type = models.CharField(
        max_length=50, default="general", help_text="e.g. festival, cultural, technical"
    )
    venue = models.CharField(max_length=200, blank=True)
    organizer = models.CharField(max_length=200, blank=True)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField(blank=True, null=True)
    image = models.ImageField(upload_to="events/", blank=True, null=True)
    is_featured = models.BooleanField(default=False)
    registration_required = models.BooleanField(default=False)
    registration_url = models.URLField(blank=True)
    max_participants = models.PositiveIntegerField(blank=True, null=True)

    def __str__(self):
        return self.title

    class Meta:
        db_table = "campus_events"
        ordering = ["start_date"]


class StudentActivity(PublishableModel):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, default="general")
    coordinator_name = models.CharField(max_length=200, blank=True)
    coordinator_email = models.EmailField(blank=True)
    location = models.CharField(max_length=200, blank=True)
    meeting_schedule = models.CharField(max_length=200, blank=True)
    member_count = models.PositiveIntegerField(default=0)
    image = models.ImageField(upload_to="student-activities/", blank=True, null=True)
    achievements = models.JSONField(default=list, blank=True)

    def __str__(self):
        return self.name

    class Meta:
        db_table = "student_activities"
        ordering = ["name"]
        verbose_name_plural = "Student Activities"


class SportsFacility(PublishableModel):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    facility_type = models.CharField(max_length=100, default="outdoor")
    capacity = models.PositiveIntegerField(blank=True, null=True)
    operating_hours = models.CharField(max_length=200, blank=True)
    contact_person = models.CharField(max_length=200, blank=True)
    contact_email = models.EmailField(blank=True)
    booking_required = models.BooleanField(default=False)
    image = models.ImageField(upload_to="sports/", blank=True, null=True)

    def __str__(self):
        return self.name

    class Meta:
        db_table = "sports_facilities"
        ordering = ["name"]
        verbose_name_plural = "Sports Facilities"


class HostelInfo(PublishableModel):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    hostel_type = models.CharField(max_length=50, help_text="e.g. boys, girls")
    capacity = models.PositiveIntegerField(default=0)
    rooms_available = models.PositiveIntegerField(default=0)
    facilities = models.JSONField(default=list, blank=True)
    fee_structure = models.JSONField(
        default=dict, blank=True, help_text='e.g. {"single": 60000, "double": 45000}'
    )
    rules = models.TextField(blank=True)
    warden_name = models.CharField(max_length=200, blank=True)
    warden_contact = models.CharField(max_length=100, blank=True)
    image = models.ImageField(upload_to="hostels/", blank=True, null=True)

    def __str__(self):
        return self.name

    class Meta:
        db_table = "hostel_info"
        ordering = ["name"]
        verbose_name = "Hostel"
        verbose_name_plural = "Hostels"


class WellnessProgram(PublishableModel):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    program_type = models.CharField(max_length=100, default="fitness")
    instructor = models.CharField(max_length=200, blank=True)
    schedule = models.CharField(max_length=200, blank=True)
    location = models.CharField(max_length=200, blank=True)
    duration_minutes = models.PositiveIntegerField(blank=True, null=True)
    fee = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0"),
        validators=[MinValueValidator(Decimal("0"))],
    )
    max_participants = models.PositiveIntegerField(blank=True, null=True)
    registration_required = models.BooleanField(default=False)
    image = models.ImageField(upload_to="wellness/", blank=True, null=True)

    def __str__(self):
        return self.name

    class Meta:
        db_table = "wellness_programs"
        ordering = ["name"]


class StudentGovernance(PublishableModel):
    student_name = models.CharField(max_length=200)
    position = models.CharField(max_length=200)
    department = models.CharField(max_length=200, blank=True)
    year = models.CharField(max_length=20, blank=True)
    bio = models.TextField(blank=True)
    contact_email = models.EmailField(blank=True)
    photo = models.ImageField(upload_to="governance/", blank=True, null=True)
    responsibilities = models.JSONField(default=list, blank=True)
    term_start = models.DateField(blank=True, null=True)
    term_end = models.DateField(blank=True, null=True)

    def __str__(self):
        return f"{self.student_name} - {self.position}"

    class Meta:
        db_table = "student_governance"
        ordering = ["position"]
        verbose_name = "Student Governance Member"
        verbose_name_plural = "Student Governance"


class Publication(PublishableModel):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    publication_type = models.CharField(max_length=100, default="magazine")
    author = models.CharField(max_length=200, blank=True)
    department = models.CharField(max_length=200, blank=True)
    issue_number = models.CharField(max_length=50, blank=True)
    publication_date = models.DateField(blank=True, null=True)
    cover_image = models.ImageField(upload_to="publications/covers/", blank=True, null=True)
    file = models.FileField(upload_to="publications/files/", blank=True, null=True)
    download_count = models.PositiveIntegerField(default=0)
    is_featured = models.BooleanField(default=False)

    def __str__(self):
        return self.title

    class Meta:
        db_table = "publications"
        ordering = ["-publication_date", "-created_at"]


class Amenity(PublishableModel):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, default="other")
    location = models.CharField(max_length=200, blank=True)
    operating_hours = models.CharField(max_length=200, blank=True)
    contact_person = models.CharField(max_length=200, blank=True)
    contact_email = models.EmailField(blank=True)
    contact_phone = models.CharField(max_length=50, blank=True)
    booking_required = models.BooleanField(default=False)
    features = models.JSONField(default=list, blank=True)
    image = models.ImageField(upload_to="amenities/", blank=True, null=True)

    def __str__(self):
        return self.name

    class Meta:
        db_table = "amenities"
        ordering = ["category", "name"]
        verbose_name_plural = "Amenities"


class WomenForumEvent(PublishableModel):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    event_type = models.CharField(max_length=100, default="workshop")
    event_date = models.DateTimeField(blank=True, null=True)
    venue = models.CharField(max_length=200, blank=True)
    speaker_name = models.CharField(max_length=200, blank=True)
    speaker_designation = models.CharField(max_length=200, blank=True)
    registration_link = models.URLField(blank=True)
    max_participants = models.PositiveIntegerField(blank=True, null=True)
    is_featured = models.BooleanField(default=False)
    image = models.ImageField(upload_to="womens-forum/", blank=True, null=True)
    gallery_images = models.JSONField(default=list, blank=True)
    achievements = models.JSONField(default=list, blank=True)

    def __str__(self):
        return self.title

    class Meta:
        db_table = "women_forum_events"
        ordering = ["-event_date"]
        verbose_name = "Women's Forum Event"
        verbose_name_plural = "Women's Forum Events"


class SocialInitiative(PublishableModel):
    class Status(models.TextChoices):
        PLANNED = "planned", "Planned"
        ONGOING = "ongoing", "Ongoing"
        COMPLETED = "completed", "Completed"

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, default="community")
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.PLANNED
    )
    organizer = models.CharField(max_length=200, blank=True)
    start_date = models.DateField(blank=True, null=True)
    end_date = models.DateField(blank=True, null=True)
    participants_count = models.PositiveIntegerField(default=0)
    impact_metrics = models.TextField(blank=True)
    is_featured = models.BooleanField(default=False)
    image = models.ImageField(upload_to="social-initiatives/", blank=True, null=True)
    gallery_images = models.JSONField(default=list, blank=True)

    def __str__(self):
        return self.title

    class Meta:
        db_table = "social_initiatives"
        ordering = ["-start_date"]


class IncubationCenter(PublishableModel):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    center_type = models.CharField(max_length=100, default="incubator")
    establishment_date = models.DateField(blank=True, null=True)
    current_startups = models.PositiveIntegerField(default=0)
    grant_amount = models.DecimalField(
        max_digits=14, decimal_places=2, blank=True, null=True
    )
    grant_currency = models.CharField(max_length=10, default="INR")
    total_funding_raised = models.DecimalField(
        max_digits=14, decimal_places=2, blank=True, null=True
    )
    website_url = models.URLField(blank=True)
    logo = models.ImageField(upload_to="incubation/logos/", blank=True, null=True)
    image = models.ImageField(upload_to="incubation/", blank=True, null=True)
    features = models.JSONField(default=list, blank=True)
    success_stories = models.JSONField(default=list, blank=True)
    gallery_images = models.JSONField(default=list, blank=True)

    def __str__(self):
        return self.name

    class Meta:
        db_table = "incubation_centers"
        ordering = ["name"]
