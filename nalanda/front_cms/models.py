from django.db import models


class PublishableModel(models.Model):
    """Columns every website content table carries."""

    is_active = models.BooleanField(default=True, help_text="Show this on the website")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class HeroImage(PublishableModel):
    title = models.CharField(max_length=200, help_text="Display title for the slide")
    description = models.TextField(blank=True)
    image = models.ImageField(
        upload_to="hero-images/", help_text="Slide image (recommended: 1920x800px)"
    )
    display_order = models.PositiveIntegerField(
        default=0, help_text="Order of display (lower numbers appear first)"
    )

    class Meta:
        db_table = "hero_images"
        ordering = ["display_order", "-created_at"]
        verbose_name = "Hero Image"
        verbose_name_plural = "Hero Images"

    def __str__(self):
        return self.title


class PhotoGallery(PublishableModel):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    image = models.ImageField(upload_to="photo-gallery/")
    alt_text = models.CharField(max_length=300, blank=True)
    caption = models.CharField(max_length=300, blank=True)
    category = models.CharField(max_length=100, default="campus")
    subcategory = models.CharField(max_length=100, blank=True)
    photographer = models.CharField(max_length=200, blank=True)
    photo_date = models.DateField(blank=True, null=True)
    is_featured = models.BooleanField(default=False)
    display_order = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "photo_galleries"
        ordering = ["display_order", "-created_at"]
        verbose_name = "Gallery Photo"
        verbose_name_plural = "Photo Gallery"

    def __str__(self):
        return f"{self.title} ({self.category})"


class CampusStat(PublishableModel):
    stat_name = models.CharField(max_length=100, help_text="e.g. Students Enrolled")
    stat_value = models.CharField(max_length=50, help_text="e.g. 15,000+")
    description = models.CharField(max_length=300, blank=True)
    icon = models.CharField(max_length=50, blank=True)
    display_order = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "campus_stats"
        ordering = ["display_order"]
        verbose_name = "Campus Statistic"
        verbose_name_plural = "Campus Statistics"

    def __str__(self):
        return f"{self.stat_name}: {self.stat_value}"


class Magazine(PublishableModel):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    cover_image = models.ImageField(upload_to="magazines/covers/", blank=True, null=True)
    file = models.FileField(upload_to="magazines/files/", blank=True, null=True)
    issue_date = models.DateField(blank=True, null=True)

    class Meta:
        db_table = "magazines"
        ordering = ["-issue_date", "-created_at"]

    def __str__(self):
        return self.title


class CreativeWork(PublishableModel):
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100)
    author_name = models.CharField(max_length=200)
    author_department = models.CharField(max_length=200, blank=True)
    image = models.ImageField(upload_to="creative-works/", blank=True, null=True)
    content_url = models.URLField(blank=True)
    is_featured = models.BooleanField(default=False)

    class Meta:
        db_table = "creative_works"
        ordering = ["-is_featured", "-created_at"]

    def __str__(self):
        return f"{self.title} by {self.author_name}"
