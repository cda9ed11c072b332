from .forms import (
    CampusStatForm,
    CreativeWorkForm,
    HeroImageForm,
    MagazineForm,
    PhotoGalleryForm,
)
from .models import CampusStat, CreativeWork, HeroImage, Magazine, PhotoGallery
from .registry import ContentManager, register

register(
    ContentManager(
        "campus-stats",
        CampusStat,
        CampusStatForm,
        title="Campus Statistics",
        group="Content",
        description="Figures shown in the home page statistics band",
        search_fields=["stat_name", "stat_value"],
        list_display=["stat_name", "stat_value", "display_order"],
        nav_order=40,
    )
)

register(
    ContentManager(
        "hero-images",
        HeroImage,
        HeroImageForm,
        title="Hero Images",
        group="Media",
        description="Slides in the home page carousel",
        search_fields=["title", "description"],
        list_display=["title", "display_order"],
        nav_order=10,
    )
)

register(
    ContentManager(
        "photo-gallery",
        PhotoGallery,
        PhotoGalleryForm,
        title="Photo Gallery",
        group="Media",
        search_fields=["title", "category", "subcategory", "photographer"],
        list_display=["title", "category", "subcategory", "display_order"],
        nav_order=20,
    )
)

register(
    ContentManager(
        "magazines",
        Magazine,
        MagazineForm,
        title="Magazines",
        group="Media",
        search_fields=["title", "description"],
        list_display=["title", "issue_date"],
        nav_order=30,
    )
)

register(
    ContentManager(
        "creative-gallery",
        CreativeWork,
        CreativeWorkForm,
        title="Creative Gallery",
        group="Media",
        search_fields=["title", "author_name", "category"],
        list_display=["title", "author_name", "category", "is_featured"],
        nav_order=40,
    )
)
