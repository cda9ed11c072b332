from front_cms.registry import ContentManager, register

from .forms import NewsAnnouncementForm, NoticeForm
from .models import NewsAnnouncement, Notice

register(
    ContentManager(
        "notices",
        Notice,
        NoticeForm,
        title="Notices",
        group="Content",
        description="Notice board entries on the home page",
        search_fields=["title", "description"],
        list_display=["title", "category", "priority", "is_new"],
        nav_order=10,
    )
)

register(
    ContentManager(
        "news",
        NewsAnnouncement,
        NewsAnnouncementForm,
        title="News & Announcements",
        group="Content",
        search_fields=["title", "summary", "author", "category"],
        list_display=["title", "category", "publish_date", "is_featured", "is_breaking"],
        nav_order=20,
    )
)
