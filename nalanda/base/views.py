import logging

from django.core.paginator import Paginator
from django.db.models import F, Q
from django.http import Http404, HttpRequest
from django.shortcuts import get_object_or_404, redirect, render
from django.utils import timezone
from django.views.decorators.http import require_GET

from about.models import (
    AboutPage,
    AccreditationInfo,
    AwardAchievement,
    ContactInfo,
    LeadershipMessage,
    OfficeLocation,
)
from academics.models import (
    AcademicDownload,
    AcademicPage,
    AcademicService,
    Department,
    FacultyDepartment,
    FeeStructure,
    Scholarship,
    Timetable,
    Topper,
)
from campus_life.models import (
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
from front_cms.models import CampusStat, CreativeWork, HeroImage, Magazine, PhotoGallery
from notices.models import NewsAnnouncement, Notice
from students.models import StudentSubmission

logger = logging.getLogger(__name__)


def active(model):
    return model.objects.filter(is_active=True)


def category_filter(field, values):
    """Case-insensitive ``field IN values``"""
    condition = Q()
    for value in values:
        condition |= Q(**{f"{field}__iexact": value})
    return condition


# ===== HOME =====


@require_GET
def homepage(request: HttpRequest):
    creative_works = (
        StudentSubmission.objects.filter(status=StudentSubmission.Status.APPROVED)
        .select_related("user", "user__profile")
        .order_by("-is_featured", "-submitted_at")[:8]
    )

    context = {
        "hero_images": active(HeroImage).order_by("display_order"),
        "campus_stats": active(CampusStat).order_by("display_order"),
        "notices": active(Notice).order_by("-created_at")[:10],
        "news": active(NewsAnnouncement).order_by("-created_at")[:6],
        "magazines": active(Magazine).order_by("-issue_date")[:6],
        "toppers": active(Topper).order_by("-year", "rank"),
        "creative_works": creative_works,
        "clubs": active(Club).order_by("-member_count"),
        "academic_services": active(AcademicService).order_by("name"),
    }
    return render(request, "base/home.html", context)


# ===== NOTICES & NEWS =====


@require_GET
def notices(request: HttpRequest):
    queryset = active(Notice).order_by("-created_at")
    category = request.GET.get("category", "")
    if category in Notice.Category.values:
        queryset = queryset.filter(category=category)

    context = {
        "page_obj": Paginator(queryset, 20).get_page(request.GET.get("page", 1)),
        "categories": Notice.Category.choices,
        "category": category,
    }
    return render(request, "base/notices.html", context)


@require_GET
def news(request: HttpRequest):
    queryset = (
        active(NewsAnnouncement)
        .filter(Q(expiry_date__isnull=True) | Q(expiry_date__gt=timezone.now()))
        .order_by("-created_at")
    )
    context = {
        "breaking": queryset.filter(is_breaking=True).first(),
        "page_obj": Paginator(queryset, 12).get_page(request.GET.get("page", 1)),
    }
    return render(request, "base/news.html", context)


@require_GET
def news_detail(request: HttpRequest, news_id: int):
    article = get_object_or_404(active(NewsAnnouncement), pk=news_id)
    related = (
        active(NewsAnnouncement)
        .filter(category=article.category)
        .exclude(pk=article.pk)
        .order_by("-created_at")[:3]
    )
    return render(request, "base/news_detail.html", {"article": article, "related": related})


# ===== GALLERY =====


@require_GET
def gallery(request: HttpRequest, category=None):
    photos = active(PhotoGallery).order_by("display_order", "-created_at")
    subcategory = request.GET.get("subcategory", "")
    if category:
        photos = photos.filter(category=category)
        if subcategory:
            photos = photos.filter(subcategory=subcategory)

    categories = (
        active(PhotoGallery).order_by("category").values_list("category", flat=True).distinct()
    )
    subcategories = []
    if category:
        subcategories = (
            active(PhotoGallery)
            .filter(category=category)
            .exclude(subcategory="")
            .order_by("subcategory")
            .values_list("subcategory", flat=True)
            .distinct()
        )

    context = {
        "photos": photos,
        "category": category,
        "subcategory": subcategory,
        "categories": categories,
        "subcategories": subcategories,
    }
    return render(request, "base/gallery.html", context)


# ===== ACADEMICS =====


@require_GET
def timetables(request: HttpRequest):
    queryset = active(Timetable).order_by("-created_at")
    context = {
        "class_timetables": queryset.filter(type=Timetable.Type.CLASS),
        "exam_timetables": queryset.filter(type=Timetable.Type.EXAM),
        "other_timetables": queryset.filter(type=Timetable.Type.OTHER),
    }
    return render(request, "base/academics/timetable.html", context)


@require_GET
def fees(request: HttpRequest):
    context = {"fees": active(FeeStructure).order_by("-academic_year", "title")}
    return render(request, "base/academics/fees.html", context)


@require_GET
def downloads(request: HttpRequest):
    queryset = active(AcademicDownload).order_by("-created_at")
    category = request.GET.get("category", "")
    if category:
        queryset = queryset.filter(category=category)

    context = {
        "downloads": queryset,
        "category": category,
        "categories": active(AcademicDownload)
        .order_by("category")
        .values_list("category", flat=True)
        .distinct(),
    }
    return render(request, "base/academics/downloads.html", context)


@require_GET
def download_file(request: HttpRequest, download_id: int):
    """Count the download, then send the visitor to the stored file"""
    item = get_object_or_404(active(AcademicDownload), pk=download_id)
    if not item.file:
        raise Http404("No file uploaded")

    AcademicDownload.objects.filter(pk=item.pk).update(download_count=F("download_count") + 1)
    return redirect(item.file.url)


@require_GET
def transcripts(request: HttpRequest):
    page = active(AcademicPage).filter(slug="transcripts").first()
    related = active(AcademicPage).filter(slug__icontains="transcript").exclude(slug="transcripts")
    return render(
        request, "base/academics/transcripts.html", {"page": page, "related": related}
    )


@require_GET
def scholarships(request: HttpRequest):
    context = {
        "scholarships": active(Scholarship).order_by("application_deadline"),
        "today": timezone.localdate(),
    }
    return render(request, "base/academics/scholarships.html", context)


@require_GET
def academic_page(request: HttpRequest, slug: str):
    page = get_object_or_404(active(AcademicPage), slug=slug)
    return render(request, "base/academics/page.html", {"page": page})


# ===== ABOUT =====


def about_page(request: HttpRequest, page_type: str, template="base/about/page.html"):
    pages = active(AboutPage).filter(page_type=page_type).order_by("display_order")
    context = {
        "pages": pages,
        "page_title": AboutPage.PageType(page_type).label,
    }
    return render(request, template, context)


@require_GET
def about(request: HttpRequest):
    return about_page(request, AboutPage.PageType.ABOUT)


@require_GET
def vision_mission(request: HttpRequest):
    return about_page(request, AboutPage.PageType.VISION_MISSION)


@require_GET
def history(request: HttpRequest):
    return about_page(request, AboutPage.PageType.HISTORY)


@require_GET
def governance(request: HttpRequest):
    return about_page(request, AboutPage.PageType.GOVERNANCE)


def leadership_message(request: HttpRequest, position: str):
    message = active(LeadershipMessage).filter(position=position).first()
    context = {
        "message": message,
        "position_label": LeadershipMessage.Position(position).label,
    }
    return render(request, "base/about/leadership.html", context)


@require_GET
def chairman_message(request: HttpRequest):
    return leadership_message(request, LeadershipMessage.Position.CHAIRMAN)


@require_GET
def vice_chairman_message(request: HttpRequest):
    return leadership_message(request, LeadershipMessage.Position.VICE_CHAIRMAN)


@require_GET
def director_message(request: HttpRequest):
    return leadership_message(request, LeadershipMessage.Position.DIRECTOR)


@require_GET
def awards(request: HttpRequest):
    context = {"awards": active(AwardAchievement).order_by("display_order")}
    return render(request, "base/about/awards.html", context)


@require_GET
def accreditation(request: HttpRequest, accreditation_type=None):
    queryset = active(AccreditationInfo).order_by("accreditation_type")
    label = None
    if accreditation_type is not None:
        if accreditation_type not in ("naac", "nba", "siro"):
            raise Http404("Unknown accreditation")
        queryset = queryset.filter(accreditation_type=accreditation_type)
        label = AccreditationInfo.AccreditationType(accreditation_type).label

    context = {"accreditations": queryset, "accreditation_label": label}
    return render(request, "base/about/accreditation.html", context)


# ===== DEPARTMENTS =====


@require_GET
def department_detail(request: HttpRequest, code: str):
    department = get_object_or_404(active(Department), code__iexact=code)
    faculty = (
        FacultyDepartment.objects.filter(department=department)
        .select_related("faculty")
        .order_by("-is_hod", "faculty__full_name")
    )
    context = {
        "department": department,
        "faculty": faculty,
        "toppers": active(Topper).filter(department=department.name).order_by("-year", "rank")[:6],
    }
    return render(request, "base/department.html", context)


# ===== CAMPUS LIFE =====

PAGE_ALIASES = {
    "activities": "events",
    "social": "social-consciousness",
    "facilities": "other-facilities",
}


def campus_overview(request):
    return {
        "sections": active(CampusLifeContent).order_by("display_order"),
        "pages": active(CampusPage).order_by("display_order"),
        "clubs": active(Club).order_by("-member_count")[:6],
        "events": active(CampusEvent).filter(start_date__gte=timezone.now()).order_by("start_date")[:3],
    }


def campus_sports(request):
    return {"items": active(SportsFacility).order_by("name")}


def campus_hostel(request):
    return {"items": active(HostelInfo).order_by("name")}


def campus_wellness(request):
    return {"items": active(WellnessProgram).order_by("name")}


def campus_governance(request):
    return {"items": active(StudentGovernance).order_by("position")}


def campus_events(request):
    now = timezone.now()
    events = active(CampusEvent).order_by("start_date")
    return {
        "items": events,
        "upcoming": events.filter(start_date__gte=now),
        "past": events.filter(start_date__lt=now).order_by("-start_date"),
    }


def campus_amenities(request):
    return {"items": active(Amenity).order_by("category")}


def campus_publications(request):
    return {"items": active(Publication).order_by("-publication_date")}


def campus_festivals(request):
    return {
        "items": active(CampusEvent)
        .filter(category_filter("event_type", ["festival", "cultural"]))
        .order_by("-start_date")
    }


def campus_womens_forum(request):
    return {"items": active(WomenForumEvent).order_by("-event_date")}


def campus_social(request):
    return {"items": active(SocialInitiative).order_by("-start_date")}


def campus_other_facilities(request):
    return {"items": active(Amenity).filter(category__iexact="other").order_by("name")}


def campus_clubs(request):
    return {"items": active(Club).order_by("-member_count")}


def campus_innovation(request):
    return {
        "items": active(CreativeWork)
        .filter(category_filter("category", ["innovation", "technology", "research", "startup"]))
        .order_by("-is_featured", "-created_at"),
        "centers": active(IncubationCenter).order_by("name"),
    }


def campus_student_activities(request):
    activities = active(StudentActivity).order_by("name")
    category = request.GET.get("category", "")
    categories = activities.order_by("category").values_list("category", flat=True).distinct()
    if category:
        activities = activities.filter(category=category)
    return {"items": activities, "category": category, "categories": categories}


CAMPUS_LIFE_PAGES = {
    "overview": ("Campus Life", campus_overview),
    "sports": ("Sports", campus_sports),
    "hostel": ("Hostel", campus_hostel),
    "wellness": ("Wellness", campus_wellness),
    "governance": ("Student Governance", campus_governance),
    "events": ("Events & Activities", campus_events),
    "amenities": ("Amenities", campus_amenities),
    "publications": ("Publications", campus_publications),
    "festivals": ("Festivals", campus_festivals),
    "womens-forum": ("Women's Forum", campus_womens_forum),
    "social-consciousness": ("Social Consciousness", campus_social),
    "other-facilities": ("Other Facilities", campus_other_facilities),
    "clubs": ("Clubs", campus_clubs),
    "innovation": ("Innovation & Incubation", campus_innovation),
    "student-activities": ("Student Activities", campus_student_activities),
}


@require_GET
def campus_life(request: HttpRequest, page: str = "overview"):
    page = PAGE_ALIASES.get(page, page)
    if page not in CAMPUS_LIFE_PAGES:
        raise Http404("Unknown campus life page")

    title, build_context = CAMPUS_LIFE_PAGES[page]
    context = {
        "page": page,
        "page_title": title,
        "intro": active(CampusLifeContent).filter(page_slug=page).order_by("display_order").first(),
        **build_context(request),
    }
    # Pages without a dedicated layout share the card grid
    templates = [f"base/campus_life/{page}.html", "base/campus_life/cards.html"]
    return render(request, templates, context)


@require_GET
def publication_download(request: HttpRequest, publication_id: int):
    publication = get_object_or_404(active(Publication), pk=publication_id)
    if not publication.file:
        raise Http404("No file uploaded")

    Publication.objects.filter(pk=publication.pk).update(download_count=F("download_count") + 1)
    return redirect(publication.file.url)


# ===== CONTACT =====


@require_GET
def contact(request: HttpRequest):
    context = {
        "contacts": active(ContactInfo).order_by("display_order"),
        "offices": active(OfficeLocation).order_by("-is_main_office", "name"),
    }
    return render(request, "base/contact.html", context)
