from django.db.models import Q

from front_cms.registry import ContentManager, register

from .forms import (
    AcademicDownloadForm,
    AcademicPageForm,
    AcademicServiceForm,
    DepartmentForm,
    FacultyDepartmentForm,
    FeeStructureForm,
    ScholarshipForm,
    TimetableForm,
    TopperForm,
    TranscriptPageForm,
)
from .models import (
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

register(
    ContentManager(
        "academic-pages",
        AcademicPage,
        AcademicPageForm,
        title="Academic Pages",
        group="Academic Management",
        search_fields=["title", "slug"],
        list_display=["title", "slug"],
        nav_order=10,
    )
)

register(
    ContentManager(
        "timetables",
        Timetable,
        TimetableForm,
        title="Timetables",
        group="Academic Management",
        search_fields=["title", "department", "academic_year"],
        list_display=["title", "type", "department", "semester", "academic_year"],
        nav_order=20,
    )
)

register(
    ContentManager(
        "downloads",
        AcademicDownload,
        AcademicDownloadForm,
        title="Downloads",
        group="Academic Management",
        search_fields=["title", "category", "department"],
        list_display=["title", "category", "file_type", "download_count"],
        nav_order=30,
    )
)

register(
    ContentManager(
        "fees",
        FeeStructure,
        FeeStructureForm,
        title="Fee Structure",
        group="Academic Management",
        search_fields=["title", "category", "department", "academic_year"],
        list_display=["title", "academic_year", "amount", "due_date"],
        nav_order=40,
    )
)

register(
    ContentManager(
        "scholarships",
        Scholarship,
        ScholarshipForm,
        title="Scholarships",
        group="Academic Management",
        search_fields=["title", "eligibility_criteria"],
        list_display=["title", "amount", "application_deadline"],
        nav_order=50,
    )
)

register(
    ContentManager(
        "transcripts",
        AcademicPage,
        TranscriptPageForm,
        title="Transcripts",
        group="Academic Management",
        description="Academic pages about transcripts and certificates",
        search_fields=["title", "content"],
        list_display=["title", "slug"],
        queryset_filter=Q(slug__icontains="transcript"),
        nav_order=60,
    )
)

register(
    ContentManager(
        "academic-services",
        AcademicService,
        AcademicServiceForm,
        title="Academic Services",
        group="Academic Content",
        search_fields=["name", "description"],
        list_display=["name", "icon", "link_url"],
        nav_order=10,
    )
)

register(
    ContentManager(
        "toppers",
        Topper,
        TopperForm,
        title="Toppers",
        group="Academic Content",
        search_fields=["name", "department"],
        list_display=["name", "department", "year", "rank", "cgpa"],
        nav_order=20,
    )
)

register(
    ContentManager(
        "departments",
        Department,
        DepartmentForm,
        title="Departments",
        group="Academic Content",
        search_fields=["code", "name", "head_name"],
        list_display=["code", "name", "head_name"],
        nav_order=40,
    )
)

register(
    ContentManager(
        "faculty-departments",
        FacultyDepartment,
        FacultyDepartmentForm,
        title="Faculty Departments",
        group="Academic Content",
        description="Assign faculty members to departments",
        search_fields=["faculty__full_name", "department__name", "department__code"],
        list_display=["faculty", "department", "is_hod"],
        nav_order=50,
    )
)
