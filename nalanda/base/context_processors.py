from django.conf import settings
from django.urls import reverse

from administration.roles import resolve_user_role


def institution_name(request):
    """Context processor to add the institution name to all templates"""
    return {"institution_name": settings.INSTITUTION_NAME}


def user_role(request):
    """The visitor's role: admin, faculty, student, alumni, or None when signed out"""
    role = resolve_user_role(getattr(request, "user", None))
    return {"role": role, "is_admin": role == "admin"}


def site_navigation(request):
    """Top menu of the public site"""
    if request.path.startswith("/admin/"):
        return {}

    menu = [
        ("Home", [("Home", reverse("home"))]),
        (
            "About",
            [
                ("About Us", reverse("about")),
                ("Vision & Mission", reverse("vision_mission")),
                ("History", reverse("history")),
                ("Governance", reverse("governance")),
                ("Chairman's Message", reverse("chairman_message")),
                ("Vice Chairman's Message", reverse("vice_chairman_message")),
                ("Director's Message", reverse("director_message")),
                ("Awards & Achievements", reverse("awards")),
                ("Accreditation", reverse("accreditation")),
            ],
        ),
        (
            "Academics",
            [
                ("Timetable", reverse("timetable")),
                ("Fee Structure", reverse("fees")),
                ("Downloads", reverse("downloads")),
                ("Transcripts", reverse("transcripts")),
                ("Scholarships", reverse("scholarships")),
            ],
        ),
        (
            "Departments",
            [
                (code, reverse("department", args=[code.lower()]))
                for code in ("CSE", "IT", "ME", "EE", "CE", "MCA", "BCA", "MBA")
            ],
        ),
        (
            "Campus Life",
            [
                ("Overview", reverse("campus_life", args=["overview"])),
                ("Clubs", reverse("campus_life", args=["clubs"])),
                ("Events", reverse("campus_life", args=["events"])),
                ("Festivals", reverse("campus_life", args=["festivals"])),
                ("Sports", reverse("campus_life", args=["sports"])),
                ("Hostel", reverse("campus_life", args=["hostel"])),
                ("Wellness", reverse("campus_life", args=["wellness"])),
                ("Student Activities", reverse("campus_life", args=["student-activities"])),
                ("Student Governance", reverse("campus_life", args=["governance"])),
                ("Publications", reverse("campus_life", args=["publications"])),
                ("Women's Forum", reverse("campus_life", args=["womens-forum"])),
                ("Social Consciousness", reverse("campus_life", args=["social-consciousness"])),
                ("Innovation", reverse("campus_life", args=["innovation"])),
                ("Amenities", reverse("campus_life", args=["amenities"])),
                ("Other Facilities", reverse("campus_life", args=["other-facilities"])),
            ],
        ),
        (
            "Updates",
            [
                ("Notices", reverse("notices")),
                ("News", reverse("news")),
                ("Gallery", reverse("gallery")),
            ],
        ),
        ("Contact", [("Contact", reverse("contact"))]),
    ]
    return {"site_menu": menu}
