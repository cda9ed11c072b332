from front_cms.registry import ContentManager, register

from . import forms, models

register(
    ContentManager(
        "campus-life",
        models.CampusLifeContent,
        forms.CampusLifeContentForm,
        title="Campus Life Content",
        group="Campus Life",
        description="Intro text and highlights for each campus-life page",
        search_fields=["title", "page_slug"],
        list_display=["title", "page_slug", "display_order"],
        nav_order=10,
    )
)

register(
    ContentManager(
        "campus-pages",
        models.CampusPage,
        forms.CampusPageForm,
        title="Campus Pages",
        group="Campus Life",
        search_fields=["title", "slug"],
        list_display=["title", "slug", "display_order"],
        nav_order=20,
    )
)

register(
    ContentManager(
        "student-activities",
        models.StudentActivity,
        forms.StudentActivityForm,
        title="Student Activities",
        group="Campus Life",
        search_fields=["name", "category", "coordinator_name"],
        list_display=["name", "category", "coordinator_name", "member_count"],
        nav_order=30,
    )
)

register(
    ContentManager(
        "clubs",
        models.Club,
        forms.ClubForm,
        title="Clubs",
        group="Campus Life",
        search_fields=["name", "description"],
        list_display=["name", "member_count", "event_count"],
        nav_order=40,
    )
)

register(
    ContentManager(
        "events",
        models.CampusEvent,
        forms.CampusEventForm,
        title="Events",
        group="Campus Life",
        ordering=["-start_date"],
        search_fields=["title", "event_type", "venue", "organizer"],
        list_display=["title", "event_type", "start_date", "venue", "is_featured"],
        nav_order=50,
    )
)

register(
    ContentManager(
        "sports-facilities",
        models.SportsFacility,
        forms.SportsFacilityForm,
        title="Sports Facilities",
        group="Campus Life",
        search_fields=["name", "facility_type"],
        list_display=["name", "facility_type", "capacity", "booking_required"],
        nav_order=60,
    )
)

register(
    ContentManager(
        "hostel",
        models.HostelInfo,
        forms.HostelInfoForm,
        title="Hostel",
        group="Campus Life",
        search_fields=["name", "hostel_type", "warden_name"],
        list_display=["name", "hostel_type", "capacity", "rooms_available"],
        nav_order=70,
    )
)

register(
    ContentManager(
        "wellness",
        models.WellnessProgram,
        forms.WellnessProgramForm,
        title="Wellness Programs",
        group="Campus Life",
        search_fields=["name", "program_type", "instructor"],
        list_display=["name", "program_type", "instructor", "fee"],
        nav_order=80,
    )
)

register(
    ContentManager(
        "governance",
        models.StudentGovernance,
        forms.StudentGovernanceForm,
        title="Student Governance",
        group="Campus Life",
        search_fields=["student_name", "position", "department"],
        list_display=["student_name", "position", "department", "year"],
        nav_order=90,
    )
)

register(
    ContentManager(
        "publications",
        models.Publication,
        forms.PublicationForm,
        title="Publications",
        group="Campus Life",
        search_fields=["title", "author", "publication_type"],
        list_display=["title", "publication_type", "publication_date", "download_count"],
        nav_order=100,
    )
)

register(
    ContentManager(
        "amenities",
        models.Amenity,
        forms.AmenityForm,
        title="Amenities",
        group="Campus Life",
        search_fields=["name", "category", "location"],
        list_display=["name", "category", "location", "booking_required"],
        nav_order=110,
    )
)

register(
    ContentManager(
        "womens-forum",
        models.WomenForumEvent,
        forms.WomenForumEventForm,
        title="Women's Forum",
        group="Campus Life",
        search_fields=["title", "event_type", "speaker_name"],
        list_display=["title", "event_type", "event_date", "is_featured"],
        nav_order=120,
    )
)

register(
    ContentManager(
        "social-initiatives",
        models.SocialInitiative,
        forms.SocialInitiativeForm,
        title="Social Initiatives",
        group="Campus Life",
        search_fields=["title", "category", "organizer"],
        list_display=["title", "category", "status", "start_date"],
        nav_order=130,
    )
)

register(
    ContentManager(
        "innovation",
        models.IncubationCenter,
        forms.IncubationCenterForm,
        title="Innovation & Incubation",
        group="Campus Life",
        search_fields=["name", "center_type"],
        list_display=["name", "center_type", "current_startups"],
        nav_order=140,
    )
)
