from front_cms.registry import ContentManager, register

from . import forms, models

register(
    ContentManager(
        "contact",
        models.ContactInfo,
        forms.ContactInfoForm,
        title="Contact Info",
        group="Content",
        search_fields=["office_name", "contact_person", "department", "email"],
        list_display=["office_name", "contact_person", "email", "phone", "display_order"],
        nav_order=30,
    )
)

register(
    ContentManager(
        "office-locations",
        models.OfficeLocation,
        forms.OfficeLocationForm,
        title="Office Locations",
        group="Content",
        search_fields=["name", "building", "address"],
        list_display=["name", "building", "room_number", "is_main_office"],
        nav_order=35,
    )
)

register(
    ContentManager(
        "awards",
        models.AwardAchievement,
        forms.AwardAchievementForm,
        title="Awards & Achievements",
        group="Academic Content",
        search_fields=["title", "category"],
        list_display=["title", "category", "award_date", "display_order"],
        nav_order=30,
    )
)

register(
    ContentManager(
        "about-pages",
        models.AboutPage,
        forms.AboutPageForm,
        title="About Pages",
        group="About Us",
        search_fields=["title", "content"],
        list_display=["title", "page_type", "display_order"],
        nav_order=10,
    )
)

register(
    ContentManager(
        "leadership",
        models.LeadershipMessage,
        forms.LeadershipMessageForm,
        title="Leadership Messages",
        group="About Us",
        search_fields=["name", "designation"],
        list_display=["name", "position", "designation"],
        nav_order=20,
    )
)

register(
    ContentManager(
        "accreditation",
        models.AccreditationInfo,
        forms.AccreditationInfoForm,
        title="Accreditation",
        group="About Us",
        search_fields=["title", "grade_rating"],
        list_display=["title", "accreditation_type", "grade_rating", "validity_period"],
        nav_order=30,
    )
)
