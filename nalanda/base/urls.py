from django.urls import path
from . import views

urlpatterns = [
    path("", views.homepage, name="home"),
    path("notices/", views.notices, name="notices"),
    path("news/", views.news, name="news"),
    path("news/<int:news_id>/", views.news_detail, name="news_detail"),
    path("gallery/", views.gallery, name="gallery"),
    path("gallery/<str:category>/", views.gallery, name="gallery_category"),
    # Academics
    path("academics/timetable/", views.timetables, name="timetable"),
    path("academics/fees/", views.fees, name="fees"),
    path("academics/downloads/", views.downloads, name="downloads"),
    path(
        "academics/downloads/<int:download_id>/",
        views.download_file,
        name="download_file",
    ),
    path("academics/transcripts/", views.transcripts, name="transcripts"),
    path("academics/scholarships/", views.scholarships, name="scholarships"),
    path("academics/page/<slug:slug>/", views.academic_page, name="academic_page"),
    # About
    path("about/", views.about, name="about"),
    path("about/vision-mission/", views.vision_mission, name="vision_mission"),
    path("about/history/", views.history, name="history"),
    path("about/governance/", views.governance, name="governance"),
    path("about/chairman-message/", views.chairman_message, name="chairman_message"),
    path(
        "about/vice-chairman-message/",
        views.vice_chairman_message,
        name="vice_chairman_message",
    ),
    path("about/director-message/", views.director_message, name="director_message"),
    path("about/awards/", views.awards, name="awards"),
    path("about/accreditation/", views.accreditation, name="accreditation"),
    path(
        "about/accreditation/<slug:accreditation_type>/",
        views.accreditation,
        name="accreditation_detail",
    ),
    # Departments
    path("departments/<str:code>/", views.department_detail, name="department"),
    # Campus life
    path("campus-life/", views.campus_life, name="campus_life_home"),
    path(
        "campus-life/publications/<int:publication_id>/download/",
        views.publication_download,
        name="publication_download",
    ),
    path("campus-life/<slug:page>/", views.campus_life, name="campus_life"),
    path("contact/", views.contact, name="contact"),
]
