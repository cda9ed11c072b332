from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from about.models import AboutPage, AccreditationInfo, ContactInfo, LeadershipMessage, OfficeLocation
from academics.models import AcademicPage, AcademicService, Department, FeeStructure, Scholarship, Topper
from campus_life.models import CampusEvent, Club, HostelInfo, SportsFacility
from front_cms.models import CampusStat
from notices.models import NewsAnnouncement, Notice


class Command(BaseCommand):
    help = "Seed demo rows for the public website sections (safe to run repeatedly)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--institution",
            default="Nalanda Institute of Technology",
            help="Institution name used in the seeded copy",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.institution = options["institution"]
        self.created = 0
        now = timezone.now()

        self.stdout.write("Seeding home page content...")
        self.seed_home(now)

        self.stdout.write("Seeding academics...")
        self.seed_academics(now)

        self.stdout.write("Seeding campus life...")
        self.seed_campus_life(now)

        self.stdout.write("Seeding about us...")
        self.seed_about()

        self.stdout.write(self.style.SUCCESS(f"Done. {self.created} new rows created."))

    def upsert(self, model, lookup, **defaults):
        _, created = model.objects.get_or_create(**lookup, defaults=defaults)
        if created:
            self.created += 1

    def seed_home(self, now):
        stats = [
            ("Students Enrolled", "5,000+"),
            ("Faculty Members", "250+"),
            ("Placement Rate", "92%"),
            ("Years of Excellence", "25+"),
        ]
        for order, (name, value) in enumerate(stats):
            self.upsert(CampusStat, {"stat_name": name}, stat_value=value, display_order=order)

        notices = [
            ("Mid-semester examination schedule released", Notice.Category.EXAMINATION, Notice.Priority.HIGH),
            ("Admissions open for the next academic year", Notice.Category.ADMISSION, Notice.Priority.HIGH),
            ("Campus closed for Independence Day", Notice.Category.HOLIDAY, Notice.Priority.MEDIUM),
            ("Annual technical fest registrations", Notice.Category.EVENT, Notice.Priority.LOW),
        ]
        for title, category, priority in notices:
            self.upsert(Notice, {"title": title}, category=category, priority=priority)

        self.upsert(
            NewsAnnouncement,
            {"title": f"{self.institution} receives NAAC A++ accreditation"},
            summary="The institute has been re-accredited with the highest grade.",
            content="The peer team commended our research output and student support.",
            category="achievement",
            is_featured=True,
            publish_date=now,
            tags=["accreditation", "naac"],
        )

        services = [
            ("Library", "Digital and print resources open 8am to 10pm", "book-open"),
            ("Examination Cell", "Schedules, results and transcripts", "clipboard"),
            ("Training & Placement", "Internships and campus recruitment", "briefcase"),
        ]
        for name, description, icon in services:
            self.upsert(AcademicService, {"name": name}, description=description, icon=icon)

    def seed_academics(self, now):
        departments = [
            ("CSE", "Computer Science & Engineering", ["B.Tech", "M.Tech"]),
            ("IT", "Information Technology", ["B.Tech"]),
            ("ME", "Mechanical Engineering", ["B.Tech", "M.Tech"]),
            ("EE", "Electrical Engineering", ["B.Tech"]),
            ("CE", "Civil Engineering", ["B.Tech", "M.Tech"]),
            ("MCA", "Master of Computer Applications", ["MCA"]),
            ("BCA", "Bachelor of Computer Applications", ["BCA"]),
            ("MBA", "Master of Business Administration", ["MBA"]),
        ]
        for code, name, programs in departments:
            self.upsert(
                Department,
                {"code": code},
                name=name,
                description=f"The Department of {name} offers undergraduate and postgraduate programmes.",
                programs_offered=programs,
            )

        self.upsert(
            AcademicPage,
            {"slug": "transcripts"},
            title="Transcripts & Certificates",
            content="Apply at the examination cell with your enrollment number and fee receipt.",
        )

        year = now.year
        academic_year = f"{year}-{str(year + 1)[-2:]}"
        self.upsert(
            FeeStructure,
            {"title": "B.Tech Tuition Fee", "academic_year": academic_year},
            category="tuition",
            amount=Decimal("125000.00"),
            due_date=(now + timedelta(days=60)).date(),
        )
        self.upsert(
            Scholarship,
            {"title": "Merit Scholarship"},
            description="For students in the top 5% of their programme.",
            eligibility_criteria="CGPA of 9.0 or above",
            amount=Decimal("50000.00"),
            application_deadline=(now + timedelta(days=45)).date(),
        )
        toppers = [
            ("Aditi Sharma", "Computer Science & Engineering", 1, Decimal("9.82")),
            ("Rahul Verma", "Mechanical Engineering", 2, Decimal("9.64")),
        ]
        for name, department, rank, cgpa in toppers:
            self.upsert(
                Topper,
                {"name": name, "year": year - 1},
                department=department,
                rank=rank,
                cgpa=cgpa,
            )

    def seed_campus_life(self, now):
        clubs = [
            ("Coding Club", 320, 24),
            ("Robotics Club", 150, 12),
            ("Music Society", 90, 8),
        ]
        for name, members, events in clubs:
            self.upsert(Club, {"name": name}, member_count=members, event_count=events)

        self.upsert(
            CampusEvent,
            {"title": "Annual Cultural Festival"},
            event_type="festival",
            venue="Main Auditorium",
            start_date=now + timedelta(days=30),
            is_featured=True,
        )
        self.upsert(
            SportsFacility,
            {"name": "Indoor Sports Complex"},
            facility_type="indoor",
            capacity=400,
            operating_hours="6am - 9pm",
        )
        self.upsert(
            HostelInfo,
            {"name": "Aryabhata Boys Hostel"},
            hostel_type="boys",
            capacity=600,
            rooms_available=40,
            facilities=["Wi-Fi", "Mess", "Gym"],
            fee_structure={"double": 60000, "triple": 45000},
        )

    def seed_about(self):
        self.upsert(
            AboutPage,
            {"page_type": AboutPage.PageType.ABOUT},
            title=f"About {self.institution}",
            content="A premier institute dedicated to engineering, management and research.",
        )
        self.upsert(
            AboutPage,
            {"page_type": AboutPage.PageType.VISION_MISSION},
            title="Vision & Mission",
            content="To nurture technically competent and socially responsible professionals.",
        )
        self.upsert(
            LeadershipMessage,
            {"position": LeadershipMessage.Position.DIRECTOR},
            name="Dr. Meera Iyer",
            designation="Director",
            message="Welcome to a campus where curiosity is encouraged every day.",
        )
        self.upsert(
            AccreditationInfo,
            {"accreditation_type": AccreditationInfo.AccreditationType.NAAC},
            title="NAAC Accreditation",
            grade_rating="A++",
            validity_period="5 years",
        )
        self.upsert(
            ContactInfo,
            {"office_name": "Admissions Office"},
            email="admissions@nalanda.edu",
            phone="+91 80 1234 5678",
            office_hours="Mon - Sat, 9am - 5pm",
        )
        self.upsert(
            OfficeLocation,
            {"name": "Administrative Block"},
            building="Admin Block",
            floor="Ground",
            is_main_office=True,
        )
