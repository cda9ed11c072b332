from django.contrib.auth.models import Group, User
from django.core.management import call_command
from django.core.management.base import BaseCommand
from decouple import config

from administration.models import AdminRole, Profile


class Command(BaseCommand):
    help = "Migrate, create one group per account role and a Super Admin from .env"

    def add_arguments(self, parser):
        parser.add_argument(
            "--skip-migrate", action="store_true", help="Assume the schema is up to date"
        )

    def handle(self, *args, **options):
        if not options["skip_migrate"]:
            self.stdout.write("Applying migrations...")
            call_command("migrate")

        for label in Profile.Role.labels:
            _, created = Group.objects.get_or_create(name=label)
            state = "created" if created else "exists"
            self.stdout.write(f"Group {label}: {state}")

        owner = self.ensure_superuser()
        _, granted = AdminRole.objects.get_or_create(
            user=owner,
            role_level=AdminRole.Level.SUPER_ADMIN,
            is_active=True,
            defaults={"granted_by": owner},
        )
        if granted:
            self.stdout.write(f"Granted Super Admin to {owner.username}")

        self.stdout.write(self.style.SUCCESS("Setup complete."))

    def ensure_superuser(self):
        email = config("DJANGO_SUPERUSER_EMAIL").lower()
        # Sign-in looks accounts up by email
        username = email

        owner = User.objects.filter(username=username).first()
        if owner is None:
            owner = User.objects.create_superuser(
                username=username,
                email=email,
                password=config("DJANGO_SUPERUSER_PASSWORD"),
            )
            self.stdout.write(f"Superuser {username} created")
        else:
            self.stdout.write(f"Superuser {username} already exists")

        owner.groups.add(Group.objects.get(name=Profile.Role.ADMIN.label))
        Profile.objects.update_or_create(
            user=owner, defaults={"email": email, "role": Profile.Role.ADMIN}
        )
        return owner
