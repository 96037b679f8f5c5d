# lab/management/commands/create_admin.py
from django.core.management.base import BaseCommand, CommandError

from lab.exceptions import ConflictError
from lab.services.bootstrap import DEFAULT_ADMIN_EMAIL, ensure_admin


class Command(BaseCommand):
    help = "Create the lab administrator account (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument("--email", default=DEFAULT_ADMIN_EMAIL)
        parser.add_argument("--password", default=None, help="generated and printed when omitted")
        parser.add_argument("--first-name", default="Lab")
        parser.add_argument("--last-name", default="Admin")
        parser.add_argument("--phone", default="01000000000")
        parser.add_argument("--national-id", default="99999999999999")

    def handle(self, *args, **opts):
        try:
            user, created, generated = ensure_admin(
                email=opts["email"],
                password=opts["password"],
                first_name=opts["first_name"],
                last_name=opts["last_name"],
                phone=opts["phone"],
                national_id=opts["national_id"],
            )
        except ConflictError as exc:
            raise CommandError(f"{exc.detail} (use --email/--national-id)") from exc
        if not created:
            self.stdout.write(self.style.WARNING(f"admin already exists: {user.email}"))
            return
        self.stdout.write(self.style.SUCCESS(f"admin created: {user.email}"))
        if generated:
            self.stdout.write(f"generated password: {generated}")
