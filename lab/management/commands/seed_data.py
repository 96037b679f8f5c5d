# lab/management/commands/seed_data.py
from django.core.management.base import BaseCommand

from lab.services.bootstrap import seed_demo_data


class Command(BaseCommand):
    help = "Attach demo tests, an appointment and notifications to the first regular user."

    def handle(self, *args, **opts):
        created = seed_demo_data()
        if not any(created.values()):
            self.stdout.write(self.style.WARNING("no regular user found; nothing seeded"))
            return
        for name, count in created.items():
            self.stdout.write(self.style.SUCCESS(f"ok: {count} {name}"))
