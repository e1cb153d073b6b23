from django.core.management.base import BaseCommand

from core.container import get_container
from core.services.bootstrap import DEMO_PASSWORD, DEMO_USERS, seed_demo_data


class Command(BaseCommand):
    help = "Seed the USER/ADMIN roles, demo accounts and demo patients (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument('--no-patients', action='store_true', help='Only seed roles and accounts.')

    def handle(self, *args, **opts):
        created = seed_demo_data(get_container(), with_patients=not opts['no_patients'])
        for username, _, roles in DEMO_USERS:
            self.stdout.write(self.style.SUCCESS(f"ok: {username} ({', '.join(roles)})"))
        self.stdout.write(self.style.SUCCESS(
            f"Created {created['roles']} role(s), {created['users']} user(s), "
            f"{created['patients']} patient(s). Demo password: {DEMO_PASSWORD}"
        ))
