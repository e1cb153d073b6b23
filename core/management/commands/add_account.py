from getpass import getpass

from django.core.management.base import BaseCommand, CommandError
from rest_framework.exceptions import APIException

from core.container import get_container


class Command(BaseCommand):
    help = "Create an account and grant it roles, creating missing roles on the way."

    def add_arguments(self, parser):
        parser.add_argument('username')
        parser.add_argument('--email', default='')
        parser.add_argument('--password', help='Prompted for when omitted.')
        parser.add_argument('--role', action='append', default=[], dest='roles',
                            help='Role to grant; repeat for several (e.g. --role USER --role ADMIN).')

    def handle(self, *args, **opts):
        accounts = get_container().accounts
        password = opts['password']
        confirm = password
        if not password:
            password = getpass('Password: ')
            confirm = getpass('Password (again): ')
        try:
            user = accounts.add_new_user(opts['username'], password, opts['email'], confirm)
            for role in opts['roles']:
                if not get_container().roles.exists(role):
                    accounts.add_new_role(role)
                accounts.add_role_to_user(user.username, role)
        except APIException as exc:
            raise CommandError(str(exc.detail)) from exc
        roles = ', '.join(sorted(user.role_names)) or 'no roles'
        self.stdout.write(self.style.SUCCESS(f"created {user.username} [{user.user_id}] ({roles})"))
