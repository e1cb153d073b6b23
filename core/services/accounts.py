"""
Account business rules: creating users and roles and granting roles.

Every operation runs in a single transaction so a role assignment (read
the user, read the role, write the link row) is never observed half done.
Errors use the kinds from :mod:`core.exceptions`: ``Conflict`` for
duplicates, ``ValidationError`` for a password mismatch and ``NotFound``
for unknown users or roles.
"""
from __future__ import annotations

import logging
import uuid

from django.db import IntegrityError, transaction

from core.exceptions import Conflict, NotFound, ValidationError
from core.models import AppRole, AppUser
from core.services.passwords import PasswordHasher
from core.stores.accounts import AppRoleStore, AppUserStore

logger = logging.getLogger(__name__)


class AccountService:

    def __init__(self, users: AppUserStore, roles: AppRoleStore, hasher: PasswordHasher):
        self.users = users
        self.roles = roles
        self.hasher = hasher

    def add_new_user(self, username: str, password: str, email: str, confirm_password: str) -> AppUser:
        with transaction.atomic():
            if self.users.exists(username):
                raise Conflict(f"user '{username}' already exists")
            if password != confirm_password:
                raise ValidationError({'confirmPassword': ['passwords do not match']})
            try:
                user = self.users.create(
                    username=username,
                    password=self.hasher.hash(password),
                    email=email,
                    user_id=str(uuid.uuid4()),
                )
            except IntegrityError as exc:
                raise Conflict(f"user '{username}' already exists") from exc
        logger.info('Created user %s (%s)', user.username, user.user_id)
        return user

    def add_new_role(self, role: str) -> AppRole:
        with transaction.atomic():
            if self.roles.exists(role):
                raise Conflict(f"role '{role}' already exists")
            try:
                app_role = self.roles.create(role)
            except IntegrityError as exc:
                raise Conflict(f"role '{role}' already exists") from exc
        logger.info('Created role %s', role)
        return app_role

    def list_roles(self) -> list[AppRole]:
        return self.roles.list_all()

    def add_role_to_user(self, username: str, role: str) -> AppUser:
        with transaction.atomic():
            user, app_role = self._user_and_role(username, role)
            self.users.add_role(user, app_role)
        logger.info('Granted role %s to %s', role, username)
        return user

    def remove_role_from_user(self, username: str, role: str) -> AppUser:
        with transaction.atomic():
            user, app_role = self._user_and_role(username, role)
            self.users.remove_role(user, app_role)
        logger.info('Revoked role %s from %s', role, username)
        return user

    def load_user_by_username(self, username: str) -> AppUser:
        user = self.users.find_by_username(username)
        if user is None:
            raise NotFound(f"user '{username}' not found")
        return user

    def _user_and_role(self, username: str, role: str) -> tuple[AppUser, AppRole]:
        user = self.load_user_by_username(username)
        app_role = self.roles.find(role)
        if app_role is None:
            raise NotFound(f"role '{role}' not found")
        return user, app_role
