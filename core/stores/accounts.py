"""
User and role persistence.

These stores wrap the ORM managers of :class:`AppUser` and
:class:`AppRole`.  They hold no state themselves; transactions are opened
by the caller (``AccountService``).
"""
from __future__ import annotations

from typing import Optional

from core.models import AppRole, AppUser


class AppUserStore:

    def find_by_username(self, username: str) -> Optional[AppUser]:
        return AppUser.objects.filter(username=username).prefetch_related('roles').first()

    def exists(self, username: str) -> bool:
        return AppUser.objects.filter(username=username).exists()

    def create(self, *, username: str, password: str, email: str = '', user_id: Optional[str] = None) -> AppUser:
        """Insert a user whose ``password`` is already hashed."""
        user = AppUser(username=username, password=password, email=email or '')
        if user_id:
            user.user_id = user_id
        user.save()
        return user

    def add_role(self, user: AppUser, role: AppRole) -> None:
        # ManyToMany.add ignores rows that already exist.
        user.roles.add(role)

    def remove_role(self, user: AppUser, role: AppRole) -> None:
        user.roles.remove(role)


class AppRoleStore:

    def find(self, role: str) -> Optional[AppRole]:
        return AppRole.objects.filter(pk=role).first()

    def exists(self, role: str) -> bool:
        return AppRole.objects.filter(pk=role).exists()

    def create(self, role: str) -> AppRole:
        return AppRole.objects.create(role=role)

    def list_all(self) -> list[AppRole]:
        return list(AppRole.objects.all())
