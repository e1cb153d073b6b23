"""
Composition root.

Stores and services are plain objects wired together here once per
process; views and management commands obtain them through
:func:`get_container`.  Tests build their own with :func:`build_container`.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from core.services.accounts import AccountService
from core.services.passwords import PasswordHasher
from core.stores.accounts import AppRoleStore, AppUserStore
from core.stores.patients import PatientStore


@dataclass
class Container:
    patients: PatientStore
    users: AppUserStore
    roles: AppRoleStore
    hasher: PasswordHasher
    accounts: AccountService


def build_container() -> Container:
    patients = PatientStore()
    users = AppUserStore()
    roles = AppRoleStore()
    hasher = PasswordHasher()
    accounts = AccountService(users=users, roles=roles, hasher=hasher)
    return Container(
        patients=patients,
        users=users,
        roles=roles,
        hasher=hasher,
        accounts=accounts,
    )


@lru_cache()
def get_container() -> Container:
    return build_container()
