"""
Demo data seeding.

Creates the ``USER`` and ``ADMIN`` roles, three accounts (``user1``,
``user2`` and ``admin``, all with password ``1234``) and a handful of
patients.  Existing rows are left alone, so seeding twice is harmless.
"""
from __future__ import annotations

import logging
from datetime import date

from core.container import Container
from core.permissions import ADMIN, USER

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "1234"

DEMO_USERS = [
    ("user1", "user1@gmail.com", (USER,)),
    ("user2", "user2@gmail.com", (USER,)),
    ("admin", "admin@gmail.com", (USER, ADMIN)),
]

DEMO_PATIENTS = [
    {"last_name": "Alami", "first_name": "Mohamed", "birth_date": date(1990, 3, 12), "score": 120, "sick": False},
    {"last_name": "Benali", "first_name": "Hanane", "birth_date": date(1985, 7, 2), "score": 340, "sick": True},
    {"last_name": "Chakir", "first_name": "Imane", "birth_date": date(2001, 11, 23), "score": 150, "sick": False},
    {"last_name": "Daoudi", "first_name": "Yassine", "birth_date": date(1978, 1, 30), "score": 410, "sick": True},
    {"last_name": "Elkhalil", "first_name": "Sara", "birth_date": date(1995, 5, 17), "score": 230, "sick": False},
    {"last_name": "Fassali", "first_name": "Omar", "birth_date": date(1969, 9, 8), "score": 105, "sick": True},
]


def seed_demo_data(container: Container, *, with_patients: bool = True) -> dict[str, int]:
    """Insert demo roles, users and patients; returns how many rows were created."""
    accounts = container.accounts
    created = {"roles": 0, "users": 0, "patients": 0}

    for role in (USER, ADMIN):
        if not container.roles.exists(role):
            accounts.add_new_role(role)
            created["roles"] += 1

    for username, email, roles in DEMO_USERS:
        if not container.users.exists(username):
            accounts.add_new_user(username, DEMO_PASSWORD, email, DEMO_PASSWORD)
            created["users"] += 1
        for role in roles:
            accounts.add_role_to_user(username, role)

    if with_patients and not container.patients.list_all():
        for fields in DEMO_PATIENTS:
            container.patients.create(**fields)
            created["patients"] += 1

    logger.info("Demo data seeded: %s", created)
    return created
