"""
Database models for the hospital patient management application.

Three concepts are stored: patients, application users and the roles
granted to those users.  Field-level constraints (name length, minimum
score) are declared here as model validators so that the serializers at
the request boundary pick them up; the stores and services never
re-check them.
"""
from __future__ import annotations

import uuid

from django.contrib.auth.models import AbstractUser
from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models


def new_user_id() -> str:
    """Random external identifier handed out to every new account."""
    return str(uuid.uuid4())


class Patient(models.Model):
    """A patient record listed, searched and edited through the web layer."""
    last_name = models.CharField(
        max_length=50,
        validators=[MinLengthValidator(4)],
        help_text="Required, between 4 and 50 characters",
    )
    first_name = models.CharField(max_length=50)
    birth_date = models.DateField(null=True, blank=True)
    score = models.IntegerField(validators=[MinValueValidator(100)])
    sick = models.BooleanField(default=False)

    class Meta:
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.last_name} {self.first_name} ({self.pk})"


class AppRole(models.Model):
    """A named permission grant such as ``USER`` or ``ADMIN``.

    The role name is the primary key, so two roles can never share a name.
    """
    role = models.CharField(max_length=50, primary_key=True)

    class Meta:
        ordering = ['role']

    def __str__(self) -> str:
        return self.role


class AppUser(AbstractUser):
    """Application account with an external id and a set of roles.

    ``username``, ``email`` and the hashed ``password`` come from
    :class:`AbstractUser`.  Roles are a plain many-to-many to
    :class:`AppRole`; the reverse accessor on a role is ``users``.
    """
    user_id = models.CharField(max_length=36, unique=True, default=new_user_id, editable=False)
    roles = models.ManyToManyField(AppRole, related_name='users', blank=True)

    @property
    def role_names(self) -> set[str]:
        return set(self.roles.values_list('role', flat=True))

    def has_role(self, role: str) -> bool:
        return self.roles.filter(role=role).exists()

    def __str__(self) -> str:
        return self.username
