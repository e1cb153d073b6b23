"""
Patient persistence.

``PatientStore`` is the only place that queries or writes
:class:`core.models.Patient`.  Inserts and updates are separate
operations: updating an id that does not exist raises ``NotFound``
instead of silently inserting a new row.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from django.db import connections, transaction
from django.db.models import Value
from django.db.models.functions import StrIndex
from rest_framework.exceptions import NotFound

from core.models import Patient

logger = logging.getLogger(__name__)

PATIENT_FIELDS = ('last_name', 'first_name', 'birth_date', 'score', 'sick')


@dataclass
class PatientPage:
    """One zero-based page of a filtered patient listing."""
    content: list[Patient]
    number: int
    size: int
    total_elements: int
    total_pages: int = field(init=False)

    def __post_init__(self) -> None:
        self.total_pages = math.ceil(self.total_elements / self.size) if self.size else 0

    @property
    def page_numbers(self) -> range:
        return range(self.total_pages)

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages


class PatientStore:

    def list_all(self) -> list[Patient]:
        return list(Patient.objects.order_by('id'))

    def search(self, keyword: str = '', page: int = 0, size: int = 4) -> PatientPage:
        """Patients whose last name contains ``keyword`` (case-sensitive)."""
        if page < 0:
            raise ValueError('page must be >= 0')
        if size < 1:
            raise ValueError('size must be >= 1')
        qs = Patient.objects.order_by('id')
        if keyword:
            qs = _last_name_contains(qs, keyword)
        total = qs.count()
        start = page * size
        content = list(qs[start:start + size]) if start < total else []
        return PatientPage(content=content, number=page, size=size, total_elements=total)

    def find(self, patient_id: int) -> Optional[Patient]:
        return Patient.objects.filter(pk=patient_id).first()

    def get(self, patient_id: int) -> Patient:
        patient = self.find(patient_id)
        if patient is None:
            raise NotFound(f'patient {patient_id} not found')
        return patient

    def create(self, **fields) -> Patient:
        with transaction.atomic():
            patient = Patient.objects.create(**_only_patient_fields(fields))
        logger.info('Created patient %s', patient.pk)
        return patient

    def update(self, patient_id: int, **fields) -> Patient:
        with transaction.atomic():
            patient = Patient.objects.select_for_update().filter(pk=patient_id).first()
            if patient is None:
                raise NotFound(f'patient {patient_id} not found')
            changes = _only_patient_fields(fields)
            for name, value in changes.items():
                setattr(patient, name, value)
            patient.save(update_fields=list(changes) or None)
        logger.info('Updated patient %s', patient.pk)
        return patient

    def delete(self, patient_id: int) -> bool:
        """Delete by id; an unknown id is a no-op and returns False."""
        with transaction.atomic():
            deleted, _ = Patient.objects.filter(pk=patient_id).delete()
        if deleted:
            logger.info('Deleted patient %s', patient_id)
        else:
            logger.info('Delete skipped, patient %s does not exist', patient_id)
        return bool(deleted)


def _last_name_contains(qs, keyword: str):
    # SQLite LIKE ignores case for ASCII, INSTR does not.
    if connections[qs.db].vendor == 'sqlite':
        return qs.annotate(keyword_pos=StrIndex('last_name', Value(keyword))).filter(keyword_pos__gt=0)
    return qs.filter(last_name__contains=keyword)


def _only_patient_fields(fields: dict) -> dict:
    return {k: v for k, v in fields.items() if k in PATIENT_FIELDS}
