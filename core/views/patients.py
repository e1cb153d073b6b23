"""
Patient pages.

Server-rendered views for browsing, creating, editing and deleting
patients.  Browsing needs the USER role; every write needs ADMIN.  After a
write the browser is redirected back to the listing with its page and
keyword preserved.
"""
from __future__ import annotations

import logging
from urllib.parse import urlencode

from django.http import Http404, HttpResponseBadRequest
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_POST
from rest_framework.exceptions import NotFound

from core.container import get_container
from core.permissions import ADMIN, USER, role_required
from core.serializers.patient import (
    ListingStateSerializer,
    PatientListQuerySerializer,
    PatientRefQuerySerializer,
    PatientSerializer,
)

logger = logging.getLogger(__name__)


def _index_url(page=0, keyword='') -> str:
    return f"{reverse('patients_index')}?{urlencode({'page': page, 'keyword': keyword})}"


def _bad_query(serializer) -> HttpResponseBadRequest:
    logger.info('Rejected query parameters: %s', serializer.errors)
    return HttpResponseBadRequest(f'invalid query parameters: {serializer.errors}')


@require_GET
def home(request):
    return redirect('patients_index')


@require_GET
@role_required(USER)
def index(request):
    q = PatientListQuerySerializer(data=request.GET)
    if not q.is_valid():
        return _bad_query(q)
    page_no, size, keyword = q.validated_data['page'], q.validated_data['size'], q.validated_data['keyword']
    page = get_container().patients.search(keyword=keyword, page=page_no, size=size)
    return render(request, 'patients.html', {
        'patients': page.content,
        'pages': page.page_numbers,
        'current_page': page_no,
        'size': size,
        'keyword': keyword,
        'total_elements': page.total_elements,
        'has_next': page.has_next,
    })


@require_GET
@role_required(ADMIN)
def delete_patient(request):
    q = PatientRefQuerySerializer(data=request.GET)
    if not q.is_valid():
        return _bad_query(q)
    get_container().patients.delete(q.validated_data['id'])
    return redirect(_index_url(q.validated_data['page'], q.validated_data['keyword']))


@require_GET
@role_required(ADMIN)
def form_patients(request):
    return render(request, 'formPatients.html', {
        'patient': {},
        'errors': {},
        'page': 0,
        'keyword': '',
    })


@require_POST
@role_required(ADMIN)
def save_patient(request):
    """Create (no ``id``) or update (``id`` given) a patient from form data."""
    state = ListingStateSerializer(data=request.POST)
    if not state.is_valid():
        return _bad_query(state)
    page, keyword = state.validated_data['page'], state.validated_data['keyword']
    raw_id = (request.POST.get('id') or '').strip()
    try:
        patient_id = int(raw_id) if raw_id else None
    except ValueError:
        return HttpResponseBadRequest('invalid patient id')

    serializer = PatientSerializer(data=request.POST)
    if not serializer.is_valid():
        submitted = request.POST.dict()
        if patient_id is not None:
            submitted['id'] = patient_id
        return render(request, 'editPatients.html' if patient_id is not None else 'formPatients.html', {
            'patient': submitted,
            'errors': serializer.errors,
            'page': page,
            'keyword': keyword,
        })

    store = get_container().patients
    if patient_id is None:
        store.create(**serializer.validated_data)
    else:
        try:
            store.update(patient_id, **serializer.validated_data)
        except NotFound as exc:
            raise Http404(str(exc.detail))
    return redirect(_index_url(page, keyword))


@require_GET
@role_required(ADMIN)
def edit_patient(request):
    q = PatientRefQuerySerializer(data=request.GET)
    if not q.is_valid():
        return _bad_query(q)
    try:
        patient = get_container().patients.get(q.validated_data['id'])
    except NotFound as exc:
        raise Http404(str(exc.detail))
    return render(request, 'editPatients.html', {
        'patient': PatientSerializer(patient).data,
        'errors': {},
        'page': q.validated_data['page'],
        'keyword': q.validated_data['keyword'],
    })
