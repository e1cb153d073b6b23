"""
JSON listing of patients.

Unlike the HTML listing this returns every patient at once.  It still
requires an authenticated caller; any role will do.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.container import get_container
from core.serializers.patient import PatientSerializer


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def list_patients(request):
    patients = get_container().patients.list_all()
    return Response(PatientSerializer(patients, many=True).data)
