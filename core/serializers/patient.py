import html

import bleach
from django.conf import settings
from rest_framework import serializers

from core.models import Patient

NAME_MAX_LENGTH = 50


def _clean_text(v: str) -> str:
    # bleach escapes entities; store the plain text and let templates escape it
    return html.unescape(bleach.clean((v or '').strip(), tags=[], strip=True)).strip()


class PatientSerializer(serializers.ModelSerializer):
    """Validates patient payloads from the HTML form and renders the JSON list.

    Names are stripped of markup before the length rules are checked, so the
    stored value is what was measured.
    """

    class Meta:
        model = Patient
        fields = ['id', 'last_name', 'first_name', 'birth_date', 'score', 'sick']
        read_only_fields = ['id']

    def validate_last_name(self, v):
        v = _clean_text(v)
        if len(v) < 4:
            raise serializers.ValidationError('Ensure this field has at least 4 characters.')
        if len(v) > NAME_MAX_LENGTH:
            raise serializers.ValidationError(f'Ensure this field has no more than {NAME_MAX_LENGTH} characters.')
        return v

    def validate_first_name(self, v):
        v = _clean_text(v)
        if not v:
            raise serializers.ValidationError('This field may not be blank.')
        if len(v) > NAME_MAX_LENGTH:
            raise serializers.ValidationError(f'Ensure this field has no more than {NAME_MAX_LENGTH} characters.')
        return v


class PatientListQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(required=False, default=0, min_value=0)
    size = serializers.IntegerField(required=False, min_value=1)
    keyword = serializers.CharField(required=False, default='', allow_blank=True, trim_whitespace=False)

    def validate_size(self, v):
        if v > settings.PATIENTS_MAX_PAGE_SIZE:
            raise serializers.ValidationError(f'size must be <= {settings.PATIENTS_MAX_PAGE_SIZE}')
        return v

    def validate(self, attrs):
        attrs.setdefault('size', settings.PATIENTS_PAGE_SIZE)
        return attrs


class ListingStateSerializer(serializers.Serializer):
    """Listing page and keyword to return to after a write."""
    page = serializers.IntegerField(required=False, default=0, min_value=0)
    keyword = serializers.CharField(required=False, default='', allow_blank=True, trim_whitespace=False)


class PatientRefQuerySerializer(ListingStateSerializer):
    id = serializers.IntegerField()
