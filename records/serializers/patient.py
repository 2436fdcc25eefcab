import html

import bleach
from rest_framework import serializers

from records.models import Patient


def _clean(v):
    # bleach escapes entities; undo that so only the tags go away
    return html.unescape(bleach.clean((v or '').strip(), tags=set(), strip=True)).strip()


class PatientSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source='first_name', max_length=100)
    lastName = serializers.CharField(source='last_name', max_length=100)
    # Omitting age on a full replace clears it
    age = serializers.IntegerField(min_value=0, max_value=150, allow_null=True, default=None)

    class Meta:
        model = Patient
        fields = ['id', 'firstName', 'lastName', 'age']
        read_only_fields = ['id']

    def validate_firstName(self, v):
        v = _clean(v)
        if not v:
            raise serializers.ValidationError('firstName must not be blank')
        return v

    def validate_lastName(self, v):
        v = _clean(v)
        if not v:
            raise serializers.ValidationError('lastName must not be blank')
        return v
