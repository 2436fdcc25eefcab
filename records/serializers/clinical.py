from rest_framework import serializers

from records.models import ClinicalData, Patient


class ClinicalDataSerializer(serializers.ModelSerializer):
    """Public shape of a measurement.

    The patient link can be set through ``patientId`` but is never
    rendered back.
    """
    componentName = serializers.CharField(source='component_name', max_length=100)
    componentValue = serializers.CharField(source='component_value', max_length=100)
    measuredDateTime = serializers.DateTimeField(source='measured_date_time', read_only=True)
    patientId = serializers.PrimaryKeyRelatedField(
        source='patient',
        queryset=Patient.objects.all(),
        write_only=True,
        required=False,
        allow_null=True,
    )

    class Meta:
        model = ClinicalData
        fields = ['id', 'componentName', 'componentValue', 'measuredDateTime', 'patientId']
        read_only_fields = ['id']


class ClinicalDataRequestSerializer(serializers.Serializer):
    patientId = serializers.IntegerField()
    componentName = serializers.CharField(max_length=100)
    componentValue = serializers.CharField(max_length=100)
