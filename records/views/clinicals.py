"""
Clinical data endpoints.

Plain CRUD lives under ``/clinicaldata``.  ``/clinicaldata/clinicals``
records a measurement for a patient id in one step; an unknown patient
id still stores the measurement, just without a patient.
"""
from __future__ import annotations

import logging

from django.urls import reverse
from drf_yasg.utils import swagger_auto_schema
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from records.serializers.clinical import ClinicalDataSerializer, ClinicalDataRequestSerializer
from records.services.clinicals import (
    list_clinical_data,
    find_clinical_data,
    delete_clinical_data,
    record_measurement,
)

logger = logging.getLogger(__name__)


@api_view(['GET', 'POST'])
def clinicaldata_list(request):
    if request.method == 'GET':
        items = list_clinical_data()
        logger.info('Returned %d clinical data records', len(items))
        return Response(ClinicalDataSerializer(items, many=True).data)
    # POST
    serializer = ClinicalDataSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    item = serializer.save()
    logger.info('Created clinical data id=%s', item.id)
    location = request.build_absolute_uri(reverse('clinicaldata_detail', args=[item.id]))
    return Response(serializer.data, status=status.HTTP_201_CREATED, headers={'Location': location})


@api_view(['GET', 'PUT', 'DELETE'])
def clinicaldata_detail(request, pk: int):
    if request.method == 'DELETE':
        if not delete_clinical_data(pk):
            logger.warning('Clinical data %s not found for delete', pk)
            return Response(status=status.HTTP_404_NOT_FOUND)
        logger.info('Deleted clinical data id=%s', pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    item = find_clinical_data(pk)
    if item is None:
        logger.warning('Clinical data %s not found', pk)
        return Response(status=status.HTTP_404_NOT_FOUND)
    if request.method == 'GET':
        return Response(ClinicalDataSerializer(item).data)
    # PUT: measuredDateTime and an omitted patientId are kept as stored
    serializer = ClinicalDataSerializer(item, data=request.data)
    serializer.is_valid(raise_exception=True)
    serializer.save()
    logger.info('Updated clinical data id=%s', pk)
    return Response(serializer.data)


@swagger_auto_schema(
    method='post',
    request_body=ClinicalDataRequestSerializer,
    responses={200: ClinicalDataSerializer},
)
@api_view(['POST'])
def save_clinical_data(request):
    """Record a measurement and link it to ``patientId`` when that patient exists."""
    serializer = ClinicalDataRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    item = record_measurement(
        patient_id=serializer.validated_data['patientId'],
        component_name=serializer.validated_data['componentName'],
        component_value=serializer.validated_data['componentValue'],
    )
    logger.info('Recorded clinical data id=%s for patient %s', item.id, item.patient_id)
    return Response(ClinicalDataSerializer(item).data)
