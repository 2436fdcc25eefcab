"""
Patient endpoints.

``/patients`` lists and creates patients; ``/patients/<id>`` reads,
replaces and deletes a single patient.  Missing ids answer 404 with an
empty body and never touch the store.
"""
from __future__ import annotations

import logging

from django.urls import reverse
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from records.serializers.patient import PatientSerializer
from records.services.patients import list_patients, find_patient, delete_patient

logger = logging.getLogger(__name__)


@api_view(['GET', 'POST'])
def patient_list(request):
    if request.method == 'GET':
        patients = list_patients()
        logger.info('Returned %d patients', len(patients))
        return Response(PatientSerializer(patients, many=True).data)
    # POST
    serializer = PatientSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    patient = serializer.save()
    logger.info('Created patient id=%s', patient.id)
    location = request.build_absolute_uri(reverse('patient_detail', args=[patient.id]))
    return Response(serializer.data, status=status.HTTP_201_CREATED, headers={'Location': location})


@api_view(['GET', 'PUT', 'DELETE'])
def patient_detail(request, pk: int):
    if request.method == 'DELETE':
        if not delete_patient(pk):
            logger.warning('Patient %s not found for delete', pk)
            return Response(status=status.HTTP_404_NOT_FOUND)
        logger.info('Deleted patient id=%s', pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    patient = find_patient(pk)
    if patient is None:
        logger.warning('Patient %s not found', pk)
        return Response(status=status.HTTP_404_NOT_FOUND)
    if request.method == 'GET':
        return Response(PatientSerializer(patient).data)
    # PUT: full replace, the path id wins over any id in the body
    serializer = PatientSerializer(patient, data=request.data)
    serializer.is_valid(raise_exception=True)
    serializer.save()
    logger.info('Updated patient id=%s', pk)
    return Response(serializer.data)
