import logging
from typing import List, Optional

from records.models import ClinicalData
from records.services.patients import find_patient

logger = logging.getLogger(__name__)


def list_clinical_data() -> List[ClinicalData]:
    return list(ClinicalData.objects.all())


def find_clinical_data(pk: int) -> Optional[ClinicalData]:
    return ClinicalData.objects.filter(pk=pk).first()


def delete_clinical_data(pk: int) -> bool:
    deleted, _ = ClinicalData.objects.filter(pk=pk).delete()
    return deleted > 0


def record_measurement(*, patient_id: int, component_name: str, component_value: str) -> ClinicalData:
    """Store a measurement and attach it to ``patient_id`` if that patient exists.

    An unknown patient is not an error: the measurement is stored
    without a patient.
    """
    patient = find_patient(patient_id)
    if patient is None:
        logger.warning("Patient %s not found, storing measurement without a patient", patient_id)
    return ClinicalData.objects.create(
        component_name=component_name,
        component_value=component_value,
        patient=patient,
    )
