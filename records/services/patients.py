from typing import List, Optional

from records.models import Patient


def list_patients() -> List[Patient]:
    return list(Patient.objects.all())


def find_patient(pk: int) -> Optional[Patient]:
    return Patient.objects.filter(pk=pk).first()


def delete_patient(pk: int) -> bool:
    """Remove a patient; returns False when no such patient exists.

    Measurements that referenced the patient are kept and unlinked.
    """
    _, per_model = Patient.objects.filter(pk=pk).delete()
    return per_model.get(Patient._meta.label, 0) > 0
