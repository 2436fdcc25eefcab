"""
Database models for the clinicals backend.

Two tables are kept: :class:`Patient` and :class:`ClinicalData`.  A
clinical measurement may point at one patient through an explicit
``patient_id`` column; the link is optional and never exposed in API
responses.
"""
from __future__ import annotations

from django.db import models


class Patient(models.Model):
    """A person whose measurements are recorded."""
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    age = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        db_table = 'patient'
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.id})"


class ClinicalData(models.Model):
    """A single measurement such as blood pressure or heart rate.

    ``measured_date_time`` is stamped by the database layer on insert and
    is never taken from the client.  Deleting a patient keeps their
    measurements and clears the link.
    """
    component_name = models.CharField(max_length=100)
    component_value = models.CharField(max_length=100)
    measured_date_time = models.DateTimeField(auto_now_add=True)
    patient = models.ForeignKey(
        Patient, null=True, blank=True, on_delete=models.SET_NULL, related_name='clinical_data'
    )

    class Meta:
        db_table = 'clinicaldata'
        ordering = ['id']
        verbose_name_plural = 'clinical data'

    def __str__(self) -> str:
        return f"{self.component_name}={self.component_value} ({self.id})"
