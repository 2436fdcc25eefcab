"""
Django admin registrations for the records models.

Lets staff inspect and correct patients and measurements through the
``/admin/`` URL during development.
"""

from django.contrib import admin

from .models import Patient, ClinicalData


class ClinicalDataInline(admin.TabularInline):
    model = ClinicalData
    extra = 0
    readonly_fields = ('measured_date_time',)


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'first_name', 'last_name', 'age')
    search_fields = ('first_name', 'last_name')
    inlines = [ClinicalDataInline]


@admin.register(ClinicalData)
class ClinicalDataAdmin(admin.ModelAdmin):
    list_display = ('id', 'component_name', 'component_value', 'measured_date_time', 'patient')
    list_filter = ('component_name',)
    search_fields = ('component_name', 'patient__first_name', 'patient__last_name')
    readonly_fields = ('measured_date_time',)
