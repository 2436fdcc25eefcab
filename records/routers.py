"""
URL mappings for the clinicals API.

Trailing slashes are deliberately omitted; ``APPEND_SLASH`` is off.
"""
from django.urls import path

from .views import health
from .views.patients import patient_list, patient_detail
from .views.clinicals import clinicaldata_list, clinicaldata_detail, save_clinical_data


urlpatterns = [
    path('healthz', health.healthz, name='healthz'),
    # Patients
    path('patients', patient_list, name='patient_list'),
    path('patients/<int:pk>', patient_detail, name='patient_detail'),
    # Clinical data
    path('clinicaldata', clinicaldata_list, name='clinicaldata_list'),
    path('clinicaldata/clinicals', save_clinical_data, name='save_clinical_data'),
    path('clinicaldata/<int:pk>', clinicaldata_detail, name='clinicaldata_detail'),
]
