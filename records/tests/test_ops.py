from io import StringIO

import pytest
from django.core.management import call_command
from django.http import Http404, HttpResponse
from django.test import RequestFactory, override_settings
from rest_framework.test import APIClient

from records.middleware import JsonErrorMiddleware
from records.models import Patient, ClinicalData


def test_middleware_hides_unexpected_errors():
    request = RequestFactory().get('/anything')
    mw = JsonErrorMiddleware(lambda r: HttpResponse('ok'))
    resp = mw.process_exception(request, ValueError('secret detail'))
    assert resp.status_code == 500
    assert b'secret detail' not in resp.content
    assert b'Internal server error' in resp.content


def test_middleware_leaves_404_to_django():
    request = RequestFactory().get('/anything')
    mw = JsonErrorMiddleware(lambda r: HttpResponse('ok'))
    assert mw.process_exception(request, Http404('nope')) is None
    assert mw(request).content == b'ok'


@pytest.mark.django_db
def test_healthz_reports_db():
    r = APIClient().get('/healthz')
    assert r.status_code == 200
    assert r.json() == {'ok': True, 'db': True}


@pytest.mark.django_db
@override_settings(CORS_ALLOWED_ORIGINS=['http://localhost:3000'])
def test_cors_allows_configured_frontend_only():
    client = APIClient()
    r = client.get('/patients', HTTP_ORIGIN='http://localhost:3000')
    assert r['Access-Control-Allow-Origin'] == 'http://localhost:3000'
    r2 = client.get('/patients', HTTP_ORIGIN='http://evil.example')
    assert 'Access-Control-Allow-Origin' not in r2


@pytest.mark.django_db
def test_populate_data_creates_linked_records():
    out = StringIO()
    call_command('populate_data', patients=2, measurements=3, stdout=out)
    assert Patient.objects.count() == 2
    assert ClinicalData.objects.count() == 6
    assert not ClinicalData.objects.filter(patient__isnull=True).exists()
    assert 'Created 2 patients' in out.getvalue()


@pytest.mark.django_db
def test_populate_data_clear_replaces_existing():
    Patient.objects.create(first_name='Old', last_name='Record')
    call_command('populate_data', patients=1, measurements=1, clear=True, stdout=StringIO())
    assert not Patient.objects.filter(first_name='Old').exists()
    assert Patient.objects.count() == 1


@pytest.mark.django_db
@pytest.mark.parametrize('url', ['/metrics', '/swagger/', '/redoc/'])
def test_operational_pages_respond(url):
    r = APIClient().get(url)
    assert r.status_code == 200


@pytest.mark.django_db
def test_openapi_document_lists_api_paths():
    r = APIClient().get('/swagger/?format=openapi')
    assert r.status_code == 200
    paths = r.json()['paths']
    assert '/patients' in paths and '/clinicaldata/clinicals' in paths
