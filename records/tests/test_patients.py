"""
Integration tests for the patient endpoints.

The tests use Django REST Framework's APIClient within the APITestCase
base class against a real (test) database.

To run the tests:

```
pytest -q records/tests
```
"""
from unittest import mock

from django.urls import reverse
from rest_framework.test import APITestCase
from rest_framework import status

from ..models import Patient, ClinicalData


class PatientAPITests(APITestCase):
    def setUp(self) -> None:
        self.p1 = Patient.objects.create(first_name="John", last_name="Smith", age=40)
        self.p2 = Patient.objects.create(first_name="Jane", last_name="Doe", age=35)

    def test_list_returns_all_patients(self):
        response = self.client.get("/patients")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([p["id"] for p in response.data], [self.p1.id, self.p2.id])
        self.assertEqual(response.data[0]["firstName"], "John")

    def test_get_by_id_found(self):
        response = self.client.get(f"/patients/{self.p1.id}")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data,
            {"id": self.p1.id, "firstName": "John", "lastName": "Smith", "age": 40},
        )

    def test_get_by_id_not_found_has_no_body(self):
        response = self.client.get("/patients/9999")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.content, b"")

    def test_create_then_get_returns_same_record(self):
        response = self.client.post(
            "/patients",
            {"firstName": "Maria", "lastName": "Garcia", "age": 52},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        new_id = response.data["id"]
        self.assertTrue(response["Location"].endswith(f"/patients/{new_id}"))
        fetched = self.client.get(reverse("patient_detail", args=[new_id]))
        self.assertEqual(fetched.status_code, status.HTTP_200_OK)
        self.assertEqual(fetched.data, response.data)

    def test_create_ignores_client_supplied_id(self):
        response = self.client.post(
            "/patients",
            {"id": 777, "firstName": "Sam", "lastName": "Lee"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertNotEqual(response.data["id"], 777)
        self.assertIsNone(response.data["age"])
        self.assertFalse(Patient.objects.filter(pk=777).exists())

    def test_create_strips_markup_from_names(self):
        response = self.client.post(
            "/patients",
            {"firstName": "<b>Chen</b>", "lastName": "Wu<script>x</script>"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        patient = Patient.objects.get(pk=response.data["id"])
        self.assertEqual(patient.first_name, "Chen")
        self.assertNotIn("<script>", patient.last_name)

    def test_names_with_ampersand_are_stored_as_sent(self):
        response = self.client.post(
            "/patients",
            {"firstName": "Tom & Jerry", "lastName": "<3 O'Brien"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        fetched = self.client.get(f"/patients/{response.data['id']}")
        self.assertEqual(fetched.data["firstName"], "Tom & Jerry")
        self.assertEqual(fetched.data["lastName"], "<3 O'Brien")

    def test_get_oversized_id_is_not_found(self):
        response = self.client.get("/patients/9999999999999999999999999")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_create_missing_fields_reports_each_field(self):
        response = self.client.post("/patients", {"age": 20}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        body = response.json()
        self.assertEqual(body["error"], "Validation failed")
        self.assertIn("firstName", body["details"])
        self.assertIn("lastName", body["details"])
        self.assertIsInstance(body["details"]["firstName"], str)
        self.assertEqual(Patient.objects.count(), 2)

    def test_create_malformed_json(self):
        response = self.client.post(
            "/patients", data='{"firstName": "Jo', content_type="application/json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json(), {"error": "Malformed JSON request"})

    def test_update_existing_forces_path_id(self):
        response = self.client.put(
            f"/patients/{self.p1.id}",
            {"id": 999, "firstName": "Johnny", "lastName": "Smith", "age": 41},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["id"], self.p1.id)
        self.p1.refresh_from_db()
        self.assertEqual(self.p1.first_name, "Johnny")
        self.assertEqual(self.p1.age, 41)
        self.assertFalse(Patient.objects.filter(pk=999).exists())

    def test_update_is_full_replace(self):
        response = self.client.put(
            f"/patients/{self.p1.id}",
            {"firstName": "John", "lastName": "Smith"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.p1.refresh_from_db()
        self.assertIsNone(self.p1.age)

    def test_update_missing_id_returns_404_without_saving(self):
        response = self.client.put(
            "/patients/9999",
            {"firstName": "Ghost", "lastName": "Patient"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(Patient.objects.count(), 2)
        self.assertFalse(Patient.objects.filter(first_name="Ghost").exists())

    def test_update_invalid_body_returns_400(self):
        response = self.client.put(
            f"/patients/{self.p1.id}", {"firstName": ""}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["error"], "Validation failed")
        self.p1.refresh_from_db()
        self.assertEqual(self.p1.first_name, "John")

    def test_delete_twice(self):
        response = self.client.delete(f"/patients/{self.p1.id}")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(response.content, b"")
        self.assertFalse(Patient.objects.filter(pk=self.p1.id).exists())
        again = self.client.delete(f"/patients/{self.p1.id}")
        self.assertEqual(again.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_missing_id_removes_nothing(self):
        response = self.client.delete("/patients/9999")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(Patient.objects.count(), 2)

    def test_delete_keeps_measurements_and_unlinks_them(self):
        item = ClinicalData.objects.create(component_name="hr", component_value="72", patient=self.p1)
        response = self.client.delete(f"/patients/{self.p1.id}")
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        item.refresh_from_db()
        self.assertIsNone(item.patient_id)

    def test_unexpected_error_hides_details(self):
        with mock.patch(
            "records.views.patients.list_patients",
            side_effect=RuntimeError("db password is hunter2"),
        ):
            response = self.client.get("/patients")
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.json(), {"error": "Internal server error"})
        self.assertNotIn(b"hunter2", response.content)
