import uuid

import pytest

from hr_core.records.services import PrescriptionService
from hr_core.reminders.models import MedicineReminder
from hr_core.tests.helpers import client_for, medicine

pytestmark = pytest.mark.django_db


@pytest.fixture
def reminder(hospital_ctx, patient):
    PrescriptionService.create(
        ctx=hospital_ctx,
        patient_phone=patient.phone,
        patient_name=patient.name,
        medicines=[medicine(timing="night")],
    )
    return MedicineReminder.objects.get()


def test_list_own_reminders(patient_client, reminder):
    r = patient_client.get("/api/v1/reminders/")
    assert r.status_code == 200, r.data
    assert [x["id"] for x in r.data] == [str(reminder.id)]
    assert r.data[0]["reminder_time"] == "21:00"


def test_toggle_then_complete(patient_client, reminder):
    url = f"/api/v1/reminders/{reminder.id}/"

    r = patient_client.post(url + "toggle/")
    assert r.status_code == 200, r.data
    assert r.data["is_active"] is False

    r = patient_client.post(url + "toggle/")
    assert r.data["is_active"] is True

    r = patient_client.post(url + "complete/")
    assert r.status_code == 200, r.data
    assert r.data["completed"] is True
    assert r.data["is_active"] is False

    r = patient_client.post(url + "toggle/")
    assert r.status_code == 409
    assert r.data["error"]["code"] == "invalid_transition"


def test_other_patients_reminder_is_404(reminder, other_patient):
    r = client_for(other_patient).post(f"/api/v1/reminders/{reminder.id}/complete/")
    assert r.status_code == 404
    assert r.data["error"]["code"] == "not_found"


def test_unknown_and_malformed_ids(patient_client):
    assert patient_client.post(f"/api/v1/reminders/{uuid.uuid4()}/toggle/").status_code == 404
    assert patient_client.post("/api/v1/reminders/not-a-uuid/toggle/").status_code == 404


def test_hospital_cannot_list_reminders(hospital_client):
    assert hospital_client.get("/api/v1/reminders/").status_code == 403
