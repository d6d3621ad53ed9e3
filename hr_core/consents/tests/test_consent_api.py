import uuid

import pytest

from hr_core.consents.models import Consent, ConsentStatus

pytestmark = pytest.mark.django_db


def _request(hospital_client, patient):
    return hospital_client.post(
        "/api/v1/hospital/consents/",
        {"patient_phone": patient.phone, "patient_name": patient.name},
        format="json",
    )


def test_consent_round_trip_over_http(hospital_client, patient_client, patient):
    r = _request(hospital_client, patient)
    assert r.status_code == 201, r.data
    consent_id = r.data["id"]
    assert r.data["status"] == ConsentStatus.PENDING

    r = patient_client.get("/api/v1/patient/consents/")
    assert r.status_code == 200, r.data
    assert [c["id"] for c in r.data] == [consent_id]
    assert r.data[0]["hospital_name"] == "City Hospital"

    r = patient_client.post(f"/api/v1/patient/consents/{consent_id}/respond/", {"action": "grant"}, format="json")
    assert r.status_code == 200, r.data
    assert r.data["status"] == ConsentStatus.GRANTED

    r = hospital_client.get("/api/v1/hospital/consents/granted/")
    assert r.status_code == 200, r.data
    assert [c["id"] for c in r.data] == [consent_id]

    r = hospital_client.post(f"/api/v1/hospital/consents/{consent_id}/revoke/")
    assert r.status_code == 200, r.data
    assert r.data["status"] == ConsentStatus.REVOKED


def test_duplicate_request_is_conflict(hospital_client, patient):
    assert _request(hospital_client, patient).status_code == 201

    r = _request(hospital_client, patient)
    assert r.status_code == 409
    assert r.data["error"]["code"] == "conflict"


def test_respond_twice_is_invalid_transition(hospital_client, patient_client, patient):
    consent_id = _request(hospital_client, patient).data["id"]
    patient_client.post(f"/api/v1/patient/consents/{consent_id}/respond/", {"action": "deny"}, format="json")

    r = patient_client.post(f"/api/v1/patient/consents/{consent_id}/respond/", {"action": "grant"}, format="json")
    assert r.status_code == 409
    assert r.data["error"]["code"] == "invalid_transition"


def test_patient_cannot_request_consent(patient_client, other_patient):
    r = _request(patient_client, other_patient)
    assert r.status_code == 403
    assert r.data["error"]["code"] == "permission_denied"


def test_hospital_cannot_respond(hospital_client, patient):
    consent_id = _request(hospital_client, patient).data["id"]

    r = hospital_client.post(f"/api/v1/patient/consents/{consent_id}/respond/", {"action": "grant"}, format="json")
    assert r.status_code == 403
    assert Consent.objects.get(id=consent_id).status == ConsentStatus.PENDING


def test_patient_record_is_access_gated(hospital_client, patient_client, patient):
    r = hospital_client.get(f"/api/v1/hospital/patients/{patient.id}/")
    assert r.status_code == 403
    assert r.data["error"]["code"] == "permission_denied"

    consent_id = _request(hospital_client, patient).data["id"]
    patient_client.post(f"/api/v1/patient/consents/{consent_id}/respond/", {"action": "grant"}, format="json")

    r = hospital_client.get(f"/api/v1/hospital/patients/{patient.id}/")
    assert r.status_code == 200, r.data
    assert r.data["access"] == "consent"
    assert r.data["consent_id"] == consent_id
    assert r.data["patient"]["phone"] == patient.phone


def test_unknown_patient_record_is_denied_not_missing(hospital_client):
    r = hospital_client.get(f"/api/v1/hospital/patients/{uuid.uuid4()}/")
    assert r.status_code == 403
