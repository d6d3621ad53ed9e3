import pytest

from hr_core.admissions.models import Admission
from hr_core.admissions.services import AdmissionService
from hr_core.audit.models import AuditEvent
from hr_core.common import errors

pytestmark = pytest.mark.django_db


def test_admit_links_registered_patient(hospital_ctx, patient):
    admission = AdmissionService.admit(ctx=hospital_ctx, patient_phone=f" {patient.phone} ", patient_name="Asha")

    assert admission.patient_id == patient.id
    assert admission.patient_phone == patient.phone
    assert admission.is_active
    assert AuditEvent.objects.filter(entity_id=admission.id, event_code="admission.admitted").exists()


def test_admit_unregistered_keeps_phone_only(hospital_ctx):
    admission = AdmissionService.admit(ctx=hospital_ctx, patient_phone="+919822222222", patient_name="Walk In")

    assert admission.patient_id is None
    assert admission.patient_name == "Walk In"


def test_double_admit_conflicts(hospital_ctx, patient):
    AdmissionService.admit(ctx=hospital_ctx, patient_phone=patient.phone, patient_name=patient.name)

    with pytest.raises(errors.Conflict):
        AdmissionService.admit(ctx=hospital_ctx, patient_phone=patient.phone, patient_name=patient.name)


def test_other_hospital_may_admit_same_patient(hospital_ctx, other_hospital_ctx, patient):
    AdmissionService.admit(ctx=hospital_ctx, patient_phone=patient.phone, patient_name=patient.name)
    AdmissionService.admit(ctx=other_hospital_ctx, patient_phone=patient.phone, patient_name=patient.name)

    assert Admission.objects.filter(is_active=True).count() == 2


def test_missing_name_is_rejected(hospital_ctx):
    with pytest.raises(errors.ValidationError):
        AdmissionService.admit(ctx=hospital_ctx, patient_phone="+919822222222", patient_name=" ")


def test_discharge_then_readmit(hospital_ctx, patient):
    first = AdmissionService.admit(ctx=hospital_ctx, patient_phone=patient.phone, patient_name=patient.name)
    AdmissionService.discharge(ctx=hospital_ctx, admission_id=first.id)

    with pytest.raises(errors.InvalidTransition):
        AdmissionService.discharge(ctx=hospital_ctx, admission_id=first.id)

    second = AdmissionService.admit(ctx=hospital_ctx, patient_phone=patient.phone, patient_name=patient.name)
    assert second.id != first.id


def test_admission_api(hospital_client, patient):
    r = hospital_client.post(
        "/api/v1/hospital/admissions/",
        {"patient_phone": patient.phone, "patient_name": patient.name, "notes": "fever"},
        format="json",
    )
    assert r.status_code == 201, r.data
    admission_id = r.data["id"]

    r = hospital_client.post(
        "/api/v1/hospital/admissions/",
        {"patient_phone": patient.phone, "patient_name": patient.name},
        format="json",
    )
    assert r.status_code == 409
    assert r.data["error"]["code"] == "conflict"

    r = hospital_client.get("/api/v1/hospital/admissions/?active=true")
    assert [a["id"] for a in r.data] == [admission_id]

    r = hospital_client.post(f"/api/v1/hospital/admissions/{admission_id}/discharge/")
    assert r.status_code == 200, r.data

    r = hospital_client.post(f"/api/v1/hospital/admissions/{admission_id}/discharge/")
    assert r.status_code == 409
    assert r.data["error"]["code"] == "invalid_transition"

    r = hospital_client.get("/api/v1/hospital/admissions/?active=true")
    assert r.data == []


def test_patient_cannot_admit(patient_client, patient):
    r = patient_client.post(
        "/api/v1/hospital/admissions/",
        {"patient_phone": patient.phone, "patient_name": patient.name},
        format="json",
    )
    assert r.status_code == 403
