from datetime import date

import pytest

from hr_core.emergency.services import EmergencyService
from hr_core.records.services import ReportService

pytestmark = pytest.mark.django_db

LAB_REPORTS = "/api/v1/lab/reports/"
HOSPITAL_REPORTS = "/api/v1/hospital/reports/"


@pytest.fixture
def lab_reports(lab_ctx, patient, hospital):
    for report_type, report_name, reported_on in [
        ("Blood Test", "CBC", date(2024, 1, 1)),
        ("X-Ray", "Chest PA", date(2024, 6, 1)),
    ]:
        ReportService.upload_lab_report(
            ctx=lab_ctx,
            patient_phone=patient.phone,
            patient_name=patient.name,
            hospital_name=hospital.organization_name,
            report_type=report_type,
            report_name=report_name,
            file_reference=f"uploads/{report_name}.pdf",
            reported_on=reported_on,
        )


def _names(r):
    return [row["report_name"] for row in r.data]


def test_date_range(lab_client, lab_reports):
    r = lab_client.get(LAB_REPORTS, {"reported_from": "2024-03-01"})
    assert r.status_code == 200, r.data
    assert _names(r) == ["Chest PA"]

    r = lab_client.get(LAB_REPORTS, {"reported_to": "2024-03-01"})
    assert _names(r) == ["CBC"]

    r = lab_client.get(LAB_REPORTS, {"reported_from": "2024-01-01", "reported_to": "2024-06-01"})
    assert _names(r) == ["Chest PA", "CBC"]


def test_report_type_is_case_insensitive(lab_client, hospital_client, lab_reports):
    r = lab_client.get(LAB_REPORTS, {"report_type": "x-ray"})
    assert _names(r) == ["Chest PA"]

    r = hospital_client.get(HOSPITAL_REPORTS, {"report_type": "BLOOD TEST"})
    assert r.status_code == 200, r.data
    assert _names(r) == ["CBC"]


@pytest.mark.parametrize("url", [LAB_REPORTS, HOSPITAL_REPORTS])
def test_invalid_date_is_rejected(lab_client, hospital_client, lab_reports, url):
    client = lab_client if url == LAB_REPORTS else hospital_client

    r = client.get(url, {"reported_from": "not-a-date"})
    assert r.status_code == 400
    assert r.data["error"]["code"] == "validation_error"
    assert "reported_from" in r.data["error"]["details"]


def test_hospital_filters_include_emergency_uploads(hospital_client, hospital_ctx, fixed_clock, lab_reports):
    emergency = EmergencyService.admit(ctx=hospital_ctx, bed_label="E2", clock=fixed_clock)
    ReportService.upload_emergency_report(
        ctx=hospital_ctx,
        emergency_patient_id=emergency.id,
        report_type="x-ray",
        report_name="Skull",
        file_reference="uploads/skull.png",
        reported_on=date(2024, 7, 1),
    )

    r = hospital_client.get(HOSPITAL_REPORTS, {"report_type": "X-RAY", "reported_from": "2024-06-01"})
    assert _names(r) == ["Skull", "Chest PA"]
