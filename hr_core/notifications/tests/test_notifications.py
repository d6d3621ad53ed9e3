import pytest

from hr_core.notifications.models import NotificationType
from hr_core.notifications.services import NotificationService

pytestmark = pytest.mark.django_db


def _notify(account, title="Consent Granted"):
    return NotificationService.notify(
        recipient_id=account.id,
        type=NotificationType.CONSENT_RESPONSE,
        title=title,
        message="Asha Rao granted access",
    )


def test_list_is_paginated_and_scoped(hospital_client, hospital, patient):
    _notify(hospital, "first")
    _notify(hospital, "second")
    _notify(patient, "not yours")

    r = hospital_client.get("/api/v1/notifications/")
    assert r.status_code == 200, r.data
    assert r.data["count"] == 2
    assert {n["title"] for n in r.data["results"]} == {"first", "second"}


def test_mark_read(hospital_client, hospital):
    note = _notify(hospital)

    r = hospital_client.post(f"/api/v1/notifications/{note.id}/mark-read/")
    assert r.status_code == 200, r.data
    assert r.data["is_read"] is True
    assert r.data["read_at"] is not None

    r = hospital_client.get("/api/v1/notifications/?is_read=false")
    assert r.data["count"] == 0


def test_cannot_mark_someone_elses(patient_client, hospital):
    note = _notify(hospital)

    r = patient_client.post(f"/api/v1/notifications/{note.id}/mark-read/")
    assert r.status_code == 404
