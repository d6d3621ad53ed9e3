# hr_core/consents/selectors.py
from __future__ import annotations

from uuid import UUID

from django.db.models import QuerySet

from hr_core.consents.models import Consent, ConsentStatus


def list_for_hospital(*, hospital_id: UUID) -> QuerySet[Consent]:
    return Consent.objects.filter(hospital_id=hospital_id).order_by("-requested_at")


def list_granted_for_hospital(*, hospital_id: UUID) -> QuerySet[Consent]:
    return list_for_hospital(hospital_id=hospital_id).filter(status=ConsentStatus.GRANTED)


def list_pending_for_hospital(*, hospital_id: UUID) -> QuerySet[Consent]:
    return list_for_hospital(hospital_id=hospital_id).filter(status=ConsentStatus.PENDING)


def list_for_patient(*, patient_id: UUID) -> QuerySet[Consent]:
    return (
        Consent.objects.filter(patient_id=patient_id)
        .select_related("hospital")
        .order_by("-requested_at")
    )


def get_granted_consent(*, hospital_id: UUID, patient_id: UUID) -> Consent | None:
    return Consent.objects.filter(
        hospital_id=hospital_id,
        patient_id=patient_id,
        status=ConsentStatus.GRANTED,
    ).first()
