# hr_core/emergency/selectors.py
from __future__ import annotations

from uuid import UUID

from django.db.models import QuerySet

from hr_core.common import errors
from hr_core.emergency.models import EmergencyPatient


def emergency_patients_for(*, hospital_id: UUID, active_only: bool = True) -> QuerySet[EmergencyPatient]:
    qs = EmergencyPatient.objects.filter(hospital_id=hospital_id)
    if active_only:
        qs = qs.filter(is_active=True)
    return qs.order_by("-admitted_at")


def get_emergency_patient(*, hospital_id: UUID, emergency_patient_id: UUID) -> EmergencyPatient:
    patient = EmergencyPatient.objects.filter(id=emergency_patient_id, hospital_id=hospital_id).first()
    if patient is None:
        raise errors.NotFound("Emergency patient not found.")
    return patient


def get_active_emergency_patient(*, hospital_id: UUID, emergency_patient_id: UUID) -> EmergencyPatient:
    patient = EmergencyPatient.objects.filter(
        id=emergency_patient_id,
        hospital_id=hospital_id,
        is_active=True,
    ).first()
    if patient is None:
        raise errors.NotFound("Emergency patient not found or discharged.")
    return patient
