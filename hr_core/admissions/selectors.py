# hr_core/admissions/selectors.py
from __future__ import annotations

from uuid import UUID

from django.db.models import Q, QuerySet

from hr_core.admissions.models import Admission


def admissions_for(*, hospital_id: UUID, active_only: bool = False) -> QuerySet[Admission]:
    qs = Admission.objects.filter(hospital_id=hospital_id)
    if active_only:
        qs = qs.filter(is_active=True)
    return qs.order_by("-admitted_at")


def has_active_admission(*, hospital_id: UUID, patient_id: UUID, patient_phone: str = "") -> bool:
    """
    Active admission of the patient at the hospital. Admissions recorded before
    the patient registered carry only the phone and still count.
    """
    match = Q(patient_id=patient_id)
    if patient_phone:
        match |= Q(patient__isnull=True, patient_phone=patient_phone)
    return Admission.objects.filter(hospital_id=hospital_id, is_active=True).filter(match).exists()
