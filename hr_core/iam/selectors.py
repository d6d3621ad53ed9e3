# hr_core/iam/selectors.py
from __future__ import annotations

from uuid import UUID

from hr_core.iam.models import Account, AccountRole


def normalize_phone(phone: str | None) -> str:
    return (phone or "").strip()


def find_patient_by_phone(phone: str | None, *, name: str | None = None) -> Account | None:
    """
    Registered patient owning `phone`. When `name` is given, a case-insensitive
    name match is preferred but not required.
    """
    phone = normalize_phone(phone)
    if not phone:
        return None

    qs = Account.objects.filter(role=AccountRole.PATIENT, phone=phone)
    if name:
        by_name = qs.filter(name__icontains=name.strip()).first()
        if by_name is not None:
            return by_name
    return qs.first()


def get_patient(patient_id: UUID) -> Account | None:
    return Account.objects.filter(id=patient_id, role=AccountRole.PATIENT).first()


def find_hospital_by_name(name: str | None) -> Account | None:
    name = (name or "").strip()
    if not name:
        return None
    qs = Account.objects.filter(role=AccountRole.HOSPITAL)
    return (
        qs.filter(organization_name__iexact=name).first()
        or qs.filter(organization_name__icontains=name).first()
        or qs.filter(name__icontains=name).first()
    )
