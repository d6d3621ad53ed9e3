# hr_core/patients/selectors.py
from __future__ import annotations

from uuid import UUID

from django.db.models import QuerySet

from hr_core.common import errors
from hr_core.patients.models import FamilyMember


def family_members_for(*, patient_id: UUID) -> QuerySet[FamilyMember]:
    return FamilyMember.objects.filter(patient_id=patient_id).order_by("name")


def get_family_member(*, patient_id: UUID, family_member_id: UUID) -> FamilyMember:
    member = FamilyMember.objects.filter(id=family_member_id, patient_id=patient_id).first()
    if member is None:
        raise errors.NotFound("Family member not found.")
    return member
