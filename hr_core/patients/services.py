# hr_core/patients/services.py
from __future__ import annotations

from django.db import transaction

from hr_core.common import errors
from hr_core.iam.context import ActorContext
from hr_core.patients.models import FamilyMember, Gender

MIN_AGE = 1
MAX_AGE = 150


class FamilyMemberService:
    @staticmethod
    @transaction.atomic
    def add(
        *,
        ctx: ActorContext,
        name: str,
        age: int,
        gender: str,
        relationship: str,
    ) -> FamilyMember:
        name = (name or "").strip()
        relationship = (relationship or "").strip()
        gender = (gender or "").strip().lower()

        if not name or not relationship:
            raise errors.ValidationError("Name and relationship are required.")
        if not MIN_AGE <= int(age) <= MAX_AGE:
            raise errors.ValidationError(f"Age must be between {MIN_AGE} and {MAX_AGE}.")
        if gender not in Gender.values:
            raise errors.ValidationError("Gender must be one of: " + ", ".join(Gender.values) + ".")

        return FamilyMember.objects.create(
            patient_id=ctx.account_id,
            name=name,
            age=int(age),
            gender=gender,
            relationship=relationship,
        )
