# hr_core/admissions/services.py
from __future__ import annotations

import logging
from uuid import UUID

from django.db import IntegrityError, transaction
from django.utils import timezone

from hr_core.admissions.models import Admission
from hr_core.audit.services import AuditService
from hr_core.common import errors
from hr_core.iam.context import ActorContext
from hr_core.iam.selectors import find_patient_by_phone, normalize_phone

logger = logging.getLogger(__name__)


class AdmissionService:
    @staticmethod
    @transaction.atomic
    def admit(
        *,
        ctx: ActorContext,
        patient_phone: str,
        patient_name: str,
        notes: str = "",
    ) -> Admission:
        phone = normalize_phone(patient_phone)
        name = (patient_name or "").strip()
        if not phone or not name:
            raise errors.ValidationError("Patient name and phone are required.")

        already_msg = "Patient is already admitted."
        if Admission.objects.filter(hospital_id=ctx.account_id, patient_phone=phone, is_active=True).exists():
            raise errors.Conflict(already_msg)

        patient = find_patient_by_phone(phone, name=name)

        try:
            with transaction.atomic():
                admission = Admission.objects.create(
                    hospital_id=ctx.account_id,
                    patient=patient,
                    patient_name=name,
                    patient_phone=phone,
                    notes=(notes or "").strip(),
                )
        except IntegrityError:
            raise errors.Conflict(already_msg)

        AuditService.log(
            event_code="admission.admitted",
            entity_type="Admission",
            entity_id=admission.id,
            actor_account_id=ctx.account_id,
            metadata={"patient_id": str(patient.id) if patient else None},
        )
        logger.info("Admission %s opened by hospital %s", admission.id, ctx.account_id)
        return admission

    @staticmethod
    @transaction.atomic
    def discharge(*, ctx: ActorContext, admission_id: UUID) -> Admission:
        admission = (
            Admission.objects.select_for_update()
            .filter(id=admission_id, hospital_id=ctx.account_id)
            .first()
        )
        if admission is None:
            raise errors.NotFound("Admission not found.")
        if not admission.is_active:
            raise errors.InvalidTransition("Patient already discharged.")

        admission.is_active = False
        admission.discharged_at = timezone.now()
        admission.save(update_fields=["is_active", "discharged_at", "updated_at"])

        AuditService.log(
            event_code="admission.discharged",
            entity_type="Admission",
            entity_id=admission.id,
            actor_account_id=ctx.account_id,
        )
        logger.info("Admission %s discharged", admission.id)
        return admission
