# hr_core/emergency/services.py
from __future__ import annotations

import logging
from uuid import UUID

from django.db import IntegrityError, transaction
from django.utils import timezone

from hr_core.audit.services import AuditService
from hr_core.common import errors
from hr_core.common.clock import Clock, SystemClock
from hr_core.emergency.identity import allocate_temporary_id, normalize_bed_label
from hr_core.emergency.models import EmergencyPatient
from hr_core.iam.context import ActorContext

logger = logging.getLogger(__name__)


class EmergencyService:
    @staticmethod
    @transaction.atomic
    def admit(
        *,
        ctx: ActorContext,
        bed_label: str,
        notes: str = "",
        clock: Clock | None = None,
    ) -> EmergencyPatient:
        bed = normalize_bed_label(bed_label)
        if not bed:
            raise errors.ValidationError("Bed number is required.")

        occupied_msg = f"Bed {bed} is already occupied."
        active = EmergencyPatient.objects.filter(hospital_id=ctx.account_id, is_active=True)
        if active.filter(bed_label=bed).exists():
            raise errors.Conflict(occupied_msg)

        at = (clock or SystemClock()).now()
        taken = set(active.values_list("temporary_id", flat=True))

        salt = 0
        temporary_id = allocate_temporary_id(hospital_id=ctx.account_id, bed_label=bed, at=at)
        while temporary_id in taken:
            salt += 1
            temporary_id = allocate_temporary_id(hospital_id=ctx.account_id, bed_label=bed, at=at, salt=salt)

        try:
            with transaction.atomic():
                patient = EmergencyPatient.objects.create(
                    hospital_id=ctx.account_id,
                    temporary_id=temporary_id,
                    bed_label=bed,
                    notes=(notes or "").strip(),
                    admitted_at=at,
                )
        except IntegrityError:
            # concurrent admit to the same bed (or token) won the race
            raise errors.Conflict(occupied_msg)

        AuditService.log(
            event_code="emergency.admitted",
            entity_type="EmergencyPatient",
            entity_id=patient.id,
            actor_account_id=ctx.account_id,
            metadata={"bed_label": bed, "temporary_id": temporary_id},
        )
        logger.info("Emergency patient %s admitted to bed %s", patient.reference, bed)
        return patient

    @staticmethod
    @transaction.atomic
    def discharge(*, ctx: ActorContext, emergency_patient_id: UUID) -> EmergencyPatient:
        patient = (
            EmergencyPatient.objects.select_for_update()
            .filter(id=emergency_patient_id, hospital_id=ctx.account_id)
            .first()
        )
        if patient is None:
            raise errors.NotFound("Emergency patient not found.")
        if not patient.is_active:
            raise errors.InvalidTransition("Emergency patient already discharged.")

        patient.is_active = False
        patient.discharged_at = timezone.now()
        patient.save(update_fields=["is_active", "discharged_at", "updated_at"])

        AuditService.log(
            event_code="emergency.discharged",
            entity_type="EmergencyPatient",
            entity_id=patient.id,
            actor_account_id=ctx.account_id,
            metadata={"bed_label": patient.bed_label},
        )
        logger.info("Emergency patient %s discharged from bed %s", patient.reference, patient.bed_label)
        return patient
