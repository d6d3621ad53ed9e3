# hr_core/consents/services.py
from __future__ import annotations

import logging
from uuid import UUID

from django.db import IntegrityError, transaction
from django.utils import timezone

from hr_core.audit.services import AuditService
from hr_core.common import errors
from hr_core.consents.models import Consent, ConsentStatus
from hr_core.iam.context import ActorContext
from hr_core.iam.selectors import find_patient_by_phone, get_patient, normalize_phone
from hr_core.notifications.models import NotificationType
from hr_core.notifications.services import NotificationService

logger = logging.getLogger(__name__)

ACTION_GRANT = "grant"
ACTION_DENY = "deny"
RESPONSE_ACTIONS = {
    ACTION_GRANT: ConsentStatus.GRANTED,
    ACTION_DENY: ConsentStatus.DENIED,
}


class ConsentLedger:
    """
    Consent state machine between one patient and one hospital.
    At most one PENDING and one GRANTED consent exist per pair; the partial
    unique constraints on Consent close the race between check and insert.
    """

    @staticmethod
    @transaction.atomic
    def request_by_phone(*, ctx: ActorContext, patient_phone: str, patient_name: str) -> Consent:
        phone = normalize_phone(patient_phone)
        name = (patient_name or "").strip()
        if not phone or not name:
            raise errors.ValidationError("Patient name and phone are required.")

        patient = find_patient_by_phone(phone, name=name)
        if patient is None:
            raise errors.NotFound("Patient not found.")

        return ConsentLedger.request(
            ctx=ctx,
            patient_id=patient.id,
            snapshot_name=name,
            snapshot_phone=phone,
        )

    @staticmethod
    @transaction.atomic
    def request(
        *,
        ctx: ActorContext,
        patient_id: UUID,
        snapshot_name: str,
        snapshot_phone: str,
    ) -> Consent:
        patient = get_patient(patient_id)
        if patient is None:
            raise errors.NotFound("Patient not found.")

        open_status = (
            Consent.objects.filter(
                patient_id=patient.id,
                hospital_id=ctx.account_id,
                status__in=[ConsentStatus.GRANTED, ConsentStatus.PENDING],
            )
            .values_list("status", flat=True)
            .first()
        )
        if open_status == ConsentStatus.GRANTED:
            raise errors.Conflict("You already have access to this patient.")
        if open_status == ConsentStatus.PENDING:
            raise errors.Conflict("A consent request is already pending for this patient.")

        try:
            with transaction.atomic():
                consent = Consent.objects.create(
                    patient_id=patient.id,
                    hospital_id=ctx.account_id,
                    patient_name=snapshot_name,
                    patient_phone=snapshot_phone,
                    status=ConsentStatus.PENDING,
                )
        except IntegrityError:
            raise errors.Conflict("A consent request is already pending for this patient.")

        NotificationService.notify(
            recipient_id=patient.id,
            type=NotificationType.CONSENT_REQUEST,
            title="Info Access Request",
            message=f"{ctx.display_name} is requesting access to your medical information",
            related_id=consent.id,
        )
        ConsentLedger._audit(ctx=ctx, consent=consent, event_code="consent.requested")
        logger.info("Consent %s requested by hospital %s", consent.id, ctx.account_id)
        return consent

    @staticmethod
    @transaction.atomic
    def respond(*, ctx: ActorContext, consent_id: UUID, action: str) -> Consent:
        new_status = RESPONSE_ACTIONS.get((action or "").strip().lower())
        if new_status is None:
            raise errors.ValidationError("Action must be 'grant' or 'deny'.", details={"action": action})

        consent = (
            Consent.objects.select_for_update()
            .filter(id=consent_id, patient_id=ctx.account_id)
            .first()
        )
        if consent is None:
            raise errors.NotFound("Consent not found.")
        if consent.status != ConsentStatus.PENDING:
            raise errors.InvalidTransition(f"Consent is {consent.status.lower()}, not pending.")

        consent.status = new_status
        consent.responded_at = timezone.now()
        try:
            with transaction.atomic():
                consent.save(update_fields=["status", "responded_at", "updated_at"])
        except IntegrityError:
            raise errors.Conflict("Access is already granted to this hospital.")

        verb = "granted" if new_status == ConsentStatus.GRANTED else "denied"
        NotificationService.notify(
            recipient_id=consent.hospital_id,
            type=NotificationType.CONSENT_RESPONSE,
            title=f"Consent {verb.capitalize()}",
            message=f"Patient {ctx.display_name} has {verb} your access request",
            related_id=consent.id,
        )
        ConsentLedger._audit(ctx=ctx, consent=consent, event_code=f"consent.{verb}")
        logger.info("Consent %s %s by patient %s", consent.id, verb, ctx.account_id)
        return consent

    @staticmethod
    @transaction.atomic
    def revoke(*, ctx: ActorContext, consent_id: UUID) -> Consent:
        consent = (
            Consent.objects.select_for_update()
            .filter(id=consent_id, hospital_id=ctx.account_id)
            .first()
        )
        if consent is None:
            raise errors.NotFound("Consent not found.")
        if consent.status != ConsentStatus.GRANTED:
            raise errors.InvalidTransition("Only granted consent can be revoked.")

        consent.status = ConsentStatus.REVOKED
        consent.revoked_at = timezone.now()
        consent.save(update_fields=["status", "revoked_at", "updated_at"])

        NotificationService.notify(
            recipient_id=consent.patient_id,
            type=NotificationType.CONSENT_REVOKED,
            title="Access Revoked",
            message=f"{ctx.display_name} no longer has access to your medical information",
            related_id=consent.id,
        )
        ConsentLedger._audit(ctx=ctx, consent=consent, event_code="consent.revoked")
        logger.info("Consent %s revoked by hospital %s", consent.id, ctx.account_id)
        return consent

    @staticmethod
    def _audit(*, ctx: ActorContext, consent: Consent, event_code: str) -> None:
        AuditService.log(
            event_code=event_code,
            entity_type="Consent",
            entity_id=consent.id,
            actor_account_id=ctx.account_id,
            metadata={
                "patient_id": str(consent.patient_id),
                "hospital_id": str(consent.hospital_id),
                "status": consent.status,
            },
        )
