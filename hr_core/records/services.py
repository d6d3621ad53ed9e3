# hr_core/records/services.py
from __future__ import annotations

import logging
from typing import Any, Iterable
from uuid import UUID

from django.db import transaction
from django.db.models import Q

from hr_core.common import errors
from hr_core.common.events import publish
from hr_core.consents.access import AccessResolver
from hr_core.emergency.selectors import get_active_emergency_patient
from hr_core.iam.context import ActorContext
from hr_core.iam.models import Account
from hr_core.iam.selectors import find_hospital_by_name, find_patient_by_phone, normalize_phone
from hr_core.notifications.models import NotificationType
from hr_core.notifications.services import NotificationService
from hr_core.patients.selectors import get_family_member
from hr_core.records.models import MedicalReport, Prescription, PrescriptionMedicine, ReportSource
from hr_core.records.subjects import EmergencyPatientRef, PatientRef, RealPatientRef, SubjectKind

logger = logging.getLogger(__name__)

PRESCRIPTION_SAVED = "prescription.saved"


def _clean_medicines(medicines: Iterable[dict[str, Any]]) -> list[PrescriptionMedicine]:
    rows = []
    for position, med in enumerate(medicines or []):
        name = (med.get("name") or "").strip()
        dosage = (med.get("dosage") or "").strip()
        duration = med.get("duration_days")
        if not name or not dosage:
            raise errors.ValidationError("Each medicine needs a name and a dosage.", details={"position": position})
        if duration is None or int(duration) < 1:
            raise errors.ValidationError(
                f"Duration of {name} must be at least one day.",
                details={"position": position},
            )
        rows.append(
            PrescriptionMedicine(
                position=position,
                name=name,
                dosage=dosage,
                timing=(med.get("timing") or "").strip(),
                duration_days=int(duration),
            )
        )
    if not rows:
        raise errors.ValidationError("A prescription needs at least one medicine.")
    return rows


class PrescriptionService:
    @staticmethod
    def resolve_subject(
        *,
        ctx: ActorContext,
        patient_phone: str | None = None,
        patient_name: str | None = None,
        emergency_patient_id: UUID | None = None,
    ) -> tuple[PatientRef, str]:
        """
        Build the subject from request input. Returns (subject, display name).
        Phone-identified subjects are linked to the registered patient if one exists.
        """
        phone = normalize_phone(patient_phone)
        name = (patient_name or "").strip()

        if emergency_patient_id is not None:
            if phone:
                raise errors.ValidationError("Give either an emergency patient or a patient phone, not both.")
            emergency = get_active_emergency_patient(
                hospital_id=ctx.account_id,
                emergency_patient_id=emergency_patient_id,
            )
            subject = EmergencyPatientRef(
                emergency_patient_id=emergency.id,
                reference=emergency.reference,
                bed_label=emergency.bed_label,
            )
            return subject, emergency.display_name

        if not phone or not name:
            raise errors.ValidationError("Patient name and phone are required.")

        patient = find_patient_by_phone(phone, name=name)
        subject = RealPatientRef(phone=phone, name=name, patient_id=patient.id if patient else None)
        return subject, name

    @staticmethod
    @transaction.atomic
    def create(
        *,
        ctx: ActorContext,
        medicines: list[dict[str, Any]],
        patient_phone: str | None = None,
        patient_name: str | None = None,
        emergency_patient_id: UUID | None = None,
        family_member_id: UUID | None = None,
        doctor_name: str = "",
        notes: str = "",
        prescribed_on=None,
    ) -> Prescription:
        subject, display_name = PrescriptionService.resolve_subject(
            ctx=ctx,
            patient_phone=patient_phone,
            patient_name=patient_name,
            emergency_patient_id=emergency_patient_id,
        )
        rows = _clean_medicines(medicines)

        prescription = Prescription(
            hospital_id=ctx.account_id,
            hospital_name=ctx.display_name,
            doctor_name=(doctor_name or "").strip(),
            notes=(notes or "").strip(),
        )
        if prescribed_on is not None:
            prescription.prescribed_on = prescribed_on
        prescription.set_subject(subject, display_name=display_name)

        if family_member_id is not None:
            if not isinstance(subject, RealPatientRef) or not subject.is_registered:
                raise errors.ValidationError("Family members can only be set for registered patients.")
            prescription.family_member = get_family_member(
                patient_id=subject.patient_id,
                family_member_id=family_member_id,
            )

        prescription.save()
        for row in rows:
            row.prescription = prescription
        PrescriptionMedicine.objects.bulk_create(rows)

        publish(PRESCRIPTION_SAVED, {"prescription_id": str(prescription.id)})

        if prescription.patient_id is not None:
            NotificationService.notify(
                recipient_id=prescription.patient_id,
                type=NotificationType.PRESCRIPTION,
                title="New Prescription",
                message=f"New prescription from {ctx.display_name}",
                related_id=prescription.id,
            )

        logger.info(
            "Prescription %s created by hospital %s (%s, %d medicines)",
            prescription.id,
            ctx.account_id,
            prescription.subject_kind,
            len(rows),
        )
        return prescription

    @staticmethod
    @transaction.atomic
    def update(
        *,
        ctx: ActorContext,
        prescription_id: UUID,
        medicines: list[dict[str, Any]],
        notes: str | None = None,
        doctor_name: str | None = None,
    ) -> Prescription:
        prescription = (
            Prescription.objects.select_for_update()
            .filter(id=prescription_id, hospital_id=ctx.account_id)
            .first()
        )
        if prescription is None:
            raise errors.NotFound("Prescription not found.")

        if prescription.subject_kind == SubjectKind.REAL and prescription.patient_id is not None:
            AccessResolver.require(hospital_id=ctx.account_id, patient_id=prescription.patient_id)

        rows = _clean_medicines(medicines)

        if notes is not None:
            prescription.notes = notes.strip()
        if doctor_name is not None:
            prescription.doctor_name = doctor_name.strip()
        prescription.save(update_fields=["notes", "doctor_name", "updated_at"])

        prescription.medicines.all().delete()
        for row in rows:
            row.prescription = prescription
        PrescriptionMedicine.objects.bulk_create(rows)

        publish(PRESCRIPTION_SAVED, {"prescription_id": str(prescription.id)})
        logger.info("Prescription %s updated by hospital %s", prescription.id, ctx.account_id)
        return prescription


class ReportService:
    @staticmethod
    @transaction.atomic
    def upload_lab_report(
        *,
        ctx: ActorContext,
        patient_phone: str,
        patient_name: str,
        hospital_name: str,
        report_type: str,
        report_name: str,
        file_reference: str,
        file_name: str = "",
        description: str = "",
        reported_on=None,
    ) -> MedicalReport:
        phone = normalize_phone(patient_phone)
        name = (patient_name or "").strip()
        if not phone or not name:
            raise errors.ValidationError("Patient name and phone are required.")

        patient = find_patient_by_phone(phone, name=name)
        hospital = find_hospital_by_name(hospital_name)

        report = MedicalReport(
            uploaded_by=ReportSource.LAB,
            lab_id=ctx.account_id,
            lab_name=ctx.display_name,
            hospital=hospital,
            hospital_name=(hospital.display_name if hospital else (hospital_name or "").strip()),
            **ReportService._report_fields(
                report_type=report_type,
                report_name=report_name,
                file_reference=file_reference,
                file_name=file_name,
                description=description,
            ),
        )
        if reported_on is not None:
            report.reported_on = reported_on
        report.set_subject(RealPatientRef(phone=phone, name=name, patient_id=patient.id if patient else None))
        report.save()

        if patient is not None:
            ReportService._notify_patient(report=report, patient=patient, source=ctx.display_name)

        logger.info("Lab %s uploaded report %s (patient matched: %s)", ctx.account_id, report.id, patient is not None)
        return report

    @staticmethod
    @transaction.atomic
    def upload_emergency_report(
        *,
        ctx: ActorContext,
        emergency_patient_id: UUID,
        report_type: str,
        report_name: str,
        file_reference: str,
        file_name: str = "",
        description: str = "",
        reported_on=None,
    ) -> MedicalReport:
        emergency = get_active_emergency_patient(hospital_id=ctx.account_id, emergency_patient_id=emergency_patient_id)

        report = MedicalReport(
            uploaded_by=ReportSource.HOSPITAL,
            hospital_id=ctx.account_id,
            hospital_name=ctx.display_name,
            **ReportService._report_fields(
                report_type=report_type,
                report_name=report_name,
                file_reference=file_reference,
                file_name=file_name,
                description=description,
            ),
        )
        if reported_on is not None:
            report.reported_on = reported_on
        report.set_subject(
            EmergencyPatientRef(emergency_patient_id=emergency.id, reference=emergency.reference),
            display_name=emergency.display_name,
        )
        report.save()

        logger.info("Hospital %s uploaded report %s for %s", ctx.account_id, report.id, emergency.reference)
        return report

    @staticmethod
    def _report_fields(
        *,
        report_type: str,
        report_name: str,
        file_reference: str,
        file_name: str,
        description: str,
    ) -> dict[str, str]:
        report_type = (report_type or "").strip()
        report_name = (report_name or "").strip()
        file_reference = (file_reference or "").strip()
        if not report_type or not report_name:
            raise errors.ValidationError("Report type and name are required.")
        if not file_reference:
            raise errors.ValidationError("A stored file reference is required.")
        return {
            "report_type": report_type,
            "report_name": report_name,
            "file_reference": file_reference,
            "file_name": (file_name or "").strip(),
            "description": (description or "").strip(),
        }

    @staticmethod
    def _notify_patient(*, report: MedicalReport, patient: Account, source: str) -> None:
        NotificationService.notify(
            recipient_id=patient.id,
            type=NotificationType.REPORT,
            title="New Report",
            message=f"New {report.report_type} report from {source}",
            related_id=report.id,
        )


class RecordLinkService:
    @staticmethod
    @transaction.atomic
    def claim_by_phone(*, patient: Account) -> tuple[int, int]:
        """
        Attach phone-only prescriptions and reports to the patient who now owns
        that phone. Returns (prescriptions linked, reports linked).
        """
        if not patient.phone:
            return 0, 0

        unclaimed = Q(subject_kind=SubjectKind.REAL, patient__isnull=True, patient_phone=patient.phone)

        prescription_ids = list(Prescription.objects.filter(unclaimed).values_list("id", flat=True))
        linked_prescriptions = Prescription.objects.filter(id__in=prescription_ids).update(patient=patient)
        linked_reports = MedicalReport.objects.filter(unclaimed).update(patient=patient)

        for prescription_id in prescription_ids:
            publish(PRESCRIPTION_SAVED, {"prescription_id": str(prescription_id)})

        if linked_prescriptions or linked_reports:
            logger.info(
                "Linked %d prescriptions and %d reports to patient %s",
                linked_prescriptions,
                linked_reports,
                patient.id,
            )
        return linked_prescriptions, linked_reports
