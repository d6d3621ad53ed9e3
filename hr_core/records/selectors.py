# hr_core/records/selectors.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from django.db.models import Q, QuerySet

from hr_core.common import errors
from hr_core.consents.access import AccessGrant, AccessResolver
from hr_core.consents.selectors import get_granted_consent
from hr_core.iam.models import Account
from hr_core.iam.selectors import get_patient
from hr_core.records.models import MedicalReport, Prescription, ReportSource
from hr_core.records.subjects import SubjectKind


def _owned_by(patient: Account, family_member_id: UUID | None) -> Q:
    """
    Records of the patient (or of one of their family members).
    Phone-only rows count as the patient's own records.
    """
    if family_member_id is not None:
        return Q(subject_kind=SubjectKind.REAL, patient_id=patient.id, family_member_id=family_member_id)

    mine = Q(patient_id=patient.id)
    if patient.phone:
        mine |= Q(patient__isnull=True, patient_phone=patient.phone)
    return Q(subject_kind=SubjectKind.REAL, family_member__isnull=True) & mine


def prescriptions_for_patient(*, patient: Account, family_member_id: UUID | None = None) -> QuerySet[Prescription]:
    return (
        Prescription.objects.filter(_owned_by(patient, family_member_id))
        .prefetch_related("medicines")
        .order_by("-prescribed_on", "-created_at")
    )


def reports_for_patient(*, patient: Account, family_member_id: UUID | None = None) -> QuerySet[MedicalReport]:
    return MedicalReport.objects.filter(_owned_by(patient, family_member_id)).order_by("-reported_on", "-created_at")


def prescriptions_for_hospital(*, hospital_id: UUID) -> QuerySet[Prescription]:
    return (
        Prescription.objects.filter(hospital_id=hospital_id)
        .prefetch_related("medicines")
        .order_by("-prescribed_on", "-created_at")
    )


def reports_for_hospital(*, hospital_id: UUID) -> QuerySet[MedicalReport]:
    """Reports the hospital uploaded plus lab reports addressed to it."""
    return MedicalReport.objects.filter(hospital_id=hospital_id).order_by("-reported_on", "-created_at")


def reports_for_lab(*, lab_id: UUID) -> QuerySet[MedicalReport]:
    return MedicalReport.objects.filter(lab_id=lab_id, uploaded_by=ReportSource.LAB).order_by("-reported_on", "-created_at")


def prescriptions_for_emergency_patient(*, hospital_id: UUID, emergency_patient_id: UUID) -> QuerySet[Prescription]:
    return (
        Prescription.objects.filter(hospital_id=hospital_id, emergency_patient_id=emergency_patient_id)
        .prefetch_related("medicines")
        .order_by("-prescribed_on", "-created_at")
    )


def reports_for_emergency_patient(*, hospital_id: UUID, emergency_patient_id: UUID) -> QuerySet[MedicalReport]:
    return MedicalReport.objects.filter(
        hospital_id=hospital_id,
        emergency_patient_id=emergency_patient_id,
    ).order_by("-reported_on", "-created_at")


def count_prescriptions_issued_on(*, hospital_id: UUID, day: date) -> int:
    return Prescription.objects.filter(hospital_id=hospital_id, prescribed_on=day).count()


@dataclass
class PatientRecord:
    patient: Account
    grant: AccessGrant
    consent_id: UUID | None
    prescriptions: list[Prescription] = field(default_factory=list)
    reports: list[MedicalReport] = field(default_factory=list)


def patient_record_for_hospital(*, hospital_id: UUID, patient_id: UUID) -> PatientRecord:
    """
    Full record of a patient as seen by a hospital holding access.
    Unknown patients are refused exactly like patients without access.
    """
    grant = AccessResolver.require(hospital_id=hospital_id, patient_id=patient_id)
    patient = get_patient(patient_id)
    if patient is None:
        raise errors.AccessDenied("Access denied. No consent or active admission.")

    consent = get_granted_consent(hospital_id=hospital_id, patient_id=patient.id)

    own = Q(subject_kind=SubjectKind.REAL, patient_id=patient.id)
    return PatientRecord(
        patient=patient,
        grant=grant,
        consent_id=consent.id if consent else None,
        prescriptions=list(
            Prescription.objects.filter(own).prefetch_related("medicines").order_by("-prescribed_on", "-created_at")
        ),
        reports=list(MedicalReport.objects.filter(own).order_by("-reported_on", "-created_at")),
    )
