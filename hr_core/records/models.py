# hr_core/records/models.py
from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone

from hr_core.common.models import UUIDModel
from hr_core.records.subjects import EmergencyPatientRef, PatientRef, RealPatientRef, SubjectKind


class SubjectLinkedRecord(UUIDModel):
    """
    Persistence of the PatientRef union.

    REAL rows carry phone/name and optionally the registered patient (and a
    family member of that patient). EMERGENCY rows link the emergency patient
    and keep its reference in `patient_phone` / display name in `patient_name`.
    """
    subject_kind = models.CharField(max_length=16, choices=SubjectKind.choices, default=SubjectKind.REAL)

    patient = models.ForeignKey(
        "iam.Account",
        on_delete=models.PROTECT,
        related_name="+",
        null=True,
        blank=True,
    )
    patient_name = models.CharField(max_length=255)
    patient_phone = models.CharField(max_length=32, db_index=True)
    family_member = models.ForeignKey(
        "patients.FamilyMember",
        on_delete=models.SET_NULL,
        related_name="+",
        null=True,
        blank=True,
    )
    emergency_patient = models.ForeignKey(
        "emergency.EmergencyPatient",
        on_delete=models.PROTECT,
        related_name="+",
        null=True,
        blank=True,
    )

    class Meta:
        abstract = True
        constraints = [
            models.CheckConstraint(
                condition=(
                    (Q(subject_kind=SubjectKind.REAL) & Q(emergency_patient__isnull=True))
                    | (
                        Q(subject_kind=SubjectKind.EMERGENCY)
                        & Q(emergency_patient__isnull=False)
                        & Q(patient__isnull=True)
                        & Q(family_member__isnull=True)
                    )
                ),
                name="%(app_label)s_%(class)s_single_subject",
            ),
        ]

    @property
    def subject(self) -> PatientRef:
        if self.subject_kind == SubjectKind.EMERGENCY:
            return EmergencyPatientRef(
                emergency_patient_id=self.emergency_patient_id,
                reference=self.patient_phone,
            )
        return RealPatientRef(phone=self.patient_phone, name=self.patient_name, patient_id=self.patient_id)

    def set_subject(self, subject: PatientRef, *, display_name: str = "") -> None:
        if isinstance(subject, EmergencyPatientRef):
            self.subject_kind = SubjectKind.EMERGENCY
            self.emergency_patient_id = subject.emergency_patient_id
            self.patient_id = None
            self.family_member_id = None
            self.patient_phone = subject.reference
            self.patient_name = display_name or subject.reference
        else:
            self.subject_kind = SubjectKind.REAL
            self.emergency_patient_id = None
            self.patient_id = subject.patient_id
            self.patient_phone = subject.phone
            self.patient_name = subject.name


class Prescription(SubjectLinkedRecord):
    hospital = models.ForeignKey(
        "iam.Account",
        on_delete=models.PROTECT,
        related_name="prescriptions_issued",
    )
    hospital_name = models.CharField(max_length=255)
    doctor_name = models.CharField(max_length=255, blank=True, default="")
    prescribed_on = models.DateField(default=timezone.localdate, db_index=True)
    notes = models.TextField(blank=True, default="")

    class Meta(SubjectLinkedRecord.Meta):
        ordering = ["-prescribed_on", "-created_at"]
        indexes = [
            models.Index(fields=["hospital", "prescribed_on"]),
            models.Index(fields=["patient", "prescribed_on"]),
        ]

    def __str__(self) -> str:
        return f"Prescription {self.id} for {self.patient_name}"


class PrescriptionMedicine(models.Model):
    prescription = models.ForeignKey(Prescription, on_delete=models.CASCADE, related_name="medicines")
    position = models.PositiveSmallIntegerField(default=0)

    name = models.CharField(max_length=255)
    dosage = models.CharField(max_length=128)
    timing = models.CharField(max_length=64, blank=True, default="")
    duration_days = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    class Meta:
        ordering = ["position", "id"]

    def __str__(self) -> str:
        return f"{self.name} {self.dosage}"


class ReportSource(models.TextChoices):
    HOSPITAL = "hospital", "Hospital"
    LAB = "lab", "Lab"


class MedicalReport(SubjectLinkedRecord):
    """
    Uploaded diagnostic report. Immutable once stored; the only later change is
    linking a phone-only report to the patient who registered with that phone,
    done with a queryset update.
    """
    uploaded_by = models.CharField(max_length=16, choices=ReportSource.choices, db_index=True)
    hospital = models.ForeignKey(
        "iam.Account",
        on_delete=models.PROTECT,
        related_name="reports_addressed",
        null=True,
        blank=True,
    )
    hospital_name = models.CharField(max_length=255, blank=True, default="")
    lab = models.ForeignKey(
        "iam.Account",
        on_delete=models.PROTECT,
        related_name="reports_uploaded",
        null=True,
        blank=True,
    )
    lab_name = models.CharField(max_length=255, blank=True, default="")

    report_type = models.CharField(max_length=128, db_index=True)
    report_name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    file_reference = models.CharField(max_length=512)
    file_name = models.CharField(max_length=255, blank=True, default="")
    reported_on = models.DateField(default=timezone.localdate, db_index=True)

    class Meta(SubjectLinkedRecord.Meta):
        ordering = ["-reported_on", "-created_at"]
        indexes = [
            models.Index(fields=["hospital", "reported_on"]),
            models.Index(fields=["lab", "reported_on"]),
            models.Index(fields=["patient", "reported_on"]),
        ]

    def __str__(self) -> str:
        return f"{self.report_name} ({self.report_type})"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("MedicalReport is immutable.")
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("MedicalReport is immutable.")
