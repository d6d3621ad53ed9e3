# hr_core/records/subjects.py
"""
Who a prescription or report is about.

Exactly one of two shapes:
  RealPatientRef       a person known by phone, registered (patient_id set) or not yet
  EmergencyPatientRef  an unidentified emergency patient, known by temporary reference
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union
from uuid import UUID

from django.db import models


class SubjectKind(models.TextChoices):
    REAL = "REAL", "Real patient"
    EMERGENCY = "EMERGENCY", "Emergency patient"


@dataclass(frozen=True)
class RealPatientRef:
    phone: str
    name: str
    patient_id: UUID | None = None

    kind = SubjectKind.REAL

    @property
    def is_registered(self) -> bool:
        return self.patient_id is not None


@dataclass(frozen=True)
class EmergencyPatientRef:
    emergency_patient_id: UUID
    reference: str
    bed_label: str = ""

    kind = SubjectKind.EMERGENCY


PatientRef = Union[RealPatientRef, EmergencyPatientRef]
