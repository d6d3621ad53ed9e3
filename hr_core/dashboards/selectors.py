# hr_core/dashboards/selectors.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from hr_core.admissions.models import Admission
from hr_core.admissions.selectors import admissions_for
from hr_core.consents.models import Consent
from hr_core.consents.selectors import list_pending_for_hospital
from hr_core.emergency.models import EmergencyPatient
from hr_core.emergency.selectors import emergency_patients_for
from hr_core.iam.models import Account
from hr_core.notifications.selectors import notifications_for
from hr_core.patients.models import FamilyMember
from hr_core.patients.selectors import family_members_for
from hr_core.records.models import MedicalReport, Prescription
from hr_core.records.selectors import count_prescriptions_issued_on, prescriptions_for_patient, reports_for_patient
from hr_core.reminders.models import MedicineReminder
from hr_core.reminders.selectors import upcoming_reminders_for_patient

EMERGENCY_PREVIEW = 5
RECENT_RECORDS = 5
UPCOMING_REMINDERS = 10


@dataclass
class HospitalDashboard:
    prescriptions_today: int
    admitted_patients: list[Admission]
    emergency_patients: list[EmergencyPatient]
    pending_consents: list[Consent]


@dataclass
class PatientDashboard:
    upcoming_reminders: list[MedicineReminder]
    recent_prescriptions: list[Prescription]
    recent_reports: list[MedicalReport]
    family_members: list[FamilyMember]
    unread_notifications: int


def hospital_dashboard(*, hospital_id: UUID, today: date) -> HospitalDashboard:
    return HospitalDashboard(
        prescriptions_today=count_prescriptions_issued_on(hospital_id=hospital_id, day=today),
        admitted_patients=list(admissions_for(hospital_id=hospital_id, active_only=True)),
        emergency_patients=list(emergency_patients_for(hospital_id=hospital_id)[:EMERGENCY_PREVIEW]),
        pending_consents=list(list_pending_for_hospital(hospital_id=hospital_id)),
    )


def patient_dashboard(*, patient: Account, today: date) -> PatientDashboard:
    return PatientDashboard(
        upcoming_reminders=list(upcoming_reminders_for_patient(patient_id=patient.id, today=today)[:UPCOMING_REMINDERS]),
        recent_prescriptions=list(prescriptions_for_patient(patient=patient)[:RECENT_RECORDS]),
        recent_reports=list(reports_for_patient(patient=patient)[:RECENT_RECORDS]),
        family_members=list(family_members_for(patient_id=patient.id)),
        unread_notifications=notifications_for(recipient_id=patient.id, unread_only=True).count(),
    )
