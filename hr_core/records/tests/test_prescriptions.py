import pytest

from hr_core.admissions.services import AdmissionService
from hr_core.common import errors
from hr_core.emergency.services import EmergencyService
from hr_core.notifications.models import Notification, NotificationType
from hr_core.patients.services import FamilyMemberService
from hr_core.records.models import Prescription
from hr_core.records.services import PrescriptionService, RecordLinkService
from hr_core.records.subjects import SubjectKind
from hr_core.reminders.models import MedicineReminder
from hr_core.tests.helpers import make_patient, medicine

pytestmark = pytest.mark.django_db


def _create(hospital_ctx, **kwargs):
    kwargs.setdefault("medicines", [medicine(timing="morning"), medicine(name="Cetirizine", dosage="10mg")])
    return PrescriptionService.create(ctx=hospital_ctx, **kwargs)


def test_registered_patient_gets_reminders_and_notification(hospital_ctx, patient):
    prescription = _create(hospital_ctx, patient_phone=patient.phone, patient_name="Asha Rao")

    assert prescription.patient_id == patient.id
    assert prescription.hospital_name == "City Hospital"
    assert [m.name for m in prescription.medicines.all()] == ["Paracetamol", "Cetirizine"]

    # morning -> one slot, blank timing -> three default slots
    reminders = MedicineReminder.objects.filter(prescription=prescription)
    assert reminders.count() == 4
    assert sorted(reminders.values_list("reminder_time", flat=True)) == ["09:00", "09:00", "14:00", "21:00"]
    assert set(reminders.values_list("patient_id", flat=True)) == {patient.id}

    note = Notification.objects.get(recipient=patient)
    assert note.type == NotificationType.PRESCRIPTION
    assert note.related_id == prescription.id


def test_unregistered_patient_gets_no_reminders(hospital_ctx):
    prescription = _create(hospital_ctx, patient_phone="+919833333333", patient_name="Not Yet")

    assert prescription.patient_id is None
    assert prescription.subject_kind == SubjectKind.REAL
    assert not MedicineReminder.objects.exists()
    assert not Notification.objects.exists()


def test_emergency_subject_gets_no_reminders(hospital_ctx, fixed_clock):
    emergency = EmergencyService.admit(ctx=hospital_ctx, bed_label="B4", clock=fixed_clock)

    prescription = _create(hospital_ctx, emergency_patient_id=emergency.id)

    assert prescription.subject_kind == SubjectKind.EMERGENCY
    assert prescription.emergency_patient_id == emergency.id
    assert prescription.patient_phone == emergency.reference
    assert prescription.patient_name == "Emergency Patient - Bed B4"
    assert not MedicineReminder.objects.exists()


def test_both_subjects_are_rejected(hospital_ctx, patient, fixed_clock):
    emergency = EmergencyService.admit(ctx=hospital_ctx, bed_label="B4", clock=fixed_clock)

    with pytest.raises(errors.ValidationError):
        _create(hospital_ctx, emergency_patient_id=emergency.id, patient_phone=patient.phone, patient_name="Asha")


def test_discharged_emergency_patient_is_not_found(hospital_ctx, fixed_clock):
    emergency = EmergencyService.admit(ctx=hospital_ctx, bed_label="B4", clock=fixed_clock)
    EmergencyService.discharge(ctx=hospital_ctx, emergency_patient_id=emergency.id)

    with pytest.raises(errors.NotFound):
        _create(hospital_ctx, emergency_patient_id=emergency.id)


def test_medicines_are_validated(hospital_ctx, patient):
    with pytest.raises(errors.ValidationError):
        _create(hospital_ctx, patient_phone=patient.phone, patient_name="Asha", medicines=[])

    with pytest.raises(errors.ValidationError):
        _create(hospital_ctx, patient_phone=patient.phone, patient_name="Asha", medicines=[medicine(duration_days=0)])

    assert not Prescription.objects.exists()


def test_family_member_prescription(hospital_ctx, patient_ctx, patient):
    member = FamilyMemberService.add(ctx=patient_ctx, name="Meera", age=8, gender="female", relationship="Daughter")

    prescription = _create(hospital_ctx, patient_phone=patient.phone, patient_name="Asha", family_member_id=member.id)

    assert prescription.family_member_id == member.id
    assert set(MedicineReminder.objects.values_list("family_member_id", flat=True)) == {member.id}


def test_update_needs_access_and_regenerates(hospital_ctx, patient):
    prescription = _create(hospital_ctx, patient_phone=patient.phone, patient_name="Asha")

    with pytest.raises(errors.AccessDenied):
        PrescriptionService.update(ctx=hospital_ctx, prescription_id=prescription.id, medicines=[medicine()])

    AdmissionService.admit(ctx=hospital_ctx, patient_phone=patient.phone, patient_name=patient.name)
    PrescriptionService.update(
        ctx=hospital_ctx,
        prescription_id=prescription.id,
        medicines=[medicine(name="Amoxicillin", timing="9:30 pm", duration_days=7)],
        notes="switch antibiotic",
    )

    prescription.refresh_from_db()
    assert prescription.notes == "switch antibiotic"
    assert [m.name for m in prescription.medicines.all()] == ["Amoxicillin"]

    reminder = MedicineReminder.objects.get(prescription=prescription)
    assert reminder.medicine_name == "Amoxicillin"
    assert reminder.reminder_time == "21:30"
    assert (reminder.end_date - reminder.start_date).days == 7


def test_update_by_other_hospital_is_not_found(hospital_ctx, other_hospital_ctx):
    prescription = _create(hospital_ctx, patient_phone="+919833333333", patient_name="Not Yet")

    with pytest.raises(errors.NotFound):
        PrescriptionService.update(ctx=other_hospital_ctx, prescription_id=prescription.id, medicines=[medicine()])


def test_claim_links_phone_only_records(hospital_ctx):
    prescription = _create(hospital_ctx, patient_phone="+919844444444", patient_name="Late Joiner")
    assert not MedicineReminder.objects.exists()

    late = make_patient("latejoiner", name="Late Joiner", phone="+919844444444")
    assert RecordLinkService.claim_by_phone(patient=late) == (1, 0)

    prescription.refresh_from_db()
    assert prescription.patient_id == late.id
    assert MedicineReminder.objects.filter(patient=late).count() == 4

    assert RecordLinkService.claim_by_phone(patient=late) == (0, 0)
