from datetime import timedelta

import pytest

from hr_core.audit.models import AuditEvent
from hr_core.common import errors
from hr_core.emergency.identity import allocate_temporary_id, reference_for
from hr_core.emergency.models import EmergencyPatient
from hr_core.emergency.services import EmergencyService

pytestmark = pytest.mark.django_db


def test_token_is_deterministic_and_uppercase_hex(hospital, fixed_clock):
    at = fixed_clock.now()
    a = allocate_temporary_id(hospital_id=hospital.id, bed_label="B1", at=at)
    b = allocate_temporary_id(hospital_id=hospital.id, bed_label="B1", at=at)

    assert a == b
    assert len(a) == 8
    assert a == a.upper()
    int(a, 16)


def test_token_depends_on_bed_instant_and_salt(hospital, fixed_clock):
    at = fixed_clock.now()
    base = allocate_temporary_id(hospital_id=hospital.id, bed_label="B1", at=at)

    assert base != allocate_temporary_id(hospital_id=hospital.id, bed_label="B2", at=at)
    assert base != allocate_temporary_id(hospital_id=hospital.id, bed_label="B1", at=at + timedelta(seconds=1))
    assert base != allocate_temporary_id(hospital_id=hospital.id, bed_label="B1", at=at, salt=1)


def test_admit_allocates_reference(hospital_ctx, fixed_clock):
    patient = EmergencyService.admit(ctx=hospital_ctx, bed_label=" ICU-3 ", notes="unconscious", clock=fixed_clock)

    assert patient.bed_label == "ICU-3"
    assert patient.is_active
    assert patient.temporary_id == allocate_temporary_id(
        hospital_id=hospital_ctx.account_id, bed_label="ICU-3", at=fixed_clock.now()
    )
    assert patient.reference == reference_for(patient.temporary_id)
    assert patient.reference.startswith("EMG-")
    assert AuditEvent.objects.filter(entity_id=patient.id, event_code="emergency.admitted").exists()


def test_blank_bed_is_rejected(hospital_ctx):
    with pytest.raises(errors.ValidationError):
        EmergencyService.admit(ctx=hospital_ctx, bed_label="   ")


def test_occupied_bed_conflicts(hospital_ctx, fixed_clock):
    EmergencyService.admit(ctx=hospital_ctx, bed_label="B1", clock=fixed_clock)
    fixed_clock.advance(timedelta(minutes=1))

    with pytest.raises(errors.Conflict):
        EmergencyService.admit(ctx=hospital_ctx, bed_label="B1", clock=fixed_clock)


def test_same_bed_in_other_hospital_is_free(hospital_ctx, other_hospital_ctx, fixed_clock):
    EmergencyService.admit(ctx=hospital_ctx, bed_label="B1", clock=fixed_clock)
    other = EmergencyService.admit(ctx=other_hospital_ctx, bed_label="B1", clock=fixed_clock)

    assert other.is_active


def test_bed_is_free_again_after_discharge(hospital_ctx, fixed_clock):
    first = EmergencyService.admit(ctx=hospital_ctx, bed_label="B1", clock=fixed_clock)
    EmergencyService.discharge(ctx=hospital_ctx, emergency_patient_id=first.id)
    fixed_clock.advance(timedelta(minutes=5))

    second = EmergencyService.admit(ctx=hospital_ctx, bed_label="B1", clock=fixed_clock)

    assert second.id != first.id
    assert second.temporary_id != first.temporary_id


def test_colliding_token_is_salted(hospital_ctx, hospital, fixed_clock):
    at = fixed_clock.now()
    clash = allocate_temporary_id(hospital_id=hospital.id, bed_label="B2", at=at)
    EmergencyPatient.objects.create(hospital=hospital, temporary_id=clash, bed_label="B9", admitted_at=at)

    patient = EmergencyService.admit(ctx=hospital_ctx, bed_label="B2", clock=fixed_clock)

    assert patient.temporary_id != clash
    assert patient.temporary_id == allocate_temporary_id(hospital_id=hospital.id, bed_label="B2", at=at, salt=1)


def test_discharge_is_terminal(hospital_ctx, fixed_clock):
    patient = EmergencyService.admit(ctx=hospital_ctx, bed_label="B1", clock=fixed_clock)

    patient = EmergencyService.discharge(ctx=hospital_ctx, emergency_patient_id=patient.id)
    assert not patient.is_active
    assert patient.discharged_at is not None

    with pytest.raises(errors.InvalidTransition):
        EmergencyService.discharge(ctx=hospital_ctx, emergency_patient_id=patient.id)


def test_other_hospital_cannot_discharge(hospital_ctx, other_hospital_ctx, fixed_clock):
    patient = EmergencyService.admit(ctx=hospital_ctx, bed_label="B1", clock=fixed_clock)

    with pytest.raises(errors.NotFound):
        EmergencyService.discharge(ctx=other_hospital_ctx, emergency_patient_id=patient.id)
