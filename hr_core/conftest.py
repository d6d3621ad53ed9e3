# hr_core/conftest.py
import pytest

from hr_core.common.clock import FixedClock
from hr_core.iam.context import context_for_account
from hr_core.iam.models import AccountRole
from hr_core.tests.helpers import client_for, local_dt, make_account, make_hospital, make_patient


@pytest.fixture
def patient(db):
    return make_patient("asha", name="Asha Rao", phone="+919800000001")


@pytest.fixture
def other_patient(db):
    return make_patient("ravi", name="Ravi Kumar", phone="+919800000002")


@pytest.fixture
def hospital(db):
    return make_hospital("cityhospital", name="City Hospital")


@pytest.fixture
def other_hospital(db):
    return make_hospital("greenvalley", name="Green Valley Clinic")


@pytest.fixture
def lab(db):
    return make_account(username="pathlab", role=AccountRole.LAB, name="Path Lab", organization_name="Path Lab")


@pytest.fixture
def patient_ctx(patient):
    return context_for_account(patient)


@pytest.fixture
def other_patient_ctx(other_patient):
    return context_for_account(other_patient)


@pytest.fixture
def hospital_ctx(hospital):
    return context_for_account(hospital)


@pytest.fixture
def other_hospital_ctx(other_hospital):
    return context_for_account(other_hospital)


@pytest.fixture
def lab_ctx(lab):
    return context_for_account(lab)


@pytest.fixture
def patient_client(patient):
    return client_for(patient)


@pytest.fixture
def hospital_client(hospital):
    return client_for(hospital)


@pytest.fixture
def lab_client(lab):
    return client_for(lab)


@pytest.fixture
def fixed_clock():
    return FixedClock(local_dt(2024, 1, 1, 9, 0))
