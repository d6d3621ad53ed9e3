import pytest

from hr_core.common import errors
from hr_core.patients.services import FamilyMemberService
from hr_core.tests.helpers import client_for

pytestmark = pytest.mark.django_db

URL = "/api/v1/patient/family-members/"


def test_add_and_list(patient_client):
    r = patient_client.post(URL, {"name": "Meera", "age": 8, "gender": "female", "relationship": "Daughter"}, format="json")
    assert r.status_code == 201, r.data

    r = patient_client.get(URL)
    assert r.status_code == 200, r.data
    assert [m["name"] for m in r.data] == ["Meera"]


def test_members_are_private(patient_ctx, other_patient):
    FamilyMemberService.add(ctx=patient_ctx, name="Meera", age=8, gender="female", relationship="Daughter")

    assert client_for(other_patient).get(URL).data == []


@pytest.mark.parametrize("age", [0, 151])
def test_age_bounds(patient_client, age):
    r = patient_client.post(URL, {"name": "X", "age": age, "gender": "male", "relationship": "Son"}, format="json")
    assert r.status_code == 400
    assert r.data["error"]["code"] == "validation_error"


def test_service_rejects_unknown_gender(patient_ctx):
    with pytest.raises(errors.ValidationError):
        FamilyMemberService.add(ctx=patient_ctx, name="X", age=30, gender="unknown", relationship="Brother")


def test_hospital_cannot_add(hospital_client):
    r = hospital_client.post(URL, {"name": "X", "age": 30, "gender": "male", "relationship": "Son"}, format="json")
    assert r.status_code == 403
