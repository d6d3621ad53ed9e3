import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

pytestmark = pytest.mark.django_db


def test_me_requires_auth():
    res = APIClient().get("/api/me/")
    assert res.status_code in (401, 403)


def test_me_returns_account_profile(patient_client, patient):
    res = patient_client.get("/api/v1/me/")

    assert res.status_code == 200, res.data
    assert res.data["id"] == str(patient.id)
    assert res.data["role"] == "PATIENT"
    assert res.data["phone"] == patient.phone


def test_login_sets_cookies(patient, settings):
    res = APIClient().post(
        "/api/v1/auth/login/",
        {"username": patient.user.username, "password": "testpass"},
        format="json",
    )

    assert res.status_code == 200, res.data
    assert settings.SIMPLE_JWT["AUTH_COOKIE"] in res.cookies
    assert settings.SIMPLE_JWT["AUTH_COOKIE_REFRESH"] in res.cookies


def test_bearer_token_authenticates(hospital):
    access = str(RefreshToken.for_user(hospital.user).access_token)
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")

    res = client.get("/api/v1/me/")
    assert res.status_code == 200, res.data
    assert res.data["role"] == "HOSPITAL"


def test_cookie_token_authenticates(lab, settings):
    access = str(RefreshToken.for_user(lab.user).access_token)
    client = APIClient()
    client.cookies[settings.SIMPLE_JWT["AUTH_COOKIE"]] = access

    res = client.get("/api/v1/me/")
    assert res.status_code == 200, res.data
    assert res.data["role"] == "LAB"


def test_user_without_account_is_forbidden(db):
    from django.contrib.auth import get_user_model

    staff = get_user_model().objects.create_user(username="staff", password="x")
    client = APIClient()
    client.force_authenticate(user=staff)

    res = client.get("/api/v1/notifications/")
    assert res.status_code == 403
