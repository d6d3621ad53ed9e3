# hr_core/tests/helpers.py
from __future__ import annotations

from datetime import datetime

from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient

from hr_core.iam.models import Account, AccountRole


def make_account(
    *,
    username: str,
    role: str,
    name: str,
    phone: str = "",
    organization_name: str = "",
) -> Account:
    user = get_user_model().objects.create_user(username=username, password="testpass")
    return Account.objects.create(
        user=user,
        role=role,
        name=name,
        phone=phone,
        organization_name=organization_name,
        is_verified=True,
    )


def make_patient(username: str, *, name: str, phone: str) -> Account:
    return make_account(username=username, role=AccountRole.PATIENT, name=name, phone=phone)


def make_hospital(username: str, *, name: str) -> Account:
    return make_account(username=username, role=AccountRole.HOSPITAL, name=name, organization_name=name)


def client_for(account: Account) -> APIClient:
    c = APIClient()
    c.force_authenticate(user=account.user)
    return c


def local_dt(year, month, day, hour=0, minute=0) -> datetime:
    return timezone.make_aware(datetime(year, month, day, hour, minute))


def medicine(name="Paracetamol", dosage="500mg", timing="", duration_days=5) -> dict:
    return {"name": name, "dosage": dosage, "timing": timing, "duration_days": duration_days}
