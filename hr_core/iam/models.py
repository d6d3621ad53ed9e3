# hr_core/iam/models.py
from __future__ import annotations

from django.conf import settings
from django.db import models
from django.db.models import Q

from hr_core.common.models import UUIDModel


class AccountRole(models.TextChoices):
    PATIENT = "PATIENT", "Patient"
    HOSPITAL = "HOSPITAL", "Hospital"
    LAB = "LAB", "Lab"


class Account(UUIDModel):
    """
    Application profile of an authenticated user.

    The Django auth user carries credentials; the account carries the role
    and the identity used by every domain rule. Patients are matched to
    records created before they registered through `phone`.
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="account",
    )
    role = models.CharField(max_length=16, choices=AccountRole.choices, db_index=True)

    name = models.CharField(max_length=255)
    organization_name = models.CharField(max_length=255, blank=True, default="")
    phone = models.CharField(max_length=32, blank=True, default="", db_index=True)
    address = models.TextField(blank=True, default="")

    is_verified = models.BooleanField(default=False)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["phone"],
                condition=~Q(phone=""),
                name="uq_account_phone_when_set",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.display_name} ({self.role})"

    @property
    def display_name(self) -> str:
        return self.organization_name or self.name

    @property
    def is_patient(self) -> bool:
        return self.role == AccountRole.PATIENT

    @property
    def is_hospital(self) -> bool:
        return self.role == AccountRole.HOSPITAL

    @property
    def is_lab(self) -> bool:
        return self.role == AccountRole.LAB
