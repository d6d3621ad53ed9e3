# hr_core/patients/models.py
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from hr_core.common.models import UUIDModel


class Gender(models.TextChoices):
    MALE = "male", "Male"
    FEMALE = "female", "Female"
    OTHER = "other", "Other"


class FamilyMember(UUIDModel):
    """
    Dependent managed by a patient account. Cannot log in; prescriptions,
    reports and reminders may be filed under it.
    """
    patient = models.ForeignKey(
        "iam.Account",
        on_delete=models.CASCADE,
        related_name="family_members",
    )
    name = models.CharField(max_length=255)
    age = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(150)])
    gender = models.CharField(max_length=16, choices=Gender.choices)
    relationship = models.CharField(max_length=64)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["patient", "name"]),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.relationship})"
