# hr_core/reminders/generator.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from hr_core.common import errors
from hr_core.reminders.timing import parse_timing


@dataclass(frozen=True)
class ReminderSpec:
    medicine_name: str
    dosage: str
    reminder_time: str
    start_date: date
    end_date: date  # exclusive


def expand_medicines(*, start: date, medicines: Iterable) -> list[ReminderSpec]:
    """
    One ReminderSpec per (medicine, slot), in medicine order then slot order.
    `medicines` items need name, dosage, timing and duration_days attributes.
    """
    specs: list[ReminderSpec] = []
    for medicine in medicines:
        duration = medicine.duration_days
        if duration is None or duration < 1:
            raise errors.ValidationError(f"Duration of {medicine.name} must be at least one day.")

        end = start + timedelta(days=duration)
        for slot in parse_timing(medicine.timing):
            specs.append(
                ReminderSpec(
                    medicine_name=medicine.name,
                    dosage=medicine.dosage,
                    reminder_time=slot,
                    start_date=start,
                    end_date=end,
                )
            )
    return specs


def generate(prescription) -> list[ReminderSpec]:
    return expand_medicines(start=prescription.prescribed_on, medicines=prescription.medicines.all())
