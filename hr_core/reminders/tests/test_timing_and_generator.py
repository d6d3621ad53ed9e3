from datetime import date
from types import SimpleNamespace

import pytest

from hr_core.common import errors
from hr_core.reminders.generator import expand_medicines
from hr_core.reminders.timing import DEFAULT_SLOTS, parse_timing


@pytest.mark.parametrize(
    "timing,expected",
    [
        ("", list(DEFAULT_SLOTS)),
        (None, list(DEFAULT_SLOTS)),
        ("   ", list(DEFAULT_SLOTS)),
        ("8:05", ["08:05"]),
        ("21:30", ["21:30"]),
        ("9:30 pm", ["21:30"]),
        ("9:30PM", ["21:30"]),
        ("12:15 am", ["00:15"]),
        ("12:00 pm", ["12:00"]),
        ("Morning", ["09:00"]),
        ("lunch", ["13:00"]),
        ("dinner", ["20:00"]),
        ("night", ["21:00"]),
        ("25:00", list(DEFAULT_SLOTS)),
        ("13:00 pm", list(DEFAULT_SLOTS)),
        ("9:75", list(DEFAULT_SLOTS)),
        ("twice daily", list(DEFAULT_SLOTS)),
    ],
)
def test_parse_timing(timing, expected):
    assert parse_timing(timing) == expected


def _med(name, timing="", duration_days=3, dosage="1 tab"):
    return SimpleNamespace(name=name, dosage=dosage, timing=timing, duration_days=duration_days)


def test_expand_medicines_orders_by_medicine_then_slot():
    start = date(2024, 3, 1)

    specs = expand_medicines(start=start, medicines=[_med("A", "night", 2), _med("B")])

    assert [(s.medicine_name, s.reminder_time) for s in specs] == [
        ("A", "21:00"),
        ("B", "09:00"),
        ("B", "14:00"),
        ("B", "21:00"),
    ]
    assert specs[0].start_date == start
    assert specs[0].end_date == date(2024, 3, 3)
    assert specs[1].end_date == date(2024, 3, 4)


def test_expand_medicines_rejects_zero_duration():
    with pytest.raises(errors.ValidationError):
        expand_medicines(start=date(2024, 3, 1), medicines=[_med("A", duration_days=0)])


def test_no_medicines_no_specs():
    assert expand_medicines(start=date(2024, 3, 1), medicines=[]) == []
