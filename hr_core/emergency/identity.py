# hr_core/emergency/identity.py
"""
Temporary identities for unidentified emergency patients.

A token is a pure function of (hospital, bed, admission instant, salt), so it
can be recomputed for audits. Callers own uniqueness: EmergencyService.admit
re-derives with an increasing salt while the token collides with an active one.
"""
from __future__ import annotations

import hashlib
from datetime import datetime
from uuid import UUID

TEMPORARY_ID_LENGTH = 8
REFERENCE_PREFIX = "EMG-"


def normalize_bed_label(bed_label: str | None) -> str:
    return (bed_label or "").strip()


def allocate_temporary_id(*, hospital_id: UUID, bed_label: str, at: datetime, salt: int = 0) -> str:
    raw = f"{hospital_id}:{bed_label}:{at.isoformat()}"
    if salt:
        raw = f"{raw}:{salt}"
    digest = hashlib.sha256(raw.encode("utf-8")).hexdigest()
    return digest[:TEMPORARY_ID_LENGTH].upper()


def reference_for(temporary_id: str) -> str:
    return f"{REFERENCE_PREFIX}{temporary_id}"
