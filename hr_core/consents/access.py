# hr_core/consents/access.py
"""
Whether a hospital may see a patient's records right now.

Nothing is cached: each call reads the current admissions and consents, so a
discharge or a revoke takes effect on the next request.
"""
from __future__ import annotations

import enum
from uuid import UUID

from hr_core.admissions.selectors import has_active_admission
from hr_core.common import errors
from hr_core.consents.selectors import get_granted_consent
from hr_core.iam.selectors import get_patient


class AccessGrant(enum.Enum):
    DENIED = "denied"
    ADMISSION = "admission"
    CONSENT = "consent"

    @property
    def allowed(self) -> bool:
        return self is not AccessGrant.DENIED


class AccessResolver:
    @staticmethod
    def resolve(*, hospital_id: UUID, patient_id: UUID) -> AccessGrant:
        patient = get_patient(patient_id)
        if patient is None:
            return AccessGrant.DENIED

        if has_active_admission(hospital_id=hospital_id, patient_id=patient.id, patient_phone=patient.phone):
            return AccessGrant.ADMISSION

        if get_granted_consent(hospital_id=hospital_id, patient_id=patient.id) is not None:
            return AccessGrant.CONSENT

        return AccessGrant.DENIED

    @staticmethod
    def require(*, hospital_id: UUID, patient_id: UUID) -> AccessGrant:
        grant = AccessResolver.resolve(hospital_id=hospital_id, patient_id=patient_id)
        if not grant.allowed:
            raise errors.AccessDenied("Access denied. No consent or active admission.")
        return grant
