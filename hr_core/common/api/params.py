# hr_core/common/api/params.py
from __future__ import annotations

from uuid import UUID

from hr_core.common import errors


def path_uuid(value) -> UUID:
    """Path ids that are not UUIDs cannot exist."""
    try:
        return UUID(str(value))
    except ValueError:
        raise errors.NotFound()


def query_uuid(request, name: str) -> UUID | None:
    raw = (request.query_params.get(name) or "").strip()
    if not raw:
        return None
    try:
        return UUID(raw)
    except ValueError:
        raise errors.ValidationError(f"{name} must be a UUID.", details={name: "Invalid UUID"})
