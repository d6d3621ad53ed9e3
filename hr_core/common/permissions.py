# hr_core/common/permissions.py

from __future__ import annotations

from rest_framework.permissions import BasePermission, SAFE_METHODS

# Account roles (hr_core.iam.models.AccountRole values)
ROLE_PATIENT = "PATIENT"
ROLE_HOSPITAL = "HOSPITAL"
ROLE_LAB = "LAB"

ALL_ROLES = {ROLE_PATIENT, ROLE_HOSPITAL, ROLE_LAB}


def _account_role(user) -> str | None:
    """
    Role of the account profile attached to the Django user.
    Users without an account profile (e.g. admin-site staff) get no API role.
    """
    if not user or not getattr(user, "is_authenticated", False):
        return None
    account = getattr(user, "account", None)
    if account is None:
        return None
    return account.role


class BaseRolePermission(BasePermission):
    """
    Role-based access per viewset action.

    - Requires an authenticated user with an account profile.
    - Uses allowed_roles_per_action; unknown actions are denied.
    - SAFE requests with an unknown action fall back to list/retrieve.
    """
    message = "You do not have permission to perform this action."

    # Override in subclasses: dict of action -> set of allowed roles
    allowed_roles_per_action: dict[str, set[str]] = {}

    def _infer_action(self, request, view) -> str | None:
        action = getattr(view, "action", None)
        if action:
            return action

        # APIView (no router action)
        kwargs = getattr(view, "kwargs", {}) or {}
        is_detail = "pk" in kwargs or "id" in kwargs

        method = request.method.upper()
        if method in ("GET", "HEAD", "OPTIONS"):
            return "retrieve" if is_detail else "list"
        if method == "POST":
            return "create"
        if method == "PUT":
            return "update"
        if method == "PATCH":
            return "partial_update"
        if method == "DELETE":
            return "destroy"
        return None

    def has_permission(self, request, view) -> bool:
        role = _account_role(request.user)
        if role is None:
            return False

        action = self._infer_action(request, view)
        allowed = self.allowed_roles_per_action.get(action)

        if allowed is None and request.method in SAFE_METHODS:
            kwargs = getattr(view, "kwargs", {}) or {}
            is_detail = "pk" in kwargs or "id" in kwargs
            allowed = self.allowed_roles_per_action.get("retrieve" if is_detail else "list")

        if allowed is not None:
            return role in allowed

        return False

    def has_object_permission(self, request, view, obj) -> bool:
        return self.has_permission(request, view)


class AccountPermission(BaseRolePermission):
    """Any account holder (profile, notifications)."""
    allowed_roles_per_action = {
        "list": ALL_ROLES,
        "retrieve": ALL_ROLES,
        "mark_read": ALL_ROLES,
    }


class FamilyMemberPermission(BaseRolePermission):
    allowed_roles_per_action = {
        "list": {ROLE_PATIENT},
        "create": {ROLE_PATIENT},
    }


class PatientRecordPermission(BaseRolePermission):
    """Patient portal reads: own prescriptions, reports, dashboard."""
    allowed_roles_per_action = {
        "list": {ROLE_PATIENT},
        "retrieve": {ROLE_PATIENT},
    }


class PatientConsentPermission(BaseRolePermission):
    allowed_roles_per_action = {
        "list": {ROLE_PATIENT},
        "respond": {ROLE_PATIENT},
    }


class ReminderPermission(BaseRolePermission):
    allowed_roles_per_action = {
        "list": {ROLE_PATIENT},
        "complete": {ROLE_PATIENT},
        "toggle": {ROLE_PATIENT},
    }


class HospitalConsentPermission(BaseRolePermission):
    allowed_roles_per_action = {
        "list": {ROLE_HOSPITAL},
        "create": {ROLE_HOSPITAL},
        "granted": {ROLE_HOSPITAL},
        "revoke": {ROLE_HOSPITAL},
    }


class HospitalPermission(BaseRolePermission):
    """Hospital-only surfaces: dashboard, patient record, prescriptions, reports."""
    allowed_roles_per_action = {
        "list": {ROLE_HOSPITAL},
        "retrieve": {ROLE_HOSPITAL},
        "create": {ROLE_HOSPITAL},
        "update": {ROLE_HOSPITAL},
    }


class EmergencyPatientPermission(BaseRolePermission):
    allowed_roles_per_action = {
        "list": {ROLE_HOSPITAL},
        "retrieve": {ROLE_HOSPITAL},
        "create": {ROLE_HOSPITAL},
        "discharge": {ROLE_HOSPITAL},
        "reports": {ROLE_HOSPITAL},
    }


class AdmissionPermission(BaseRolePermission):
    allowed_roles_per_action = {
        "list": {ROLE_HOSPITAL},
        "create": {ROLE_HOSPITAL},
        "discharge": {ROLE_HOSPITAL},
    }


class LabReportPermission(BaseRolePermission):
    allowed_roles_per_action = {
        "list": {ROLE_LAB},
        "create": {ROLE_LAB},
    }
