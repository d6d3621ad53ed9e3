# hr_core/iam/context.py
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from hr_core.common import errors
from hr_core.iam.models import Account, AccountRole


@dataclass(frozen=True)
class ActorContext:
    """
    Who is acting. Passed into every service write so that ownership checks
    never depend on request objects.
    """
    account_id: UUID
    role: str
    display_name: str = ""

    @property
    def is_patient(self) -> bool:
        return self.role == AccountRole.PATIENT

    @property
    def is_hospital(self) -> bool:
        return self.role == AccountRole.HOSPITAL

    @property
    def is_lab(self) -> bool:
        return self.role == AccountRole.LAB


def context_for_account(account: Account) -> ActorContext:
    return ActorContext(account_id=account.id, role=account.role, display_name=account.display_name)


def actor_context_for(user) -> ActorContext:
    account = getattr(user, "account", None) if user is not None else None
    if account is None:
        raise errors.AccessDenied("No account profile for this user.")
    return context_for_account(account)


class ActorContextMixin:
    def ctx(self) -> ActorContext:
        return actor_context_for(self.request.user)

    def account(self) -> Account:
        return self.request.user.account
