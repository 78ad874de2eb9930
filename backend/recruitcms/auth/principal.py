from dataclasses import dataclass
from typing import Any, Dict, Optional

from recruitcms.extensions import db
from recruitcms.models.impersonation_session import ImpersonationSession
from recruitcms.models.tenant import Tenant
from recruitcms.models.user import User
from .roles import SUPER_ADMIN, TENANT_ADMIN


@dataclass
class Principal:
    """The authenticated caller with its effective role and tenant."""

    user: User
    role: str
    tenant: Optional[Tenant]
    impersonation: Optional[ImpersonationSession] = None

    @property
    def id(self) -> str:
        return self.user.id

    @property
    def tenant_id(self) -> Optional[str]:
        return self.tenant.id if self.tenant is not None else None

    @property
    def is_super_admin(self) -> bool:
        # Impersonating super admins act as tenant admins
        return self.role == SUPER_ADMIN

    @property
    def is_impersonating(self) -> bool:
        return self.impersonation is not None

    @property
    def tenant_is_active(self) -> bool:
        return self.tenant is not None and self.tenant.is_active


def resolve_principal(jwt_data: Dict[str, Any]) -> Optional[Principal]:
    """
    Build the principal from verified claims, re-reading the user (and
    tenant) from the database. Returns None when the token no longer maps to
    an active user or a live impersonation session.
    """
    user = db.session.get(User, jwt_data.get("sub"))
    if user is None or not user.is_active:
        return None

    impersonation_id = jwt_data.get("impersonation_id")
    if impersonation_id:
        session = db.session.get(ImpersonationSession, impersonation_id)
        if (
            session is None
            or session.user_id != user.id
            or user.role != SUPER_ADMIN
            or not session.is_active
        ):
            return None
        return Principal(user=user, role=TENANT_ADMIN, tenant=session.tenant, impersonation=session)

    return Principal(user=user, role=user.role, tenant=user.tenant)
