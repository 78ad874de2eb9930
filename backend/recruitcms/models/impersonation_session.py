from recruitcms.extensions import db
from recruitcms.utils.dates import normalize_ts, utcnow
from .base import BaseModel
from .tenant_mixin import TenantMixin


class ImpersonationSession(BaseModel, TenantMixin):
    """
    Server-side record of a super admin acting as a tenant admin.

    Impersonation tokens only carry this row's id; the original identity is
    always read back from here, never from token claims.
    """
    __tablename__ = "impersonation_sessions"

    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    expires_at = db.Column(db.DateTime(timezone=True), nullable=False)
    ended_at = db.Column(db.DateTime(timezone=True), nullable=True)

    user = db.relationship("User")
    tenant = db.relationship("Tenant")

    @property
    def is_active(self) -> bool:
        return self.ended_at is None and normalize_ts(self.expires_at) > utcnow()
