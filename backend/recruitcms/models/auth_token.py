from recruitcms.extensions import db
from .base import BaseModel


class AuthToken(BaseModel):
    """
    Issued bearer tokens, kept so logout can revoke them.

    Validity itself comes from the signature and the exp claim; this table
    only answers "has this token been logged out".
    """
    __tablename__ = "auth_tokens"

    token_hash = db.Column(db.String(64), nullable=False, index=True)
    jti = db.Column(db.String(36), nullable=False, unique=True, index=True)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant_id = db.Column(db.String(36), db.ForeignKey("tenants.id", ondelete="CASCADE"), nullable=True, index=True)
    expires_at = db.Column(db.DateTime(timezone=True), nullable=False, index=True)
