from recruitcms.extensions import db
from .base import BaseModel

TENANT_STATUSES = ("active", "inactive", "suspended")

PLAN_LIMITS = {
    "free": {"users": 5, "pages": 10},
    "basic": {"users": 25, "pages": 50},
    "pro": {"users": 100, "pages": 200},
    "enterprise": {"users": 999, "pages": 999},
}

DEFAULT_SETTINGS = {
    "timezone": "Europe/Berlin",
    "language": "de",
    "email_notifications": True,
}


def plan_limits(plan: str) -> dict:
    """Unknown plans fall back to the free tier."""
    return PLAN_LIMITS.get(plan, PLAN_LIMITS["free"])


def default_branding(company_name: str) -> dict:
    return {
        "primary_color": "#3b82f6",
        "logo_url": "",
        "company_name": company_name,
    }


class Tenant(BaseModel):
    __tablename__ = "tenants"

    # Basic info
    name = db.Column(db.String(255), nullable=False)
    subdomain = db.Column(db.String(100), unique=True, nullable=False, index=True)
    domain = db.Column(db.String(255), nullable=True)
    status = db.Column(db.String(20), nullable=False, default="active", index=True)

    # Plan and quotas
    plan = db.Column(db.String(20), nullable=False, default="free", index=True)
    max_users = db.Column(db.Integer, nullable=False, default=5)
    max_pages = db.Column(db.Integer, nullable=False, default=10)

    # Opaque JSON blobs owned by the front end
    settings = db.Column(db.JSON, default=dict)
    branding = db.Column(db.JSON, default=dict)

    users = db.relationship("User", back_populates="tenant", lazy="dynamic")

    @property
    def is_active(self) -> bool:
        return self.status == "active"
