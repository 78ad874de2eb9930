from recruitcms.extensions import db
from .base import BaseModel
from .tenant_mixin import TenantMixin


class FormSubmission(BaseModel, TenantMixin):
    __tablename__ = "form_submissions"

    page_id = db.Column(
        db.String(36),
        db.ForeignKey("landing_pages.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    data = db.Column(db.JSON, nullable=False, default=dict)
    ip_address = db.Column(db.String(45), nullable=True)
    user_agent = db.Column(db.Text, nullable=True)

    page = db.relationship("LandingPage", back_populates="submissions")
