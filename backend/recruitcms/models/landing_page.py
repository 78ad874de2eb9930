from recruitcms.extensions import db
from .base import BaseModel
from .tenant_mixin import TenantMixin


class LandingPage(BaseModel, TenantMixin):
    __tablename__ = "landing_pages"

    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False, index=True)

    # Hero header rendered above the content blocks
    header_image = db.Column(db.String(500), nullable=True)
    header_text = db.Column(db.Text, nullable=True)
    header_overlay_color = db.Column(db.String(7), default="#000000")
    header_overlay_opacity = db.Column(db.Float, default=0.5)
    header_height = db.Column(db.Integer, default=400)

    # Ordered list of {id, type, content, order}
    content_blocks = db.Column(db.JSON, nullable=False, default=list)

    status = db.Column(db.String(20), nullable=False, default="draft", index=True)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    author = db.relationship("User", back_populates="pages")
    submissions = db.relationship(
        "FormSubmission",
        back_populates="page",
        cascade="all, delete-orphan"
    )

    __table_args__ = (
        db.UniqueConstraint("tenant_id", "slug", name="uq_page_slug_per_tenant"),
    )
