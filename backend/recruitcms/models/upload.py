from recruitcms.extensions import db
from .base import BaseModel
from .tenant_mixin import TenantMixin


class Upload(BaseModel, TenantMixin):
    __tablename__ = "uploads"

    filename = db.Column(db.String(255), nullable=False, unique=True)
    original_name = db.Column(db.String(255), nullable=False)
    file_size = db.Column(db.Integer, nullable=False)
    mime_type = db.Column(db.String(100), nullable=False)
    url = db.Column(db.String(500), nullable=False)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    owner = db.relationship("User", back_populates="uploads")
