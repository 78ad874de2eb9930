from werkzeug.security import generate_password_hash, check_password_hash
from recruitcms.extensions import db
from .base import BaseModel


class User(BaseModel):
    __tablename__ = "users"

    # NULL only for super admins
    tenant_id = db.Column(
        db.String(36),
        db.ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=True,
        index=True
    )

    username = db.Column(db.String(50), nullable=False, index=True)
    email = db.Column(db.String(100), nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    role = db.Column(db.String(50), nullable=False, default="user", index=True)
    is_active = db.Column(db.Boolean, default=True)
    last_login = db.Column(db.DateTime(timezone=True), nullable=True)

    tenant = db.relationship("Tenant", back_populates="users")

    pages = db.relationship("LandingPage", back_populates="author", cascade="all, delete-orphan")
    uploads = db.relationship("Upload", back_populates="owner", cascade="all, delete-orphan")
    auth_tokens = db.relationship("AuthToken", cascade="all, delete-orphan")

    __table_args__ = (
        db.UniqueConstraint("tenant_id", "username", name="uq_user_username_per_tenant"),
        db.UniqueConstraint("tenant_id", "email", name="uq_user_email_per_tenant"),
    )

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)
