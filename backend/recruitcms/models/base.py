import uuid
from recruitcms.extensions import db
from recruitcms.utils.dates import utcnow


class BaseModel(db.Model):
    __abstract__ = True

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, index=True)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, index=True)

    def __repr__(self):
        return f"<{type(self).__name__} {self.id}>"
