from datetime import datetime, timezone
from extensions import db

class Model(db.Model):
    """The managed CRUD resource"""
    __tablename__ = "models"

    id = db.Column(db.Integer, primary_key=True)
    col1 = db.Column(db.String(255), nullable=False)
    col2 = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(
        db.DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc)
    )

    FIELDS = ("col1", "col2")

    def to_dict(self):
        return {
            "id": self.id,
            "col1": self.col1,
            "col2": self.col2,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Model {self.id} col1={self.col1!r}>"
