from datetime import datetime, timezone
from extensions import db
from werkzeug.security import generate_password_hash, check_password_hash
from models.permission import Permission, user_permissions
from utils.errors import PermissionDoesNotExist

class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), default="USER", nullable=False)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    # Relations
    permissions = db.relationship("Permission", secondary=user_permissions, backref="users", lazy=True)
    access_logs = db.relationship("AccessLog", backref="user", lazy=True, cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User {self.username}>"
    
    def set_password(self, password):
        self.password_hash = generate_password_hash(password)
        return self.password_hash

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def give_permission_to(self, *names):
        """
        Grants permissions directly to this user. The caller commits.

        Raises:
            PermissionDoesNotExist: if a name has not been seeded
        """
        for name in names:
            permission = Permission.query.filter_by(name=name).first()
            if permission is None:
                raise PermissionDoesNotExist(name)
            if permission not in self.permissions:
                self.permissions.append(permission)
        return self

    def revoke_permission_to(self, *names):
        self.permissions = [p for p in self.permissions if p.name not in names]
        return self
