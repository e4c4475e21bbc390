import logging
from typing import Dict, Iterable, Optional

from extensions import db
from models.permission import Permission
from models.role_permission import RolePermission
from models.user import User
from utils.errors import ModelCrudError

logger = logging.getLogger(__name__)

MODEL_PERMISSIONS = [
    "model_access",
    "model_create",
    "model_show",
    "model_edit",
    "model_update",
    "model_delete",
]

# ADMIN reçoit toutes les permissions
DEFAULT_ROLE_PERMISSIONS = {
    "ADMIN": "all",
    "USER": [],
}


class PermissionServiceError(ModelCrudError):
    """Erreur de configuration des permissions ou des comptes"""
    def __init__(self, message: str, code: str = 'PERMISSION_SERVICE_ERROR'):
        super().__init__(message, 409, code)


class PermissionService:
    """Seeds permissions and wires them to roles"""

    def __init__(self):
        self.db = db

    def ensure_permissions(self, names: Iterable[str] = MODEL_PERMISSIONS) -> int:
        """Creates missing Permission rows, returns how many were created"""
        created = 0
        for name in names:
            if not Permission.query.filter_by(name=name).first():
                self.db.session.add(Permission(name=name))
                created += 1
        self.db.session.commit()
        return created

    def grant_to_role(self, role: str, names: Iterable[str]) -> int:
        created = 0
        for name in names:
            permission = Permission.query.filter_by(name=name).first()
            if permission is None:
                logger.warning(f"Skipping unknown permission {name} for role {role}")
                continue
            exists = RolePermission.query.filter_by(role=role, permission_id=permission.id).first()
            if not exists:
                self.db.session.add(RolePermission(role=role, permission_id=permission.id))
                created += 1
        self.db.session.commit()
        return created

    def seed_defaults(self, role_permissions: Optional[Dict] = None) -> Dict[str, int]:
        """Ensures the model permissions exist and default roles hold theirs"""
        role_permissions = DEFAULT_ROLE_PERMISSIONS if role_permissions is None else role_permissions
        permissions_created = self.ensure_permissions()

        mappings_created = 0
        for role, names in role_permissions.items():
            if names == "all":
                names = [p.name for p in Permission.query.all()]
            mappings_created += self.grant_to_role(role, names)

        logger.info(f"Permissions seeded: {permissions_created} created, {mappings_created} role mappings created")
        return {"permissions": permissions_created, "role_permissions": mappings_created}

    def create_admin(self, username: str, password: str, email: Optional[str] = None) -> User:
        """
        Creates the ADMIN user, or returns the existing one with that username.

        Raises:
            PermissionServiceError: the username belongs to a non-admin user
        """
        admin = User.query.filter_by(username=username).first()
        if admin:
            if admin.role != "ADMIN":
                raise PermissionServiceError(
                    f"User {username} already exists with role {admin.role}",
                    code='USERNAME_TAKEN'
                )
            return admin

        admin = User(username=username, email=email, role="ADMIN")
        admin.set_password(password)
        self.db.session.add(admin)
        self.db.session.commit()
        logger.info(f"Administrator {username} created")
        return admin
