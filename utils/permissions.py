from typing import Set
from models.role_permission import RolePermission
from models.permission import Permission, user_permissions
from extensions import db


def has_permission(user, name: str) -> bool:
    """
    Vérifie si un utilisateur détient une permission, directement ou via son rôle
    """
    direct = (
        db.session.query(Permission.id)
        .join(user_permissions, user_permissions.c.permission_id == Permission.id)
        .filter(
            user_permissions.c.user_id == user.id,
            Permission.name == name
        )
        .first()
    )
    if direct is not None:
        return True

    via_role = (
        db.session.query(RolePermission)
        .join(Permission)
        .filter(
            RolePermission.role == user.role,
            Permission.name == name
        )
        .first()
    )
    return via_role is not None


def authorize(user, *names: str) -> bool:
    """True when user is set and holds at least one of names"""
    if user is None or not names:
        return False
    return any(has_permission(user, name) for name in names)


def get_user_permissions(user) -> Set[str]:
    """
    Effective permission names of a user: direct grants plus role grants.
    """
    direct = {permission.name for permission in user.permissions}
    via_role = {
        name for (name,) in (
            db.session.query(Permission.name)
            .join(RolePermission)
            .filter(RolePermission.role == user.role)
            .all()
        )
    }
    return direct | via_role
