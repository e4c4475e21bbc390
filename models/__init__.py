from .user import User
from .model import Model
from .permission import Permission, user_permissions
from .role_permission import RolePermission
from .access_log import AccessLog

__all__ = [
    "User",
    "Model",
    "Permission",
    "user_permissions",
    "RolePermission",
    "AccessLog",
]
