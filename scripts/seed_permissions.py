# scripts/seed_permissions.py
import os
import sys

# Ensure the project root is on sys.path so top-level imports resolve
_SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_SCRIPT_DIR)
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from app import create_app
from services.permission_service import PermissionService


def seed_permissions():
    app = create_app()
    with app.app_context():
        result = PermissionService().seed_defaults()
        print(f"✅ Ensured permission table entries exist (created: {result['permissions']})")
        print(f"✅ RolePermission mappings created/ensured: {result['role_permissions']}")


if __name__ == "__main__":
    seed_permissions()
