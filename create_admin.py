#!/usr/bin/env python3
"""
Script pour créer un utilisateur administrateur
"""

import os

from app import create_app
from services.permission_service import PermissionService

def create_admin_user():
    """Crée un utilisateur administrateur par défaut"""
    app = create_app()

    username = os.getenv("ADMIN_USERNAME", "admin")
    password = os.getenv("ADMIN_PASSWORD", "admin123")
    email = os.getenv("ADMIN_EMAIL", "admin@example.com")

    with app.app_context():
        service = PermissionService()
        service.seed_defaults()
        admin_user = service.create_admin(username, password, email=email)

        print(f"✅ Utilisateur administrateur:")
        print(f"   Username: {admin_user.username}")
        print(f"   Email: {admin_user.email}")
        print(f"   Role: {admin_user.role}")
        print(f"   ID: {admin_user.id}")

        return admin_user

if __name__ == "__main__":
    create_admin_user()
