# commands.py

import click

from services.permission_service import PermissionService, PermissionServiceError


def register_commands(app):

    @app.cli.command("seed-permissions")
    def seed_permissions_command():
        """Crée les permissions model_* et les associe aux rôles par défaut"""
        result = PermissionService().seed_defaults()
        click.echo(f"✅ Permissions created: {result['permissions']}, role mappings created: {result['role_permissions']}")

    @app.cli.command("create-admin")
    @click.option("--username", default="admin", show_default=True)
    @click.option("--email", default="admin@example.com", show_default=True)
    @click.password_option()
    def create_admin_command(username, email, password):
        """Crée un utilisateur administrateur"""
        service = PermissionService()
        service.seed_defaults()
        try:
            admin = service.create_admin(username, password, email=email)
        except PermissionServiceError as e:
            raise click.ClickException(e.message)
        click.echo(f"✅ Administrator: {admin.username} (id={admin.id}, role={admin.role})")
