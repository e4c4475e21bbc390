"""
Tests for permission seeding and grants
"""
import pytest

from extensions import db
from models.permission import Permission
from models.role_permission import RolePermission
from models.user import User
from services.permission_service import MODEL_PERMISSIONS, PermissionService, PermissionServiceError
from utils.errors import PermissionDoesNotExist
from utils.permissions import get_user_permissions


class TestPermissionService:

    def test_defaults_are_seeded(self, app):
        names = {p.name for p in Permission.query.all()}

        assert names == set(MODEL_PERMISSIONS)

    def test_seed_is_idempotent(self, app):
        result = PermissionService().seed_defaults()

        assert result == {'permissions': 0, 'role_permissions': 0}
        assert Permission.query.count() == len(MODEL_PERMISSIONS)

    def test_admin_role_holds_every_permission(self, user_factory):
        admin = user_factory(role='ADMIN')

        assert get_user_permissions(admin) == set(MODEL_PERMISSIONS)

    def test_user_role_holds_nothing(self, user):
        assert get_user_permissions(user) == set()

    def test_grant_to_role_skips_unknown(self, app):
        created = PermissionService().grant_to_role('EDITOR', ['model_edit', 'no_such_permission'])

        assert created == 1
        assert RolePermission.query.filter_by(role='EDITOR').count() == 1

    def test_create_admin(self, app):
        service = PermissionService()

        admin = service.create_admin('root', 'secret', email='root@example.com')
        again = service.create_admin('root', 'other')

        assert admin.id == again.id
        assert admin.role == 'ADMIN'
        assert admin.check_password('secret')
        assert User.query.filter_by(username='root').count() == 1

    def test_create_admin_refuses_existing_non_admin(self, user_factory):
        user_factory(username='root')

        with pytest.raises(PermissionServiceError) as excinfo:
            PermissionService().create_admin('root', 'secret')

        assert excinfo.value.code == 'USERNAME_TAKEN'
        assert User.query.filter_by(username='root').one().role == 'USER'


class TestGivePermission:

    def test_give_permission_to(self, user):
        user.give_permission_to('model_access', 'model_show')
        db.session.commit()

        assert {p.name for p in user.permissions} == {'model_access', 'model_show'}

    def test_give_permission_twice(self, user):
        user.give_permission_to('model_access')
        user.give_permission_to('model_access')
        db.session.commit()

        assert len(user.permissions) == 1

    def test_unknown_permission_raises(self, user):
        with pytest.raises(PermissionDoesNotExist) as excinfo:
            user.give_permission_to('model_publish')

        assert excinfo.value.name == 'model_publish'


class TestCommands:

    def test_seed_permissions_command(self, app):
        result = app.test_cli_runner().invoke(args=['seed-permissions'])

        assert result.exit_code == 0
        assert 'Permissions created: 0' in result.output

    def test_create_admin_command(self, app):
        result = app.test_cli_runner().invoke(
            args=['create-admin', '--username', 'boss', '--password', 'secret']
        )

        assert result.exit_code == 0
        admin = User.query.filter_by(username='boss').one()
        assert admin.role == 'ADMIN'

    def test_create_admin_command_seeds_permissions(self, app):
        RolePermission.query.delete()
        Permission.query.delete()
        db.session.commit()

        result = app.test_cli_runner().invoke(
            args=['create-admin', '--username', 'boss', '--password', 'secret']
        )

        assert result.exit_code == 0
        admin = User.query.filter_by(username='boss').one()
        assert get_user_permissions(admin) == set(MODEL_PERMISSIONS)

    def test_create_admin_command_with_taken_username(self, app, user_factory):
        user_factory(username='boss')

        result = app.test_cli_runner().invoke(
            args=['create-admin', '--username', 'boss', '--password', 'secret']
        )

        assert result.exit_code == 1
        assert 'already exists with role USER' in result.output
