"""
Pytest configuration and fixtures for backend tests
"""
import pytest
from faker import Faker
from flask import template_rendered
from flask_jwt_extended import create_access_token

from app import create_app
from extensions import db
from models.model import Model
from models.user import User
from services.permission_service import PermissionService


@pytest.fixture
def app(request):
    """
    Create application for testing, on a fresh in-memory database.

    Config overrides come from indirect parametrization of this fixture.
    """
    config = {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'SECRET_KEY': 'test-secret-key',
        'JWT_SECRET_KEY': 'test-secret-key',
        'JWT_COOKIE_CSRF_PROTECT': False,
    }
    config.update(getattr(request, 'param', {}))
    app = create_app(config)

    with app.app_context():
        db.create_all()
        PermissionService().seed_defaults()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def fake():
    return Faker()


@pytest.fixture
def user_factory(app, fake):
    """Create users with a known password"""
    def _create(role='USER', password='test_password', **overrides):
        user = User(
            username=overrides.pop('username', fake.unique.user_name()),
            email=overrides.pop('email', fake.unique.email()),
            role=role
        )
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user
    return _create


@pytest.fixture
def user(user_factory):
    """A logged-in-able user holding no permission"""
    return user_factory()


@pytest.fixture
def acting_as(app):
    """Authentication headers for the given user"""
    def _acting_as(user, **token_kwargs):
        token = create_access_token(identity=str(user.id), **token_kwargs)
        return {'Authorization': f'Bearer {token}'}
    return _acting_as


@pytest.fixture
def grant(app):
    def _grant(user, *names):
        user.give_permission_to(*names)
        db.session.commit()
        return user
    return _grant


@pytest.fixture
def model_factory(app, fake):
    def _create(**overrides):
        data = {'col1': fake.word(), 'col2': fake.word()}
        data.update(overrides)
        model = Model(**data)
        db.session.add(model)
        db.session.commit()
        return model
    return _create


@pytest.fixture
def model_data(fake):
    return {'col1': fake.word(), 'col2': fake.word()}


@pytest.fixture
def captured_templates(app):
    """Names of the templates rendered while the test runs"""
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append(template.name)

    template_rendered.connect(record, app)
    yield recorded
    template_rendered.disconnect(record, app)


@pytest.fixture
def session_data(client):
    """Snapshot of the client's session"""
    def _read():
        with client.session_transaction() as sess:
            data = dict(sess)
        data['_flashes'] = [tuple(f) for f in data.get('_flashes', [])]
        return data
    return _read


@pytest.fixture
def fetch_model(app):
    """Reload a model from the database, None once deleted"""
    def _fetch(model_id):
        db.session.expire_all()
        return db.session.get(Model, model_id)
    return _fetch
