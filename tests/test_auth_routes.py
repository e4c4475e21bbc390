"""
Tests for login, logout and token handling
"""
from datetime import timedelta
from urllib.parse import urlparse

from flask_jwt_extended import create_access_token

from extensions import db
from models.access_log import AccessLog


def set_cookie_names(response):
    return [header.split('=', 1)[0] for header in response.headers.getlist('Set-Cookie')]


class TestLogin:

    def test_login_page(self, client, captured_templates):
        response = client.get('/login')

        assert response.status_code == 200
        assert captured_templates == ['auth/login.html']

    def test_login_sets_access_cookie(self, client, user):
        response = client.post('/login', data={'username': user.username, 'password': 'test_password'})

        assert response.status_code == 302
        assert response.headers['Location'] == '/index'
        assert 'access_token_cookie' in set_cookie_names(response)

    def test_cookie_authenticates_following_requests(self, client, user, grant):
        grant(user, 'model_access')
        client.post('/login', data={'username': user.username, 'password': 'test_password'})

        response = client.get('/index')

        assert response.status_code == 200

    def test_cookie_user_without_permission_is_forbidden(self, client, user):
        client.post('/login', data={'username': user.username, 'password': 'test_password'})

        response = client.get('/index')

        assert response.status_code == 403

    def test_login_redirects_to_next(self, client, user):
        response = client.post(
            '/login?next=%2Fcreate',
            data={'username': user.username, 'password': 'test_password'}
        )

        assert response.headers['Location'] == '/create'

    def test_login_ignores_external_next(self, client, user):
        response = client.post('/login', data={
            'username': user.username,
            'password': 'test_password',
            'next': 'http://evil.example.com/steal',
        })

        assert response.headers['Location'] == '/index'

    def test_login_records_access_log(self, client, user):
        client.post('/login', data={'username': user.username, 'password': 'test_password'})

        log = AccessLog.query.filter_by(action='LOGIN').one()
        assert log.user_id == user.id

    def test_invalid_credentials(self, client, user):
        response = client.post('/login', data={'username': user.username, 'password': 'wrong'})

        assert response.status_code == 401
        assert 'Invalid credentials' in response.get_data(as_text=True)
        assert 'access_token_cookie' not in set_cookie_names(response)

    def test_unknown_user(self, client):
        response = client.post('/login', data={'username': 'nobody', 'password': 'wrong'})

        assert response.status_code == 401


class TestLogout:

    def test_logout_clears_cookie(self, client, user):
        client.post('/login', data={'username': user.username, 'password': 'test_password'})

        response = client.post('/logout')

        assert response.status_code == 302
        assert response.headers['Location'] == '/login'
        assert 'access_token_cookie' in set_cookie_names(response)
        assert client.get('/index').status_code == 302

    def test_logout_records_access_log(self, client, user, acting_as):
        client.post('/logout', headers=acting_as(user))

        assert AccessLog.query.filter_by(action='LOGOUT', user_id=user.id).count() == 1

    def test_logout_without_session(self, client):
        response = client.post('/logout')

        assert response.headers['Location'] == '/login'
        assert AccessLog.query.count() == 0


class TestTokenFailures:
    """Every authentication failure ends on the login page"""

    def test_expired_token_redirects_to_login(self, client, user, grant, acting_as):
        grant(user, 'model_access')
        headers = acting_as(user, expires_delta=timedelta(seconds=-1))

        response = client.get('/index', headers=headers)

        assert response.status_code == 302
        assert urlparse(response.headers['Location']).path == '/login'

    def test_malformed_token_redirects_to_login(self, client):
        response = client.get('/index', headers={'Authorization': 'Bearer not-a-jwt'})

        assert response.status_code == 302
        assert urlparse(response.headers['Location']).path == '/login'

    def test_token_of_deleted_user_redirects_to_login(self, client, user, acting_as):
        headers = acting_as(user)
        db.session.delete(user)
        db.session.commit()

        response = client.get('/index', headers=headers)

        assert response.status_code == 302
        assert urlparse(response.headers['Location']).path == '/login'

    def test_non_numeric_identity_redirects_to_login(self, client, app):
        token = create_access_token(identity='not-a-number')

        response = client.get('/index', headers={'Authorization': f'Bearer {token}'})

        assert response.status_code == 302
        assert urlparse(response.headers['Location']).path == '/login'
