from functools import wraps
from urllib.parse import urlencode, urlparse
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request, unset_jwt_cookies
from flask import current_app, g, redirect, request
from extensions import db
from models.user import User
from utils.errors import AuthenticationRequired, PermissionDenied
from utils.permissions import authorize
import logging

logger = logging.getLogger(__name__)


def current_principal():
    """Principal loaded by login_required for this request, or None"""
    return g.get("current_user")


def safe_redirect_target(target, fallback):
    """Returns target when it points back at this host, fallback otherwise"""
    if target:
        parsed = urlparse(target)
        if parsed.scheme in ("", "http", "https") and parsed.netloc in ("", request.host):
            return target
    return fallback


def redirect_to_login():
    login_url = current_app.config["LOGIN_URL"]
    if request.method == "GET" and request.path != login_url:
        next_path = request.path
        if request.query_string:
            next_path = f"{next_path}?{request.query_string.decode()}"
        login_url = f"{login_url}?{urlencode({'next': next_path})}"
    return redirect(login_url)


def register_jwt_callbacks(jwt):
    """Every authentication failure ends in a redirect to the login page"""

    @jwt.unauthorized_loader
    def missing_token(reason):
        logger.debug(f"Unauthenticated request to {request.path}: {reason}")
        return redirect_to_login()

    @jwt.invalid_token_loader
    def invalid_token(reason):
        logger.info(f"Invalid token on {request.path}: {reason}")
        response = redirect_to_login()
        unset_jwt_cookies(response)
        return response

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        logger.info(f"Expired token for user_id={jwt_payload.get('sub')} on {request.path}")
        response = redirect_to_login()
        unset_jwt_cookies(response)
        return response


def load_principal(user_id):
    """User behind a token identity, None when the identity names no user"""
    try:
        return db.session.get(User, int(user_id))
    except (TypeError, ValueError):
        return None


def login_required(f):
    """
    Décorateur Flask: exige un principal authentifié.
    Le principal est exposé dans g.current_user.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        verify_jwt_in_request()
        user_id = get_jwt_identity()
        user = load_principal(user_id)
        if not user:
            raise AuthenticationRequired(f"Unknown principal {user_id}")

        g.current_user = user
        return f(*args, **kwargs)
    return decorated_function


def require_permission(*permissions):
    """
    Décorateur Flask pour protéger une route avec une permission.
    Passes when the principal holds any of the given permissions.
    """
    def decorator(f):
        @wraps(f)
        @login_required
        def decorated_function(*args, **kwargs):
            user = g.current_user
            permitted = authorize(user, *permissions)
            logger.debug(f"Permission check for user_id={user.id} role={user.role} permissions={permissions} -> {permitted}")

            if not permitted:
                logger.warning(f"Permission refused for user_id={user.id} role={user.role} permissions={permissions}")
                raise PermissionDenied(permissions)

            return f(*args, **kwargs)
        return decorated_function
    return decorator
