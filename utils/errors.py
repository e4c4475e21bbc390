# utils/errors.py

import logging
from flask import render_template, redirect, request, session
from flask_jwt_extended.exceptions import CSRFError
from werkzeug.exceptions import NotFound

logger = logging.getLogger(__name__)

CSRF_MESSAGE = "The form has expired. Reload the page and try again."


class ModelCrudError(Exception):
    """Base exception for request-terminating application errors"""
    def __init__(self, message: str, status_code: int = 500, code: str = 'MODEL_CRUD_ERROR'):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(self.message)


class AuthenticationRequired(ModelCrudError):
    """No logged-in principal behind the request"""
    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, 401, 'AUTHENTICATION_REQUIRED')


class PermissionDenied(ModelCrudError):
    """The principal lacks the permission an action requires"""
    def __init__(self, permissions=(), message: str = "Permission denied"):
        self.permissions = tuple(permissions)
        super().__init__(message, 403, 'PERMISSION_DENIED')


class ValidationFailed(ModelCrudError):
    """
    Submitted form data failed validation.

    Args:
        errors: field name -> list of messages, only for failing fields
        old_input: submitted values, re-displayed by the next form render
        redirect_to: where to send the client when no usable Referer exists
    """
    def __init__(self, errors, old_input=None, redirect_to="/"):
        self.errors = errors
        self.old_input = old_input or {}
        self.redirect_to = redirect_to
        super().__init__("The given data was invalid.", 422, 'VALIDATION_FAILED')


class PermissionDoesNotExist(ModelCrudError):
    """A grant referenced a permission name that was never seeded"""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"There is no permission named `{name}`.", 400, 'PERMISSION_DOES_NOT_EXIST')


def register_error_handlers(app):
    """
    Registers the application error handlers.

    Must run after jwt.init_app so the CSRFError handler replaces the
    library default, which would treat the failure as a missing login.
    """
    # imported here, utils.security depends on this module
    from utils.security import redirect_to_login, safe_redirect_target

    @app.errorhandler(AuthenticationRequired)
    def handle_authentication_required(error):
        return redirect_to_login()

    @app.errorhandler(PermissionDenied)
    def handle_permission_denied(error):
        return render_template("errors/403.html", error=error), 403

    # a valid access cookie whose form token is missing or stale
    @app.errorhandler(CSRFError)
    def handle_csrf_error(error):
        logger.warning(f"CSRF check failed on {request.method} {request.path}: {error}")
        return render_template("errors/403.html", error=error, message=CSRF_MESSAGE), 403

    @app.errorhandler(ValidationFailed)
    def handle_validation_failed(error):
        session["errors"] = error.errors
        session["_old_input"] = error.old_input
        logger.info(f"Validation failed on {request.path}: {sorted(error.errors)}")
        return redirect(safe_redirect_target(request.referrer, error.redirect_to))

    @app.errorhandler(NotFound)
    def handle_not_found(error):
        return render_template("errors/404.html", error=error), 404
