# routes/auth_routes.py

import logging
from flask import Blueprint, current_app, render_template, request, url_for, redirect
from flask_jwt_extended import (
    create_access_token, get_jwt_identity, set_access_cookies, unset_jwt_cookies, verify_jwt_in_request
)
from models.user import User
from extensions import db
from utils.access_logger import log_user_action
from utils.flash import FlashMessage, push_flash
from utils.security import load_principal, safe_redirect_target

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login", methods=["GET"])
def login_form():
    return render_template("auth/login.html", next=request.args.get("next", ""))


@auth_bp.route("/login", methods=["POST"])
def login():
    username = request.form.get("username", "")
    password = request.form.get("password", "")
    next_url = request.form.get("next") or request.args.get("next")

    user = User.query.filter_by(username=username).first()
    if not user or not user.check_password(password):
        logger.info(f"Failed login attempt for username={username!r}")
        push_flash(FlashMessage.error("Invalid credentials"))
        return render_template("auth/login.html", next=next_url or ""), 401

    access_token = create_access_token(identity=str(user.id), additional_claims={"role": user.role.upper()})
    log_user_action(user.id, 'LOGIN', f"user:{user.username}")
    db.session.commit()

    target = url_for("model.index")
    if next_url and next_url.startswith("/") and not next_url.startswith("//"):
        target = safe_redirect_target(next_url, target)
    response = redirect(target)
    set_access_cookies(response, access_token)
    return response


@auth_bp.route("/logout", methods=["POST"])
def logout():
    verify_jwt_in_request(optional=True)
    user_id = get_jwt_identity()
    user = load_principal(user_id)
    if user:
        log_user_action(user.id, 'LOGOUT', f"user:{user.username}")
        db.session.commit()

    response = redirect(current_app.config["LOGIN_URL"])
    unset_jwt_cookies(response)
    return response
