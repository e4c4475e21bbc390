# routes/model_routes.py

from flask import Blueprint, g, redirect, render_template, request, url_for

from models.model import Model
from services.model_service import ModelService
from utils.flash import FlashMessage, redirect_with_flash
from utils.security import require_permission
from utils.validation import pop_form_state, validate_required

model_bp = Blueprint("model", __name__)
model_service = ModelService()


@model_bp.route("/", methods=["GET"])
def home():
    return redirect(url_for("model.index"))


@model_bp.route("/index", methods=["GET"])
@require_permission("model_access")
def index():
    """Liste tous les modèles"""
    models = model_service.list_models()
    return render_template("models/index.html", models=models)


@model_bp.route("/create", methods=["GET"])
@require_permission("model_create")
def create():
    errors, old = pop_form_state()
    return render_template("models/create.html", errors=errors, old=old)


@model_bp.route("/store", methods=["POST"])
@require_permission("model_create")
def store():
    data = validate_required(request.form, Model.FIELDS, redirect_to=url_for("model.create"))
    model = model_service.create_model(g.current_user, data)
    return redirect_with_flash(
        url_for("model.show", model_id=model.id),
        FlashMessage.success("The Model was created successfully")
    )


@model_bp.route("/show/<int:model_id>", methods=["GET"])
@require_permission("model_show")
def show(model_id):
    model = model_service.get_model(model_id)
    return render_template("models/show.html", model=model)


@model_bp.route("/edit/<int:model_id>", methods=["GET"])
@require_permission("model_edit")
def edit(model_id):
    model = model_service.get_model(model_id)
    errors, old = pop_form_state()
    return render_template("models/edit.html", model=model, errors=errors, old=old)


@model_bp.route("/update/<int:model_id>", methods=["PATCH", "PUT"])
@require_permission("model_edit", "model_update")
def update(model_id):
    model = model_service.get_model(model_id)
    data = validate_required(request.form, Model.FIELDS, redirect_to=url_for("model.edit", model_id=model.id))
    model_service.update_model(g.current_user, model, data)
    return redirect_with_flash(
        url_for("model.show", model_id=model.id),
        FlashMessage.success("The Model was updated successfully")
    )


@model_bp.route("/destroy/<int:model_id>", methods=["DELETE"])
@require_permission("model_delete")
def destroy(model_id):
    model = model_service.get_model(model_id)
    model_service.delete_model(g.current_user, model)
    return redirect_with_flash(
        url_for("model.index"),
        FlashMessage.success("The Model was deleted successfully")
    )
