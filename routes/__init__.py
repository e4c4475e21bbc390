# routes/__init__.py
from .auth_routes import auth_bp
from .model_routes import model_bp

def register_blueprints(app):
    app.register_blueprint(auth_bp)
    app.register_blueprint(model_bp)
