import logging

from flask import Flask, request
from dotenv import load_dotenv

from extensions import db, migrate, jwt, cors
from config import Config
from routes import register_blueprints
from commands import register_commands
from utils.errors import register_error_handlers
from utils.method_override import MethodOverrideMiddleware
from utils.permissions import get_user_permissions
from utils.security import register_jwt_callbacks, current_principal

load_dotenv()  # charge les variables d'environnement depuis .env


def configure_logging(app):
    level = getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    configure_logging(app)

    # HTML forms only send GET/POST; ?_method=PATCH|PUT|DELETE reroutes them
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    cors.init_app(app, origins=app.config["CORS_ORIGINS"], supports_credentials=True)

    register_jwt_callbacks(jwt)
    register_error_handlers(app)
    register_blueprints(app)
    register_commands(app)

    @app.context_processor
    def inject_principal():
        user = current_principal()
        permissions = get_user_permissions(user) if user else set()
        return {
            "current_user": user,
            "can": lambda name: name in permissions,
            "csrf_token": request.cookies.get(app.config["JWT_ACCESS_CSRF_COOKIE_NAME"], ""),
        }

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True, port=5001)
