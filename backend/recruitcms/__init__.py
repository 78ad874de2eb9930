from flask import Flask, send_file, send_from_directory, current_app
from .config import DEV_SECRET, config_by_name
from .extensions import db, migrate, jwt, cors
from .api import api_bp
from .cli import register_commands
from .logging_config import configure_logging
from .middleware.tenant_middleware import tenant_middleware
from .errors import register_error_handlers
from .utils.media import upload_folder
from flask_swagger_ui import get_swaggerui_blueprint
import os


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    if config_name == "production" and DEV_SECRET in (
        app.config["SECRET_KEY"],
        app.config["JWT_SECRET_KEY"],
    ):
        raise RuntimeError("SECRET_KEY and JWT_SECRET_KEY must be set in production")

    configure_logging(app)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": "*"}, r"/uploads/*": {"origins": "*"}},
        allow_headers=["Content-Type", "Authorization", "X-Tenant-ID", "X-Tenant-Subdomain"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        send_wildcard=True,
    )

    # Registers the principal loader and token callbacks on ``jwt``
    from .auth import jwt_callbacks  # noqa: F401

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    tenant_middleware(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(api_bp, url_prefix="/api")
    register_error_handlers(app)
    register_commands(app)

    # -------------------------------------------------
    # Uploaded files (PUBLIC, NO TENANT)
    # -------------------------------------------------
    @app.route("/uploads/<path:filename>", methods=["GET"], endpoint="serve_upload")
    def serve_upload(filename):
        return send_from_directory(upload_folder(), filename)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC, NO TENANT)
    # -------------------------------------------------
    @app.route("/openapi/recruiting.yaml", methods=["GET"], endpoint="openapi_recruiting")
    def serve_openapi():
        yaml_path = os.path.join(current_app.root_path, "api", "openapi.yaml")

        if not os.path.exists(yaml_path):
            raise FileNotFoundError("openapi.yaml not found")

        return send_file(
            yaml_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/recruiting.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Social Recruiting CMS API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
