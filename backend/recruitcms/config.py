import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

DEV_SECRET = "dev-secret"


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", DEV_SECRET)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Tokens
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_ALGORITHM = "HS256"
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_HEADER_NAME = "Authorization"
    JWT_HEADER_TYPE = "Bearer"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=24)
    JWT_ERROR_MESSAGE_KEY = "error"
    IMPERSONATION_EXPIRES = timedelta(hours=24)

    # Logout only takes effect at verification time when this is on
    TOKEN_REVOCATION_ENFORCED = _env_bool("TOKEN_REVOCATION_ENFORCED", True)

    # Uploads
    UPLOAD_FOLDER = os.getenv(
        "UPLOAD_FOLDER",
        os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "uploads"),
    )
    MAX_UPLOAD_SIZE = 5 * 1024 * 1024
    # Leaves room for the multipart envelope around a 5 MB file
    MAX_CONTENT_LENGTH = 6 * 1024 * 1024
    ALLOWED_UPLOAD_MIME_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}

    # Tenancy
    DEFAULT_TENANT_SUBDOMAIN = os.getenv("DEFAULT_TENANT_SUBDOMAIN", "demo")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON = _env_bool("LOG_JSON", False)

    # Seed data (flask seed / flask init-db)
    SEED_SUPER_ADMIN_PASSWORD = os.getenv("SEED_SUPER_ADMIN_PASSWORD", "superadmin123")
    SEED_TENANT_ADMIN_PASSWORD = os.getenv("SEED_TENANT_ADMIN_PASSWORD", "admin123")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///recruitcms-dev.db")


class TestingConfig(BaseConfig):
    TESTING = True
    DEBUG = False
    SECRET_KEY = "test-secret-key-for-the-recruitcms-suite"
    JWT_SECRET_KEY = "test-jwt-secret-key-for-the-recruitcms-suite"
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URI", "sqlite:///:memory:")
    TOKEN_REVOCATION_ENFORCED = True
    LOG_LEVEL = "WARNING"


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")
    LOG_JSON = _env_bool("LOG_JSON", True)


config_by_name = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}
