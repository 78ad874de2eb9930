"""
Flask-JWT-Extended hooks: principal loading, revocation lookups and the
401 responses. Every token failure gets the same body, so malformed,
expired, tampered and revoked tokens look alike to clients.
"""
import logging
from flask import jsonify
from recruitcms.extensions import jwt
from .principal import resolve_principal
from .tokens import is_token_revoked, revocation_enforced

logger = logging.getLogger(__name__)


def _unauthorized():
    return jsonify({"error": "Unauthorized"}), 401


@jwt.user_lookup_loader
def load_principal(_jwt_header, jwt_data):
    return resolve_principal(jwt_data)


@jwt.token_in_blocklist_loader
def check_if_token_revoked(_jwt_header, jwt_payload):
    if not revocation_enforced():
        return False
    return is_token_revoked(jwt_payload)


@jwt.unauthorized_loader
def missing_token(reason):
    return _unauthorized()


@jwt.invalid_token_loader
def invalid_token(reason):
    logger.debug("Invalid token: %s", reason)
    return _unauthorized()


@jwt.expired_token_loader
def expired_token(_jwt_header, _jwt_payload):
    return _unauthorized()


@jwt.revoked_token_loader
def revoked_token(_jwt_header, _jwt_payload):
    return _unauthorized()


@jwt.user_lookup_error_loader
def unknown_principal(_jwt_header, _jwt_payload):
    return _unauthorized()
