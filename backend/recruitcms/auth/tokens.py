"""
Bearer token issuance, verification and revocation tracking.

Tokens are HS256 JWTs (header.payload.signature) minted through
Flask-JWT-Extended. ``verify_token`` never raises: callers get the claim set
or ``None`` and cannot tell a malformed token from an expired or tampered one.
"""
import hashlib
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from flask import current_app
from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from recruitcms.extensions import db
from recruitcms.models.auth_token import AuthToken
from recruitcms.utils.dates import utcnow

logger = logging.getLogger(__name__)


def issue_token(user, *, role=None, tenant_id=None, impersonation=None, expires_delta=None) -> str:
    """
    Sign a token for ``user``.

    ``role`` and ``tenant_id`` default to the user's own. Impersonation tokens
    carry the server-side session id and nothing else about the original
    identity.
    """
    claims: Dict[str, Any] = {
        "user_id": user.id,
        "username": user.username,
        "role": role or user.role,
        "tenant_id": tenant_id if tenant_id is not None else user.tenant_id,
    }
    if impersonation is not None:
        claims["impersonation_id"] = impersonation.id

    return create_access_token(
        identity=user.id,
        additional_claims=claims,
        expires_delta=expires_delta or current_app.config["JWT_ACCESS_TOKEN_EXPIRES"],
    )


def verify_token(token: Optional[str]) -> Optional[Dict[str, Any]]:
    """Return the decoded claims, or None for any invalid or expired token."""
    if not token or not isinstance(token, str):
        return None

    try:
        return decode_token(token)
    except (PyJWTError, JWTExtendedException) as exc:
        logger.debug("Token rejected: %s", exc.__class__.__name__)
        return None


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def remember_token(token: str, user, tenant_id=None) -> AuthToken:
    """
    Record an issued token so logout can revoke it. Also drops the user's
    expired rows. The caller commits.
    """
    claims = decode_token(token)

    AuthToken.query.filter(
        AuthToken.user_id == user.id,
        AuthToken.expires_at < utcnow(),
    ).delete(synchronize_session=False)

    record = AuthToken()
    record.token_hash = hash_token(token)
    record.jti = claims["jti"]
    record.user_id = user.id
    record.tenant_id = tenant_id
    record.expires_at = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)

    db.session.add(record)
    return record


def revoke_token(token: str) -> int:
    """Delete the token's hash from the tracking table. The caller commits."""
    return AuthToken.query.filter_by(
        token_hash=hash_token(token)
    ).delete(synchronize_session=False)


def is_token_revoked(jwt_payload: Dict[str, Any]) -> bool:
    """A token is revoked once its row is gone (logout) or was never recorded."""
    jti = jwt_payload.get("jti")
    if not jti:
        return True
    return db.session.query(AuthToken.id).filter_by(jti=jti).first() is None


def revocation_enforced() -> bool:
    return bool(current_app.config.get("TOKEN_REVOCATION_ENFORCED", True))
