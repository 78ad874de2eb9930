import logging
from typing import Any, Dict, Optional
from flask import current_app
from sqlalchemy import or_
from werkzeug.exceptions import Unauthorized
from recruitcms.extensions import db
from recruitcms.auth.roles import SUPER_ADMIN
from recruitcms.auth.tokens import issue_token, remember_token
from recruitcms.models.tenant import Tenant
from recruitcms.models.user import User
from recruitcms.utils.dates import utcnow
from recruitcms.utils.validation import require_fields

logger = logging.getLogger(__name__)


def _matches_login(login: str):
    return or_(User.username == login, User.email == login)


def find_login_user(login: str, *, tenant_id=None, subdomain=None) -> Optional[User]:
    """
    Locate the account a login refers to.

    With a tenant hint (id or subdomain) only that tenant is searched.
    Without one the platform super admin accounts are tried first, then the
    default tenant.
    """
    if tenant_id or subdomain:
        query = User.query.join(Tenant, User.tenant_id == Tenant.id).filter(_matches_login(login))
        if tenant_id:
            query = query.filter(User.tenant_id == tenant_id)
        else:
            query = query.filter(Tenant.subdomain == subdomain)
        return query.first()

    user = User.query.filter(
        _matches_login(login),
        User.role == SUPER_ADMIN,
        User.tenant_id.is_(None),
    ).first()
    if user is not None:
        return user

    return (
        User.query.join(Tenant, User.tenant_id == Tenant.id)
        .filter(
            _matches_login(login),
            Tenant.subdomain == current_app.config["DEFAULT_TENANT_SUBDOMAIN"],
        )
        .first()
    )


def login(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check credentials and issue a 24h bearer token.

    Unknown users, wrong passwords, disabled accounts and inactive tenants
    all produce the same 401.
    """
    require_fields(data, ["username", "password"])

    user = find_login_user(
        data["username"],
        tenant_id=data.get("tenant_id"),
        subdomain=data.get("subdomain"),
    )

    if (
        user is None
        or not user.check_password(data["password"])
        or not user.is_active
        or (user.role != SUPER_ADMIN and (user.tenant is None or not user.tenant.is_active))
    ):
        logger.warning("Failed login for %r", data["username"])
        raise Unauthorized("Invalid credentials")

    user.last_login = utcnow()

    token = issue_token(user)
    remember_token(token, user, tenant_id=user.tenant_id)
    db.session.commit()

    logger.info("User %s logged in (tenant %s)", user.id, user.tenant_id)
    return {"token": token, "user": user, "tenant": user.tenant}
