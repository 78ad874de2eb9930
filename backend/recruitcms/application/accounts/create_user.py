import logging
from typing import Any, Dict
from sqlalchemy import or_
from werkzeug.exceptions import BadRequest, Conflict
from recruitcms.extensions import db
from recruitcms.auth.roles import USER, assignable_roles
from recruitcms.models.tenant import Tenant
from recruitcms.models.user import User
from recruitcms.utils.tenancy import resolve_tenant_id
from recruitcms.utils.transaction import transactional
from recruitcms.utils.validation import require_fields

logger = logging.getLogger(__name__)


def create_user(*, principal, data: Dict[str, Any]) -> User:
    """
    Add a user to the caller's tenant (super admins name the tenant).

    Roles above the caller's own level, and super_admin itself, cannot be
    assigned here.
    """
    require_fields(data, ["username", "email", "password"])

    role = data.get("role") or USER
    if role not in assignable_roles(principal.role):
        raise BadRequest("Invalid role")

    tenant_id = resolve_tenant_id(principal, data.get("tenant_id"))
    tenant = db.session.get(Tenant, tenant_id)

    if User.query.filter_by(tenant_id=tenant_id).count() >= tenant.max_users:
        raise BadRequest("User limit reached for this tenant")

    existing = User.query.filter(
        User.tenant_id == tenant_id,
        or_(User.username == data["username"], User.email == data["email"]),
    ).first()
    if existing:
        raise Conflict("User with this username or email already exists")

    user = User()
    user.tenant_id = tenant_id
    user.username = data["username"]
    user.email = data["email"]
    user.role = role
    user.is_active = True
    user.set_password(data["password"])

    with transactional():
        db.session.add(user)

    logger.info("User %s (%s) created in tenant %s by %s", user.id, role, tenant_id, principal.id)
    return user
