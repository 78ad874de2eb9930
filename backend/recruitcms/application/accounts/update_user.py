import logging
from typing import Any, Dict
from werkzeug.exceptions import BadRequest, Conflict
from recruitcms.auth.roles import ADMIN, assignable_roles, has_role
from recruitcms.models.user import User
from recruitcms.utils.transaction import transactional
from .guards import assert_can_manage, assert_not_last_admin

logger = logging.getLogger(__name__)


def _assert_unique(target: User, field: str, value: str, message: str) -> None:
    clash = User.query.filter(
        User.tenant_id == target.tenant_id,
        getattr(User, field) == value,
        User.id != target.id,
    ).first()
    if clash:
        raise Conflict(message)


def update_user(*, principal, target: User, data: Dict[str, Any]) -> User:
    assert_can_manage(principal, target)

    if data.get("username") and data["username"] != target.username:
        _assert_unique(target, "username", data["username"], "Username already taken")

    if data.get("email") and data["email"] != target.email:
        _assert_unique(target, "email", data["email"], "Email already taken")

    if "role" in data and data["role"] != target.role:
        if data["role"] not in assignable_roles(principal.role):
            raise BadRequest("Invalid role")
        if not has_role(data["role"], ADMIN):
            assert_not_last_admin(target, "Cannot demote the last admin user")

    if "is_active" in data and not data["is_active"] and target.is_active:
        assert_not_last_admin(target, "Cannot deactivate the last admin user")

    changed_fields = []
    with transactional():
        for field in ("username", "email", "role"):
            if data.get(field) and getattr(target, field) != data[field]:
                setattr(target, field, data[field])
                changed_fields.append(field)

        if "is_active" in data and bool(data["is_active"]) != target.is_active:
            target.is_active = bool(data["is_active"])
            changed_fields.append("is_active")

        if data.get("password"):
            target.set_password(data["password"])
            changed_fields.append("password")

    if changed_fields:
        logger.info("User %s updated by %s: %s", target.id, principal.id, ", ".join(changed_fields))
    return target
