from werkzeug.exceptions import BadRequest, Forbidden
from recruitcms.auth.roles import ADMIN, TENANT_ADMIN, SUPER_ADMIN, has_role, role_level
from recruitcms.models.user import User

ADMIN_ROLES = (ADMIN, TENANT_ADMIN, SUPER_ADMIN)


def assert_can_manage(principal, target: User) -> None:
    if role_level(target.role) > role_level(principal.role):
        raise Forbidden("Cannot manage a user with a higher role")


def admin_count(tenant_id) -> int:
    """Active admin-level users in a tenant (or, for tenant_id None, super admins)."""
    query = User.query.filter(User.role.in_(ADMIN_ROLES), User.is_active.is_(True))
    if tenant_id is None:
        query = query.filter(User.tenant_id.is_(None))
    else:
        query = query.filter(User.tenant_id == tenant_id)
    return query.count()


def assert_not_last_admin(target: User, message="Cannot delete the last admin user") -> None:
    # Deactivated admins never count towards the tenant's remaining admins
    if not target.is_active or not has_role(target.role, ADMIN):
        return
    if admin_count(target.tenant_id) <= 1:
        raise BadRequest(message)
