SUPER_ADMIN = "super_admin"
TENANT_ADMIN = "tenant_admin"
ADMIN = "admin"
USER = "user"

ROLES = (USER, ADMIN, TENANT_ADMIN, SUPER_ADMIN)

# Total order of privilege
ROLE_LEVELS = {
    USER: 1,
    ADMIN: 2,
    TENANT_ADMIN: 3,
    SUPER_ADMIN: 4,
}


def role_level(role):
    return ROLE_LEVELS.get(role, 0)


def has_role(role, required):
    """True when ``role`` is at least as privileged as ``required``."""
    return role_level(role) >= role_level(required)


def assignable_roles(actor_role):
    """
    Roles a principal may hand out to tenant users: never super_admin and
    never above the actor's own level.
    """
    return [
        role for role in ROLES
        if role != SUPER_ADMIN and role_level(role) <= role_level(actor_role)
    ]
