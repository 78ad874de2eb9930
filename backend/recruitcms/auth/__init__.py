from .principal import Principal, resolve_principal
from .roles import ADMIN, ROLES, SUPER_ADMIN, TENANT_ADMIN, USER, has_role, role_level

__all__ = [
    "Principal",
    "resolve_principal",
    "ADMIN",
    "ROLES",
    "SUPER_ADMIN",
    "TENANT_ADMIN",
    "USER",
    "has_role",
    "role_level",
]
