from functools import wraps
from flask import jsonify
from flask_jwt_extended import get_current_user, verify_jwt_in_request
from recruitcms.auth.roles import has_role


def auth_required(role=None):
    """
    Require a valid bearer token and, optionally, a minimum role.

    Non-super-admin principals whose tenant is not active are refused.
    The resolved principal is available through ``get_current_user()``.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            principal = get_current_user()

            if not principal.is_super_admin and not principal.tenant_is_active:
                return jsonify({"error": "Tenant is not active"}), 403

            if role is not None and not has_role(principal.role, role):
                return jsonify({"error": "Insufficient permissions"}), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator


def super_admin_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        principal = get_current_user()

        if not principal.is_super_admin:
            return jsonify({"error": "Super admin access required"}), 403

        return fn(*args, **kwargs)
    return wrapper
