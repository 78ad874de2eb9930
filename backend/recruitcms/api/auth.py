import re
from flask import jsonify, request
from flask_jwt_extended import get_current_user
from recruitcms.application.auth.impersonation import start_impersonation
from recruitcms.application.auth.login import login as login_user
from recruitcms.application.auth.logout import logout as logout_token
from recruitcms.models.tenant import Tenant
from recruitcms.normalizers.tenant import normalize_tenant_public
from recruitcms.normalizers.user import normalize_user
from recruitcms.utils.dates import isoformat
from recruitcms.utils.decorators import auth_required
from recruitcms.utils.validation import get_json_body, require_fields
from . import api_bp

BEARER = re.compile(r"Bearer\s+(.*)$", re.IGNORECASE)


def bearer_token():
    match = BEARER.search(request.headers.get("Authorization", ""))
    return match.group(1).strip() if match else None


@api_bp.route("/auth/login", methods=["POST"])
def login():
    result = login_user(get_json_body())

    response = {
        "token": result["token"],
        "user": normalize_user(result["user"]),
    }
    if result["tenant"] is not None:
        response["tenant"] = normalize_tenant_public(result["tenant"])

    return jsonify(response), 200


@api_bp.route("/auth/logout", methods=["POST"])
def logout():
    logout_token(bearer_token())
    return jsonify({"message": "Logged out successfully"}), 200


@api_bp.route("/auth/me", methods=["GET"])
@auth_required()
def me():
    principal = get_current_user()

    response = normalize_user(principal.user)
    response["effective_role"] = principal.role
    response["impersonating"] = principal.is_impersonating

    if principal.tenant is not None:
        response["tenant"] = normalize_tenant_public(principal.tenant)

    if principal.is_impersonating:
        response["impersonation"] = {
            "tenant_id": principal.impersonation.tenant_id,
            "expires_at": isoformat(principal.impersonation.expires_at),
        }

    return jsonify(response), 200


@api_bp.route("/auth/switch-tenant", methods=["POST"])
@auth_required()
def switch_tenant():
    data = get_json_body()
    require_fields(data, ["tenant_id"])

    token, tenant = start_impersonation(
        principal=get_current_user(),
        tenant_id=str(data["tenant_id"]),
    )

    return jsonify({
        "token": token,
        "tenant": normalize_tenant_public(tenant),
    }), 200


@api_bp.route("/auth/tenants", methods=["GET"])
def list_login_tenants():
    tenants = Tenant.query.filter_by(status="active").order_by(Tenant.name.asc()).all()

    return jsonify([
        {
            "id": tenant.id,
            "name": tenant.name,
            "subdomain": tenant.subdomain,
            "branding": tenant.branding or {},
        }
        for tenant in tenants
    ]), 200
