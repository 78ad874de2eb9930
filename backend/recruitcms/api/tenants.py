from flask import jsonify
from flask_jwt_extended import get_current_user, jwt_required
from werkzeug.exceptions import NotFound
from recruitcms.application.auth.impersonation import start_impersonation, stop_impersonation
from recruitcms.application.tenants.create_tenant import create_tenant as create_tenant_use_case
from recruitcms.application.tenants.delete_tenant import delete_tenant as delete_tenant_use_case
from recruitcms.application.tenants.stats import platform_stats, tenant_counts
from recruitcms.application.tenants.update_tenant import update_tenant as update_tenant_use_case
from recruitcms.extensions import db
from recruitcms.models.landing_page import LandingPage
from recruitcms.models.tenant import Tenant
from recruitcms.models.user import User
from recruitcms.normalizers.tenant import normalize_tenant, normalize_tenant_public
from recruitcms.utils.dates import isoformat
from recruitcms.utils.decorators import super_admin_required
from recruitcms.utils.validation import get_json_body
from . import api_bp

RECENT_LIMIT = 5


def load_tenant(tenant_id) -> Tenant:
    tenant = db.session.get(Tenant, tenant_id)
    if tenant is None:
        raise NotFound("Tenant not found")
    return tenant


def tenant_detail(tenant):
    data = normalize_tenant(tenant, tenant_counts([tenant.id]).get(tenant.id, {}))

    recent_users = (
        User.query.filter_by(tenant_id=tenant.id)
        .order_by(User.created_at.desc())
        .limit(RECENT_LIMIT)
        .all()
    )
    recent_pages = (
        LandingPage.query.filter_by(tenant_id=tenant.id)
        .order_by(LandingPage.created_at.desc())
        .limit(RECENT_LIMIT)
        .all()
    )

    data["recent_users"] = [
        {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "role": user.role,
            "created_at": isoformat(user.created_at),
            "last_login": isoformat(user.last_login),
        }
        for user in recent_users
    ]
    data["recent_pages"] = [
        {
            "id": page.id,
            "title": page.title,
            "slug": page.slug,
            "status": page.status,
            "created_at": isoformat(page.created_at),
        }
        for page in recent_pages
    ]
    return data


# ------------------------
# Tenant administration
# ------------------------

@api_bp.route("/admin/tenants", methods=["GET"])
@super_admin_required
def list_tenants():
    tenants = Tenant.query.order_by(Tenant.created_at.desc()).all()
    counts = tenant_counts([tenant.id for tenant in tenants])

    return jsonify([
        normalize_tenant(tenant, counts.get(tenant.id, {}))
        for tenant in tenants
    ]), 200


@api_bp.route("/admin/tenants/<tenant_id>", methods=["GET"])
@super_admin_required
def get_tenant(tenant_id):
    return jsonify(tenant_detail(load_tenant(tenant_id))), 200


@api_bp.route("/admin/tenants", methods=["POST"])
@super_admin_required
def create_tenant():
    tenant = create_tenant_use_case(principal=get_current_user(), data=get_json_body())
    return jsonify(tenant_detail(tenant)), 201


@api_bp.route("/admin/tenants/<tenant_id>", methods=["PUT"])
@super_admin_required
def update_tenant(tenant_id):
    tenant = update_tenant_use_case(
        principal=get_current_user(),
        tenant=load_tenant(tenant_id),
        data=get_json_body(),
    )
    return jsonify(tenant_detail(tenant)), 200


@api_bp.route("/admin/tenants/<tenant_id>", methods=["DELETE"])
@super_admin_required
def delete_tenant(tenant_id):
    delete_tenant_use_case(principal=get_current_user(), tenant=load_tenant(tenant_id))
    return jsonify({"message": "Tenant deleted successfully"}), 200


# ------------------------
# Impersonation
# ------------------------

@api_bp.route("/admin/tenants/<tenant_id>/impersonate", methods=["POST"])
@super_admin_required
def impersonate_tenant(tenant_id):
    token, tenant = start_impersonation(principal=get_current_user(), tenant_id=tenant_id)

    return jsonify({
        "token": token,
        "tenant": normalize_tenant_public(tenant),
        "message": "Impersonation token created",
    }), 200


@api_bp.route("/admin/tenants/stop-impersonation", methods=["POST"])
@jwt_required()
def stop_tenant_impersonation():
    token = stop_impersonation(principal=get_current_user())
    return jsonify({"token": token, "message": "Impersonation stopped"}), 200


@api_bp.route("/admin/stats", methods=["GET"])
@super_admin_required
def stats():
    data = platform_stats(recent=RECENT_LIMIT)
    data["recent_tenants"] = [
        {
            "id": tenant.id,
            "name": tenant.name,
            "subdomain": tenant.subdomain,
            "status": tenant.status,
            "created_at": isoformat(tenant.created_at),
        }
        for tenant in data["recent_tenants"]
    ]
    return jsonify(data), 200
