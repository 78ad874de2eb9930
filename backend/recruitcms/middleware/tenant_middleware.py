from flask import request, g
from recruitcms.extensions import db
from recruitcms.models.tenant import Tenant


def requested_tenant():
    """
    Tenant named by the caller, if any: X-Tenant-ID, X-Tenant-Subdomain or
    ?tenant=<subdomain>. Used by public endpoints, which have no token to
    derive a tenant from.
    """
    tenant_id = request.headers.get("X-Tenant-ID")
    if tenant_id:
        return db.session.get(Tenant, tenant_id)

    subdomain = request.headers.get("X-Tenant-Subdomain") or request.args.get("tenant")
    if subdomain:
        return Tenant.query.filter_by(subdomain=subdomain).first()

    return None


def tenant_middleware(app):
    @app.before_request
    def load_tenant_hint():
        g.tenant_hint_given = bool(
            request.headers.get("X-Tenant-ID")
            or request.headers.get("X-Tenant-Subdomain")
            or request.args.get("tenant")
        )
        g.requested_tenant = requested_tenant() if g.tenant_hint_given else None
