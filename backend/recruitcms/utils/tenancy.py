"""
Tenant scoping. Every tenant-owned query for a non-super-admin principal
goes through ``scope_query`` so rows of other tenants are never returned.
"""
from typing import Optional
from werkzeug.exceptions import BadRequest, NotFound
from recruitcms.extensions import db
from recruitcms.models.tenant import Tenant


def scope_query(query, model, principal):
    if principal.is_super_admin:
        return query
    return query.filter(model.tenant_id == principal.tenant_id)


def get_scoped_or_404(model, object_id, principal, description="Not found"):
    obj = scope_query(model.query, model, principal).filter(model.id == object_id).first()
    if obj is None:
        raise NotFound(description)
    return obj


def resolve_tenant_id(principal, requested: Optional[str] = None) -> str:
    """
    The tenant a write lands in: always the principal's own tenant, except
    for super admins who must name one explicitly.
    """
    if not principal.is_super_admin:
        return principal.tenant_id

    if not requested:
        raise BadRequest("tenant_id is required for super admin requests")

    if db.session.get(Tenant, requested) is None:
        raise NotFound("Tenant not found")

    return requested
