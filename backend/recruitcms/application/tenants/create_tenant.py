import logging
import re
from typing import Any, Dict
from werkzeug.exceptions import BadRequest, Conflict
from recruitcms.extensions import db
from recruitcms.auth.roles import TENANT_ADMIN
from recruitcms.models.tenant import (
    DEFAULT_SETTINGS,
    PLAN_LIMITS,
    TENANT_STATUSES,
    Tenant,
    default_branding,
    plan_limits,
)
from recruitcms.models.user import User
from recruitcms.utils.transaction import transactional
from recruitcms.utils.validation import require_fields

logger = logging.getLogger(__name__)

SUBDOMAIN_PATTERN = re.compile(r"^[a-z0-9-]+$")


def assert_subdomain_available(subdomain: str, exclude_id=None) -> None:
    if not SUBDOMAIN_PATTERN.match(subdomain):
        raise BadRequest(
            "Invalid subdomain format. Only lowercase letters, numbers, and hyphens allowed."
        )

    query = Tenant.query.filter(Tenant.subdomain == subdomain)
    if exclude_id is not None:
        query = query.filter(Tenant.id != exclude_id)
    if query.first():
        raise Conflict("Subdomain already exists")


def assert_valid_choices(data: Dict[str, Any]) -> None:
    if "status" in data and data["status"] not in TENANT_STATUSES:
        raise BadRequest("Invalid status")
    if "plan" in data and data["plan"] not in PLAN_LIMITS:
        raise BadRequest("Invalid plan")


def create_tenant(*, principal, data: Dict[str, Any]) -> Tenant:
    """
    Provision a tenant with plan quotas and default settings/branding,
    optionally with its first tenant admin (admin_email + admin_password).
    """
    require_fields(data, ["name", "subdomain"])
    assert_subdomain_available(data["subdomain"])
    assert_valid_choices(data)

    plan = data.get("plan") or "free"
    limits = plan_limits(plan)

    tenant = Tenant()
    tenant.name = data["name"]
    tenant.subdomain = data["subdomain"]
    tenant.domain = data.get("domain")
    tenant.status = data.get("status") or "active"
    tenant.plan = plan
    tenant.max_users = limits["users"]
    tenant.max_pages = limits["pages"]
    tenant.settings = data.get("settings") or dict(DEFAULT_SETTINGS)
    tenant.branding = data.get("branding") or default_branding(data["name"])

    with transactional():
        db.session.add(tenant)
        db.session.flush()  # ensures tenant.id is available

        if data.get("admin_email") and data.get("admin_password"):
            admin = User()
            admin.tenant_id = tenant.id
            admin.username = data.get("admin_username") or "admin"
            admin.email = data["admin_email"]
            admin.role = TENANT_ADMIN
            admin.set_password(data["admin_password"])
            db.session.add(admin)

    logger.info("Tenant %s (%s) created by %s", tenant.id, tenant.subdomain, principal.id)
    return tenant
