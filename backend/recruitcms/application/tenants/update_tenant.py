import logging
from typing import Any, Dict
from recruitcms.models.tenant import Tenant
from recruitcms.utils.transaction import transactional
from .create_tenant import assert_subdomain_available, assert_valid_choices

logger = logging.getLogger(__name__)

ALLOWED_UPDATE_FIELDS = (
    "name",
    "subdomain",
    "domain",
    "status",
    "plan",
    "max_users",
    "max_pages",
    "settings",
    "branding",
)


def update_tenant(*, principal, tenant: Tenant, data: Dict[str, Any]) -> Tenant:
    """
    Changing the plan does not touch max_users/max_pages; quotas are only
    rewritten when given explicitly.
    """
    if data.get("subdomain") and data["subdomain"] != tenant.subdomain:
        assert_subdomain_available(data["subdomain"], exclude_id=tenant.id)
    assert_valid_choices(data)

    changed_fields = []
    with transactional():
        for field in ALLOWED_UPDATE_FIELDS:
            if data.get(field) is not None and getattr(tenant, field) != data[field]:
                setattr(tenant, field, data[field])
                changed_fields.append(field)

    if changed_fields:
        logger.info("Tenant %s updated by %s: %s", tenant.id, principal.id, ", ".join(changed_fields))
    return tenant
