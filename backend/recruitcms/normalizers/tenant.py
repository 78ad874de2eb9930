from recruitcms.utils.dates import isoformat


def normalize_tenant_public(tenant):
    """What a tenant's own users (and the login screen) get to see."""
    return {
        "id": tenant.id,
        "name": tenant.name,
        "subdomain": tenant.subdomain,
        "settings": tenant.settings or {},
        "branding": tenant.branding or {},
    }


def normalize_tenant(tenant, counts=None):
    data = normalize_tenant_public(tenant)
    data.update({
        "domain": tenant.domain,
        "status": tenant.status,
        "plan": tenant.plan,
        "max_users": tenant.max_users,
        "max_pages": tenant.max_pages,
        "created_at": isoformat(tenant.created_at),
        "updated_at": isoformat(tenant.updated_at),
    })

    if counts is not None:
        data.update({
            "user_count": counts.get("users", 0),
            "page_count": counts.get("pages", 0),
            "submission_count": counts.get("submissions", 0),
        })

    return data
