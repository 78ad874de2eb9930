import logging
from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import BadRequest, Conflict
from recruitcms.extensions import db
from recruitcms.models.landing_page import LandingPage
from recruitcms.models.tenant import Tenant
from recruitcms.domain.invariants.page import assert_page, assert_text_fields
from recruitcms.domain.lifecycle.page import PAGE_STATUSES
from recruitcms.utils.slug import generate_slug, ensure_unique_slug
from recruitcms.utils.tenancy import resolve_tenant_id
from recruitcms.utils.transaction import transactional
from recruitcms.utils.validation import require_fields

logger = logging.getLogger(__name__)

HEADER_FIELDS = (
    "header_image",
    "header_text",
    "header_overlay_color",
    "header_overlay_opacity",
    "header_height",
)


def create_page(
    *,
    principal,
    data: Dict[str, Any],
) -> LandingPage:
    """
    Create a landing page owned by the caller.

    Edge cases handled:
    - Missing title
    - Slug derived from the title when absent, made unique per tenant
    - Tenant page quota (max_pages)
    - Content block invariants (stricter when created as published)
    """
    require_fields(data, ["title"])
    assert_text_fields(data)

    tenant_id = resolve_tenant_id(principal, data.get("tenant_id"))
    tenant = db.session.get(Tenant, tenant_id)

    if LandingPage.query.filter_by(tenant_id=tenant_id).count() >= tenant.max_pages:
        raise BadRequest("Page limit reached for this tenant")

    status = data.get("status") or "draft"
    if status not in PAGE_STATUSES:
        raise BadRequest("Invalid status")

    slug = generate_slug(data.get("slug") or data["title"])

    page = LandingPage()
    page.tenant_id = tenant_id
    page.user_id = principal.id
    page.title = data["title"]
    page.slug = ensure_unique_slug(LandingPage, slug, tenant_id=tenant_id)
    page.status = status
    page.content_blocks = data.get("content_blocks") or []
    page.header_overlay_color = "#000000"
    page.header_overlay_opacity = 0.5
    page.header_height = 400

    for field in HEADER_FIELDS:
        if data.get(field) is not None:
            setattr(page, field, data[field])

    try:
        with transactional():
            # Domain invariants (normalizes content_blocks in place)
            assert_page(page, publish=status == "published")
            db.session.add(page)
    except IntegrityError as exc:
        # Lost a race on (tenant_id, slug)
        raise Conflict("A page with this slug already exists") from exc

    logger.info("Page %s created in tenant %s by %s", page.id, tenant_id, principal.id)
    return page
