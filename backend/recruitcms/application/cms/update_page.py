import logging
from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import BadRequest, Conflict
from recruitcms.models.landing_page import LandingPage
from recruitcms.domain.invariants.page import assert_page, assert_text_fields
from recruitcms.domain.lifecycle.page import PAGE_STATUSES, assert_page_transition
from recruitcms.utils.slug import generate_slug, ensure_unique_slug
from recruitcms.utils.transaction import transactional
from .create_page import HEADER_FIELDS

logger = logging.getLogger(__name__)

ALLOWED_UPDATE_FIELDS = ("title",) + HEADER_FIELDS


def update_page(
    *,
    page: LandingPage,
    data: Dict[str, Any],
) -> LandingPage:
    """
    Update mutable fields on a page the caller may manage.

    Design rules:
    - Only whitelisted fields are mutable
    - A new slug is normalized and made unique, ignoring the page itself
    - Status changes go through the lifecycle guard
    - Invariants always revalidated (strict when the page ends up published)
    """
    assert_text_fields(data)
    changed_fields: list[str] = []

    if "status" in data:
        if data["status"] not in PAGE_STATUSES:
            raise BadRequest("Invalid status")
        assert_page_transition(from_status=page.status, to_status=data["status"])

    try:
        with transactional():
            for field in ALLOWED_UPDATE_FIELDS:
                if field in data and getattr(page, field) != data[field]:
                    setattr(page, field, data[field])
                    changed_fields.append(field)

            if data.get("slug"):
                slug = ensure_unique_slug(
                    LandingPage,
                    generate_slug(data["slug"]),
                    tenant_id=page.tenant_id,
                    exclude_id=page.id,
                )
                if slug != page.slug:
                    page.slug = slug
                    changed_fields.append("slug")

            if "content_blocks" in data:
                page.content_blocks = data["content_blocks"] or []
                changed_fields.append("content_blocks")

            if "status" in data and data["status"] != page.status:
                page.status = data["status"]
                changed_fields.append("status")

            assert_page(page, publish=page.status == "published")
    except IntegrityError as exc:
        raise Conflict("A page with this slug already exists") from exc

    if changed_fields:
        logger.info("Page %s updated: %s", page.id, ", ".join(changed_fields))

    return page
