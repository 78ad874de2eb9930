import logging
from recruitcms.models.landing_page import LandingPage
from recruitcms.domain.invariants.page import assert_page
from recruitcms.domain.lifecycle.page import assert_page_transition
from recruitcms.utils.transaction import transactional

logger = logging.getLogger(__name__)


def set_page_status(*, page: LandingPage, status: str) -> LandingPage:
    """
    Move a page between draft and published.

    Publishing runs the strict content checks, so a page with an empty
    image or an unlabeled form field never goes live.
    """
    assert_page_transition(from_status=page.status, to_status=status)

    with transactional():
        page.status = status
        assert_page(page, publish=status == "published")

    logger.info("Page %s is now %s", page.id, status)
    return page


def publish_page(*, page: LandingPage) -> LandingPage:
    return set_page_status(page=page, status="published")


def unpublish_page(*, page: LandingPage) -> LandingPage:
    return set_page_status(page=page, status="draft")
