import logging
from recruitcms.extensions import db
from recruitcms.models.landing_page import LandingPage
from recruitcms.utils.transaction import transactional

logger = logging.getLogger(__name__)


def delete_page(*, page: LandingPage, actor_id: str) -> None:
    """
    Hard-delete a page. Its form submissions go with it.
    """
    page_id = page.id

    with transactional():
        db.session.delete(page)

    logger.info("Page %s deleted by %s", page_id, actor_id)
