import logging
from contextlib import contextmanager
from recruitcms.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional():
    """
    Commit the request session on success; roll back and re-raise on error.
    """
    try:
        yield db.session
        db.session.commit()
    except Exception:
        logger.debug("Rolling back transaction", exc_info=True)
        db.session.rollback()
        raise
