import logging
from recruitcms.extensions import db
from recruitcms.auth.tokens import revoke_token

logger = logging.getLogger(__name__)


def logout(token) -> None:
    """Forget the token. Succeeds whether or not it was known."""
    if not token:
        return

    removed = revoke_token(token)
    db.session.commit()

    logger.info("Logout removed %d token record(s)", removed)
