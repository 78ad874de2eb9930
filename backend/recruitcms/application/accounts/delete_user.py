import logging
from recruitcms.extensions import db
from recruitcms.models.user import User
from recruitcms.utils.media import delete_file
from recruitcms.utils.transaction import transactional
from .guards import assert_can_manage, assert_not_last_admin

logger = logging.getLogger(__name__)


def delete_user(*, principal, target: User) -> None:
    """
    Delete a user together with their pages, uploads and tokens.
    The last admin of a tenant cannot be deleted.
    """
    assert_can_manage(principal, target)
    assert_not_last_admin(target)

    stored_files = [upload.filename for upload in target.uploads]
    user_id = target.id

    with transactional():
        db.session.delete(target)

    for filename in stored_files:
        delete_file(filename)

    logger.info("User %s deleted by %s", user_id, principal.id)
