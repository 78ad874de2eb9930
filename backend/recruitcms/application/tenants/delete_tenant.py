import logging
from werkzeug.exceptions import BadRequest
from recruitcms.extensions import db
from recruitcms.models.landing_page import LandingPage
from recruitcms.models.tenant import Tenant
from recruitcms.models.user import User
from recruitcms.utils.transaction import transactional

logger = logging.getLogger(__name__)


def delete_tenant(*, principal, tenant: Tenant) -> None:
    """Only empty tenants can be deleted."""
    has_users = User.query.filter_by(tenant_id=tenant.id).first() is not None
    has_pages = LandingPage.query.filter_by(tenant_id=tenant.id).first() is not None

    if has_users or has_pages:
        raise BadRequest(
            "Cannot delete tenant with existing users or pages. "
            "Please migrate or delete data first."
        )

    tenant_id = tenant.id
    with transactional():
        db.session.delete(tenant)

    logger.info("Tenant %s deleted by %s", tenant_id, principal.id)
