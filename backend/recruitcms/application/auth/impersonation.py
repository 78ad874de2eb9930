"""
Super admins acting as a tenant admin of a given tenant.

The impersonation chain lives server-side in ``ImpersonationSession``; the
token only references the session, and stopping reads the caller's real
role back from the users table.
"""
import logging
from flask import current_app
from werkzeug.exceptions import BadRequest, Forbidden, NotFound
from recruitcms.extensions import db
from recruitcms.auth.roles import SUPER_ADMIN
from recruitcms.auth.tokens import issue_token, remember_token
from recruitcms.models.impersonation_session import ImpersonationSession
from recruitcms.models.tenant import Tenant
from recruitcms.utils.dates import utcnow

logger = logging.getLogger(__name__)


def start_impersonation(*, principal, tenant_id):
    if principal.user.role != SUPER_ADMIN:
        raise Forbidden("Only super admins can switch tenants")

    tenant = db.session.get(Tenant, tenant_id) if tenant_id else None
    if tenant is None or not tenant.is_active:
        raise NotFound("Tenant not found or inactive")

    # Switching while already impersonating closes the previous session
    if principal.impersonation is not None:
        principal.impersonation.ended_at = utcnow()

    expires_delta = current_app.config["IMPERSONATION_EXPIRES"]

    session = ImpersonationSession()
    session.user_id = principal.user.id
    session.tenant_id = tenant.id
    session.expires_at = utcnow() + expires_delta
    db.session.add(session)
    db.session.flush()

    token = issue_token(
        principal.user,
        tenant_id=tenant.id,
        impersonation=session,
        expires_delta=expires_delta,
    )
    remember_token(token, principal.user, tenant_id=tenant.id)
    db.session.commit()

    logger.info("Super admin %s impersonating tenant %s", principal.user.id, tenant.id)
    return token, tenant


def stop_impersonation(*, principal):
    session = principal.impersonation
    if session is None:
        raise BadRequest("Not currently impersonating")

    user = principal.user
    session.ended_at = utcnow()

    # Role comes from the users table, not from anything the client sent
    token = issue_token(user, role=user.role, tenant_id=user.tenant_id)
    remember_token(token, user, tenant_id=user.tenant_id)
    db.session.commit()

    logger.info("Super admin %s stopped impersonating tenant %s", user.id, session.tenant_id)
    return token
