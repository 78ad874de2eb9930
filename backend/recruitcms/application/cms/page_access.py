from werkzeug.exceptions import Forbidden
from recruitcms.auth.roles import ADMIN, has_role
from recruitcms.models.landing_page import LandingPage
from recruitcms.models.tenant import Tenant
from recruitcms.utils.tenancy import get_scoped_or_404, scope_query


def can_manage_page(principal, page) -> bool:
    """Admins manage every page of their tenant; users only their own."""
    return has_role(principal.role, ADMIN) or page.user_id == principal.id


def public_pages():
    """Published pages whose tenant is active."""
    return LandingPage.query.join(Tenant, Tenant.id == LandingPage.tenant_id).filter(
        LandingPage.status == "published",
        Tenant.status == "active",
    )


def visible_pages(principal):
    query = scope_query(LandingPage.query, LandingPage, principal)
    if not has_role(principal.role, ADMIN):
        query = query.filter(LandingPage.user_id == principal.id)
    return query


def load_page(principal, page_id) -> LandingPage:
    """404 outside the principal's tenant, 403 for another user's page."""
    page = get_scoped_or_404(LandingPage, page_id, principal, "Page not found")
    if not can_manage_page(principal, page):
        raise Forbidden("Forbidden")
    return page
