from sqlalchemy import func
from recruitcms.extensions import db
from recruitcms.auth.roles import SUPER_ADMIN
from recruitcms.models.form_submission import FormSubmission
from recruitcms.models.landing_page import LandingPage
from recruitcms.models.tenant import Tenant
from recruitcms.models.user import User


def _count_by_tenant(model, tenant_ids=None):
    query = db.session.query(model.tenant_id, func.count(model.id)).group_by(model.tenant_id)
    if tenant_ids is not None:
        query = query.filter(model.tenant_id.in_(tenant_ids))
    return dict(query.all())


def tenant_counts(tenant_ids=None):
    """{tenant_id: {"users": n, "pages": n, "submissions": n}}"""
    users = _count_by_tenant(User, tenant_ids)
    pages = _count_by_tenant(LandingPage, tenant_ids)
    submissions = _count_by_tenant(FormSubmission, tenant_ids)

    ids = tenant_ids if tenant_ids is not None else set(users) | set(pages) | set(submissions)
    return {
        tenant_id: {
            "users": users.get(tenant_id, 0),
            "pages": pages.get(tenant_id, 0),
            "submissions": submissions.get(tenant_id, 0),
        }
        for tenant_id in ids
        if tenant_id is not None
    }


def platform_stats(recent=5):
    plans = dict(
        db.session.query(Tenant.plan, func.count(Tenant.id)).group_by(Tenant.plan).all()
    )

    recent_tenants = (
        Tenant.query.order_by(Tenant.created_at.desc()).limit(recent).all()
    )

    return {
        "total_tenants": Tenant.query.count(),
        "active_tenants": Tenant.query.filter_by(status="active").count(),
        "total_users": User.query.filter(User.role != SUPER_ADMIN).count(),
        "total_pages": LandingPage.query.count(),
        "total_submissions": FormSubmission.query.count(),
        "plans": plans,
        "recent_tenants": recent_tenants,
    }
