from werkzeug.exceptions import Forbidden
from recruitcms.auth.roles import ADMIN, has_role
from recruitcms.models.form_submission import FormSubmission
from recruitcms.models.landing_page import LandingPage
from recruitcms.utils.tenancy import get_scoped_or_404, scope_query


def visible_submissions(principal, page_id=None):
    """
    Newest first. Users below admin only see submissions of pages they own.
    """
    query = scope_query(FormSubmission.query, FormSubmission, principal)

    if page_id:
        query = query.filter(FormSubmission.page_id == page_id)

    if not has_role(principal.role, ADMIN):
        query = query.join(LandingPage, FormSubmission.page_id == LandingPage.id).filter(
            LandingPage.user_id == principal.id
        )

    return query.order_by(FormSubmission.created_at.desc(), FormSubmission.id.desc())


def load_submission(principal, submission_id) -> FormSubmission:
    submission = get_scoped_or_404(FormSubmission, submission_id, principal, "Submission not found")
    if not has_role(principal.role, ADMIN) and submission.page.user_id != principal.id:
        raise Forbidden("Forbidden")
    return submission
