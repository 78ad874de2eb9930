import logging
import re
from typing import Any, Dict
from markupsafe import escape
from werkzeug.exceptions import BadRequest, NotFound
from recruitcms.extensions import db
from recruitcms.models.form_submission import FormSubmission
from recruitcms.application.cms.page_access import public_pages
from recruitcms.models.landing_page import LandingPage
from recruitcms.utils.transaction import transactional
from recruitcms.utils.validation import require_fields

logger = logging.getLogger(__name__)

MAX_VALUE_LENGTH = 1000
CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def sanitize_value(value):
    if isinstance(value, str):
        value = CONTROL_CHARS.sub("", value)[:MAX_VALUE_LENGTH]
        return str(escape(value))
    if isinstance(value, (bool, int, float)) or value is None:
        return value
    if isinstance(value, list):
        return [sanitize_value(item) for item in value]
    # Nested objects are flattened to their escaped text form
    return str(escape(str(value)))[:MAX_VALUE_LENGTH]


def sanitize_form_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Strip control characters, cap string values at 1000 characters and
    HTML-escape keys and values.
    """
    return {
        str(escape(CONTROL_CHARS.sub("", str(key)))): sanitize_value(value)
        for key, value in data.items()
    }


def notify_new_submission(page: LandingPage, submission: FormSubmission) -> None:
    # Email delivery is not wired up; the log line is the notification
    logger.info(
        "New application for page %r (submission %s, tenant %s): %d field(s)",
        page.title,
        submission.id,
        submission.tenant_id,
        len(submission.data),
    )


def submit_form(*, data: Dict[str, Any], ip_address: str, user_agent: str) -> FormSubmission:
    """
    Store an applicant's form submission for a published page. The tenant
    is taken from the page, never from the request.
    """
    require_fields(data, ["page_id", "data"])

    if not isinstance(data["data"], dict):
        raise BadRequest("data must be an object")

    page = public_pages().filter(LandingPage.id == str(data["page_id"])).first()
    if page is None:
        raise NotFound("Page not found or not published")

    submission = FormSubmission()
    submission.tenant_id = page.tenant_id
    submission.page_id = page.id
    submission.data = sanitize_form_data(data["data"])
    submission.ip_address = (ip_address or "unknown")[:45]
    submission.user_agent = user_agent or "unknown"

    with transactional():
        db.session.add(submission)

    notify_new_submission(page, submission)
    return submission
