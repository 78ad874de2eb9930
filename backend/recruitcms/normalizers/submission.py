from recruitcms.utils.dates import isoformat


def normalize_submission(submission):
    page = submission.page
    return {
        "id": submission.id,
        "tenant_id": submission.tenant_id,
        "page_id": submission.page_id,
        "page_title": page.title if page else None,
        "page_slug": page.slug if page else None,
        "data": submission.data or {},
        "ip_address": submission.ip_address,
        "user_agent": submission.user_agent,
        "created_at": isoformat(submission.created_at),
    }
