from recruitcms.domain.invariants.exceptions import InvariantViolation

DRAFT = "draft"
PUBLISHED = "published"

PAGE_STATUSES = (DRAFT, PUBLISHED)


def assert_page_transition(*, from_status: str, to_status: str) -> None:
    """
    Landing pages move freely between draft and published; anything else is
    rejected. Re-applying the current status is a no-op.
    """
    for status in (from_status, to_status):
        if status not in PAGE_STATUSES:
            raise InvariantViolation(f"Unknown page status: {status}")
