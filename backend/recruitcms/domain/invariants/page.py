import re
from .blocks import normalize_blocks
from .exceptions import InvariantViolation

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")

TEXT_FIELDS = ("title", "slug", "header_image", "header_text", "header_overlay_color")


def assert_text_fields(data) -> None:
    """Reject payload values that must be strings but are not."""
    for field in TEXT_FIELDS:
        value = data.get(field)
        if value is not None and not isinstance(value, str):
            raise InvariantViolation(f"{field} must be a string.")


def _number(value, cast, field):
    if isinstance(value, bool):
        raise InvariantViolation(f"{field} must be a number.")
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise InvariantViolation(f"{field} must be a number.") from None


def assert_page(page, publish=False):
    if not isinstance(page.title, str) or not page.title.strip():
        raise InvariantViolation("Page title must not be empty.")

    color = page.header_overlay_color
    if color and (not isinstance(color, str) or not HEX_COLOR.match(color)):
        raise InvariantViolation("header_overlay_color must look like #rrggbb.")

    if page.header_overlay_opacity is not None:
        opacity = _number(page.header_overlay_opacity, float, "header_overlay_opacity")
        if not 0 <= opacity <= 1:
            raise InvariantViolation("header_overlay_opacity must be between 0 and 1.")
        page.header_overlay_opacity = opacity

    if page.header_height is not None:
        height = _number(page.header_height, int, "header_height")
        if height <= 0:
            raise InvariantViolation("header_height must be positive.")
        page.header_height = height

    page.content_blocks = normalize_blocks(page.content_blocks, publish=publish)
