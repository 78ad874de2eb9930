import copy
import uuid
from .exceptions import InvariantViolation

BLOCK_TYPES = ("header", "text", "richtext", "image", "button", "list", "form")

# What the page builder starts a fresh block with
DEFAULT_BLOCK_CONTENT = {
    "header": {"text": ""},
    "text": {"text": ""},
    "richtext": {"html": ""},
    "image": {"url": "", "alt": ""},
    "button": {"text": "", "url": "", "variant": "default"},
    "list": {"items": []},
    "form": {"title": "", "fields": []},
}


def default_content(block_type):
    return copy.deepcopy(DEFAULT_BLOCK_CONTENT.get(block_type, {}))


def assert_block_shape(block, position):
    if not isinstance(block, dict):
        raise InvariantViolation(f"Content block #{position} must be an object.")

    block_type = block.get("type")
    if block_type not in BLOCK_TYPES:
        raise InvariantViolation(
            f"Content block #{position} has unknown type {block_type!r}."
        )

    content = block.get("content")
    if content is not None and not isinstance(content, dict):
        raise InvariantViolation(f"Content block #{position} content must be an object.")

    order = block.get("order")
    if order is not None and (isinstance(order, bool) or not isinstance(order, int)):
        raise InvariantViolation(f"Content block #{position} order must be an integer.")


def assert_block_content(block, publish=False):
    """
    Type-specific rules. Drafts may hold half-filled blocks; a published
    page must render, so the stricter checks only run on publish.
    """
    block_type = block["type"]
    content = block["content"]

    if block_type == "list":
        items = content.get("items", [])
        if not isinstance(items, list):
            raise InvariantViolation("list block items must be a list.")
        if publish and not items:
            raise InvariantViolation("list block must contain at least one item.")

    elif block_type == "form":
        fields = content.get("fields", [])
        if not isinstance(fields, list) or not all(isinstance(f, dict) for f in fields):
            raise InvariantViolation("form block fields must be a list of objects.")
        if publish:
            if not fields:
                raise InvariantViolation("form block must contain at least one field.")
            if any(not f.get("label") for f in fields):
                raise InvariantViolation("Every form field needs a label.")

    elif publish and block_type == "image":
        if not content.get("url"):
            raise InvariantViolation("image block must have a url set.")

    elif publish and block_type == "button":
        if not content.get("text"):
            raise InvariantViolation("button block must have a text set.")


def assert_block_order(blocks):
    orders = [block["order"] for block in blocks]
    if not orders:
        return

    expected = list(range(1, len(orders) + 1))
    if sorted(orders) != expected:
        raise InvariantViolation(
            f"Block orders are not consecutive starting from 1: {orders}"
        )


def normalize_blocks(blocks, publish=False):
    """
    Validate a page's content blocks and return them in storage form.

    Missing ids are generated, missing content gets the type's default and
    blocks are sorted by ``order`` (ties keep submission order) and
    renumbered 1..N.
    """
    if blocks is None:
        return []

    if not isinstance(blocks, list):
        raise InvariantViolation("content_blocks must be a list.")

    staged = []
    for position, block in enumerate(blocks, start=1):
        assert_block_shape(block, position)

        content = block.get("content")
        staged.append((
            block.get("order", position),
            position,
            {
                "id": str(block.get("id") or uuid.uuid4().hex),
                "type": block["type"],
                "content": copy.deepcopy(content) if content is not None else default_content(block["type"]),
            },
        ))

    staged.sort(key=lambda item: (item[0], item[1]))

    normalized = []
    for order, (_, _, block) in enumerate(staged, start=1):
        block["order"] = order
        assert_block_content(block, publish=publish)
        normalized.append(block)

    ids = [block["id"] for block in normalized]
    if len(ids) != len(set(ids)):
        raise InvariantViolation("Content block ids must be unique within a page.")

    assert_block_order(normalized)
    return normalized
