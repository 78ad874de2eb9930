from recruitcms.utils.dates import isoformat


def normalize_page(page, admin=False):
    """
    Public rendering omits ownership and workflow fields; ``admin`` adds them
    for the page builder.
    """
    blocks = sorted(page.content_blocks or [], key=lambda b: b.get("order", 0))

    data = {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "header_image": page.header_image,
        "header_text": page.header_text,
        "header_overlay_color": page.header_overlay_color,
        "header_overlay_opacity": page.header_overlay_opacity,
        "header_height": page.header_height,
        "content_blocks": blocks,
        "author": page.author.username if page.author else None,
    }

    if admin:
        data.update({
            "tenant_id": page.tenant_id,
            "status": page.status,
            "user_id": page.user_id,
            "created_at": isoformat(page.created_at),
            "updated_at": isoformat(page.updated_at),
        })

    return data
