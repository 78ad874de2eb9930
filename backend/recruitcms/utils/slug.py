import re
import unicodedata

GERMAN_TRANSLITERATION = {
    "ä": "ae",
    "ö": "oe",
    "ü": "ue",
    "ß": "ss",
}


def generate_slug(text: str) -> str:
    """
    "Über uns: Jobs!" -> "ueber-uns-jobs"

    German umlauts are transliterated, other diacritics dropped, anything
    outside [a-z0-9 -] removed and runs of spaces/hyphens collapsed.
    """
    slug = (text or "").lower()

    for char, replacement in GERMAN_TRANSLITERATION.items():
        slug = slug.replace(char, replacement)

    slug = unicodedata.normalize("NFKD", slug).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"[\s-]+", "-", slug)
    slug = slug.strip("-")

    return slug or "page"


def ensure_unique_slug(model, slug, *, tenant_id=None, exclude_id=None) -> str:
    """
    Append -1, -2, ... until no row of ``model`` (within ``tenant_id`` when
    given, ignoring ``exclude_id``) uses the slug.
    """
    base_slug = slug
    counter = 1

    while True:
        query = model.query.filter(model.slug == slug)
        if tenant_id is not None:
            query = query.filter(model.tenant_id == tenant_id)
        if exclude_id is not None:
            query = query.filter(model.id != exclude_id)

        if query.first() is None:
            return slug

        slug = f"{base_slug}-{counter}"
        counter += 1
