from flask import g, jsonify
from flask_jwt_extended import get_current_user
from werkzeug.exceptions import BadRequest, NotFound
from recruitcms.application.cms.create_page import create_page as create_page_use_case
from recruitcms.application.cms.delete_page import delete_page as delete_page_use_case
from recruitcms.application.cms.page_access import load_page, public_pages, visible_pages
from recruitcms.application.cms.publish_page import publish_page as publish_page_use_case
from recruitcms.application.cms.publish_page import unpublish_page as unpublish_page_use_case
from recruitcms.application.cms.update_page import update_page as update_page_use_case
from recruitcms.models.landing_page import LandingPage
from recruitcms.normalizers.page import normalize_page
from recruitcms.utils.decorators import auth_required
from recruitcms.utils.optimistic_lock import enforce_optimistic_lock
from recruitcms.utils.validation import get_json_body
from . import api_bp


def page_response(page, status_code=200):
    response = jsonify(normalize_page(page, admin=True))
    response.status_code = status_code
    response.last_modified = page.updated_at
    return response


# ------------------------
# Pages (page builder)
# ------------------------

@api_bp.route("/pages", methods=["GET"])
@auth_required()
def list_pages():
    principal = get_current_user()

    pages = (
        visible_pages(principal)
        .order_by(LandingPage.updated_at.desc(), LandingPage.id.desc())
        .all()
    )

    return jsonify([normalize_page(page, admin=True) for page in pages]), 200


@api_bp.route("/pages/<page_id>", methods=["GET"])
@auth_required()
def get_page(page_id):
    return page_response(load_page(get_current_user(), page_id))


@api_bp.route("/pages/<page_id>/preview", methods=["GET"])
@auth_required()
def preview_page(page_id):
    """Live preview: the public rendering of a page in any status."""
    page = load_page(get_current_user(), page_id)

    data = normalize_page(page, admin=False)
    data["status"] = page.status
    data["preview"] = True
    return jsonify(data), 200


@api_bp.route("/pages", methods=["POST"])
@auth_required()
def create_page():
    page = create_page_use_case(principal=get_current_user(), data=get_json_body())
    return page_response(page, 201)


@api_bp.route("/pages/<page_id>", methods=["PUT"])
@auth_required()
def update_page(page_id):
    page = load_page(get_current_user(), page_id)

    # -----------------------
    # Optimistic Locking Check
    # -----------------------
    enforce_optimistic_lock(page)

    page = update_page_use_case(page=page, data=get_json_body())
    return page_response(page)


@api_bp.route("/pages/<page_id>/publish", methods=["POST"])
@auth_required()
def publish_page(page_id):
    page = publish_page_use_case(page=load_page(get_current_user(), page_id))
    return page_response(page)


@api_bp.route("/pages/<page_id>/unpublish", methods=["POST"])
@auth_required()
def unpublish_page(page_id):
    page = unpublish_page_use_case(page=load_page(get_current_user(), page_id))
    return page_response(page)


@api_bp.route("/pages/<page_id>", methods=["DELETE"])
@auth_required()
def delete_page(page_id):
    principal = get_current_user()
    delete_page_use_case(page=load_page(principal, page_id), actor_id=principal.id)
    return jsonify({"message": "Page deleted successfully"}), 200


# ------------------------
# Public rendering
# ------------------------

@api_bp.route("/pages/slug/<path:slug>", methods=["GET"])
def get_page_by_slug(slug):
    query = public_pages().filter(LandingPage.slug == slug)

    if g.get("tenant_hint_given"):
        tenant = g.get("requested_tenant")
        if tenant is None or not tenant.is_active:
            raise NotFound("Page not found")
        page = query.filter(LandingPage.tenant_id == tenant.id).first()
    else:
        matches = query.limit(2).all()
        if len(matches) > 1:
            raise BadRequest("Slug is used by several tenants; pass the tenant")
        page = matches[0] if matches else None

    if page is None:
        raise NotFound("Page not found")

    return jsonify(normalize_page(page, admin=False)), 200
