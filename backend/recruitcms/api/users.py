from flask import jsonify
from flask_jwt_extended import get_current_user
from recruitcms.application.accounts.create_user import create_user as create_user_use_case
from recruitcms.application.accounts.delete_user import delete_user as delete_user_use_case
from recruitcms.application.accounts.update_user import update_user as update_user_use_case
from recruitcms.auth.roles import ADMIN
from recruitcms.models.user import User
from recruitcms.normalizers.user import normalize_user
from recruitcms.utils.decorators import auth_required
from recruitcms.utils.tenancy import get_scoped_or_404, scope_query
from recruitcms.utils.validation import get_json_body
from . import api_bp


@api_bp.route("/users", methods=["GET"])
@auth_required(ADMIN)
def list_users():
    principal = get_current_user()

    users = (
        scope_query(User.query, User, principal)
        .order_by(User.created_at.desc())
        .all()
    )

    return jsonify([normalize_user(user) for user in users]), 200


@api_bp.route("/users/<user_id>", methods=["GET"])
@auth_required(ADMIN)
def get_user(user_id):
    user = get_scoped_or_404(User, user_id, get_current_user(), "User not found")
    return jsonify(normalize_user(user)), 200


@api_bp.route("/users", methods=["POST"])
@auth_required(ADMIN)
def create_user():
    user = create_user_use_case(principal=get_current_user(), data=get_json_body())
    return jsonify(normalize_user(user)), 201


@api_bp.route("/users/<user_id>", methods=["PUT"])
@auth_required(ADMIN)
def update_user(user_id):
    principal = get_current_user()
    target = get_scoped_or_404(User, user_id, principal, "User not found")

    user = update_user_use_case(principal=principal, target=target, data=get_json_body())
    return jsonify(normalize_user(user)), 200


@api_bp.route("/users/<user_id>", methods=["DELETE"])
@auth_required(ADMIN)
def delete_user(user_id):
    principal = get_current_user()
    target = get_scoped_or_404(User, user_id, principal, "User not found")

    delete_user_use_case(principal=principal, target=target)
    return jsonify({"message": "User deleted successfully"}), 200
