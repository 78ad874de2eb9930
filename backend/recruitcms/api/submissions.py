from flask import jsonify, request
from flask_jwt_extended import get_current_user
from recruitcms.application.submissions.queries import load_submission, visible_submissions
from recruitcms.application.submissions.submit_form import submit_form
from recruitcms.extensions import db
from recruitcms.normalizers.submission import normalize_submission
from recruitcms.utils.decorators import auth_required
from recruitcms.utils.transaction import transactional
from recruitcms.utils.validation import get_json_body
from . import api_bp


def client_ip():
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr


@api_bp.route("/submit", methods=["POST"])
def submit():
    submission = submit_form(
        data=get_json_body(),
        ip_address=client_ip(),
        user_agent=request.headers.get("User-Agent"),
    )

    return jsonify({
        "message": "Form submitted successfully",
        "submission_id": submission.id,
    }), 201


@api_bp.route("/submissions", methods=["GET"])
@auth_required()
def list_submissions():
    submissions = visible_submissions(
        get_current_user(),
        page_id=request.args.get("page_id"),
    ).all()

    return jsonify([normalize_submission(s) for s in submissions]), 200


@api_bp.route("/submissions/<submission_id>", methods=["GET"])
@auth_required()
def get_submission(submission_id):
    submission = load_submission(get_current_user(), submission_id)
    return jsonify(normalize_submission(submission)), 200


@api_bp.route("/submissions/<submission_id>", methods=["DELETE"])
@auth_required()
def delete_submission(submission_id):
    submission = load_submission(get_current_user(), submission_id)

    with transactional():
        db.session.delete(submission)

    return jsonify({"message": "Submission deleted successfully"}), 200
