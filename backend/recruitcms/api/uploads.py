from flask import jsonify, request
from flask_jwt_extended import get_current_user
from werkzeug.exceptions import BadRequest, NotFound
from recruitcms.application.uploads.store_upload import delete_upload, gallery, store_upload
from recruitcms.models.upload import Upload
from recruitcms.normalizers.upload import normalize_upload
from recruitcms.utils.decorators import auth_required
from recruitcms.utils.tenancy import scope_query
from . import api_bp


@api_bp.route("/upload", methods=["POST"])
@auth_required()
def upload_file():
    file = request.files.get("file")
    if file is None or not file.filename:
        raise BadRequest("No file uploaded")

    upload = store_upload(
        principal=get_current_user(),
        file=file,
        tenant_id=request.form.get("tenant_id"),
    )

    return jsonify(normalize_upload(upload)), 200


@api_bp.route("/gallery", methods=["GET"])
@auth_required()
def list_gallery():
    uploads = gallery(get_current_user())
    return jsonify({"files": [normalize_upload(upload) for upload in uploads]}), 200


@api_bp.route("/gallery/<filename>", methods=["DELETE"])
@auth_required()
def delete_gallery_file(filename):
    principal = get_current_user()

    upload = (
        scope_query(Upload.query, Upload, principal)
        .filter(Upload.filename == filename)
        .first()
    )
    if upload is None:
        raise NotFound("File not found")

    delete_upload(principal=principal, upload=upload)
    return jsonify({"message": "File deleted successfully"}), 200
