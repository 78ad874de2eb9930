import logging
from flask import url_for
from werkzeug.exceptions import BadRequest, Forbidden
from recruitcms.extensions import db
from recruitcms.auth.roles import ADMIN, has_role
from recruitcms.models.upload import Upload
from recruitcms.utils.media import UploadRejected, delete_file, file_exists, save_file
from recruitcms.utils.tenancy import resolve_tenant_id, scope_query
from recruitcms.utils.transaction import transactional

logger = logging.getLogger(__name__)


def store_upload(*, principal, file, tenant_id=None) -> Upload:
    target_tenant = resolve_tenant_id(principal, tenant_id)

    try:
        filename, size, mime_type = save_file(file)
    except UploadRejected as exc:
        raise BadRequest(str(exc)) from exc

    upload = Upload()
    upload.tenant_id = target_tenant
    upload.user_id = principal.id
    upload.filename = filename
    upload.original_name = file.filename
    upload.file_size = size
    upload.mime_type = mime_type
    upload.url = url_for("serve_upload", filename=filename)

    with transactional():
        db.session.add(upload)

    logger.info("Stored upload %s (%d bytes) for tenant %s", filename, size, target_tenant)
    return upload


def gallery(principal):
    """
    The tenant's uploads, newest first. Rows whose file is gone from disk
    are dropped on the way.
    """
    uploads = (
        scope_query(Upload.query, Upload, principal)
        .order_by(Upload.created_at.desc())
        .all()
    )

    present, missing = [], []
    for upload in uploads:
        (present if file_exists(upload.filename) else missing).append(upload)

    if missing:
        with transactional():
            for upload in missing:
                db.session.delete(upload)
        logger.info("Pruned %d upload record(s) without a file", len(missing))

    return present


def delete_upload(*, principal, upload: Upload) -> None:
    if not has_role(principal.role, ADMIN) and upload.user_id != principal.id:
        raise Forbidden("Forbidden")

    delete_file(upload.filename)
    with transactional():
        db.session.delete(upload)
