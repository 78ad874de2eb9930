from recruitcms.utils.dates import isoformat


def normalize_upload(upload):
    return {
        "id": upload.id,
        "name": upload.filename,
        "filename": upload.filename,
        "original_name": upload.original_name,
        "url": upload.url,
        "size": upload.file_size,
        "type": upload.mime_type,
        "user_id": upload.user_id,
        "created_at": isoformat(upload.created_at),
    }
