import os
import uuid
from flask import current_app
from werkzeug.utils import secure_filename

ALLOWED_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "webp"}

# Leading bytes of the accepted image formats
IMAGE_SIGNATURES = (
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
)


class UploadRejected(ValueError):
    pass


def allowed_file(filename):
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_EXTENSIONS


def sniff_mime_type(head: bytes):
    for signature, mime_type in IMAGE_SIGNATURES:
        if head.startswith(signature):
            return mime_type
    if head[:4] == b"RIFF" and head[8:12] == b"WEBP":
        return "image/webp"
    return None


def file_size(file):
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def upload_folder():
    folder = os.path.abspath(current_app.config.get("UPLOAD_FOLDER", "uploads"))
    os.makedirs(folder, exist_ok=True)
    return folder


def save_file(file):
    """
    Validate and store an uploaded image.

    The MIME type is taken from the file's leading bytes, not from the
    client's Content-Type. Returns (stored_filename, size, mime_type).
    """
    if not file or not file.filename:
        raise UploadRejected("No file uploaded")

    size = file_size(file)
    if size > current_app.config["MAX_UPLOAD_SIZE"]:
        max_mb = current_app.config["MAX_UPLOAD_SIZE"] // (1024 * 1024)
        raise UploadRejected(f"File too large. Maximum size is {max_mb}MB")

    mime_type = sniff_mime_type(file.stream.read(16))
    file.stream.seek(0)

    if (
        mime_type not in current_app.config["ALLOWED_UPLOAD_MIME_TYPES"]
        or not allowed_file(file.filename)
    ):
        raise UploadRejected("Invalid file type. Only images are allowed")

    filename = secure_filename(file.filename)
    ext = filename.rsplit(".", 1)[1].lower() if "." in filename else "bin"
    unique_filename = f"{uuid.uuid4().hex}.{ext}"

    file.save(os.path.join(upload_folder(), unique_filename))

    return unique_filename, size, mime_type


def file_path(filename):
    return os.path.join(upload_folder(), secure_filename(filename))


def file_exists(filename):
    return os.path.exists(file_path(filename))


def delete_file(filename):
    """
    Deletes a stored upload. Returns False when nothing was removed.
    """
    if not filename:
        return False

    path = file_path(filename)
    if not os.path.exists(path):
        return False

    try:
        os.remove(path)
        return True
    except OSError as e:
        current_app.logger.error(f"Failed to delete file {path}: {e}")
        return False
