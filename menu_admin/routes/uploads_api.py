from flask import Blueprint, current_app, jsonify, request

from ..extensions import uploads
from ..storage.uploads import UPLOAD_FIELD, UploadRejected

bp = Blueprint("uploads_api", __name__)


@bp.post("/upload")
def upload_image():
    """
    Multipart form-data:
      - image (file) required, image/* MIME type, at most MAX_UPLOAD_BYTES
    Saves to UPLOAD_DIR/image-<timestamp>-<random>.<ext>, served under /uploads/.
    """
    file = request.files.get(UPLOAD_FIELD)
    if not file or not file.filename:
        return jsonify({"error": "No file uploaded"}), 400

    try:
        filename = uploads.save(file)
    except UploadRejected as e:
        return jsonify({"error": e.message}), e.status_code
    except OSError:
        current_app.logger.exception("Failed to store upload %s", file.filename)
        return jsonify({"error": "Failed to store uploaded file"}), 500

    return jsonify({
        "success": True,
        "imageUrl": uploads.public_url(filename),
        "filename": filename,
    })


@bp.delete("/upload/<path:filename>")
def delete_image(filename):
    try:
        deleted = uploads.delete(filename)
    except OSError:
        current_app.logger.exception("Failed to delete upload %s", filename)
        return jsonify({"error": "Failed to delete file"}), 500
    if not deleted:
        return jsonify({"error": "File not found"}), 404
    return jsonify({"success": True, "message": "File deleted"})
