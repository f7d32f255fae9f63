from pathlib import Path

from flask import Blueprint, current_app, send_from_directory

from ..extensions import uploads

bp = Blueprint("pages", __name__)

PLACEHOLDER_PAGE = """<!doctype html>
<html>
  <head><meta charset="utf-8"><title>Menu Admin</title></head>
  <body>
    <h1>Menu Admin API</h1>
    <p>The frontend bundle has not been built yet. The JSON API is available under <code>/api</code>.</p>
  </body>
</html>
"""


@bp.get("/uploads/<filename>")
def serve_upload(filename):
    return send_from_directory(uploads.upload_dir, filename)


@bp.get("/", defaults={"path": ""})
@bp.get("/<path:path>")
def frontend(path):
    """
    Serves the built frontend from FRONTEND_DIR. Unknown paths fall back to
    index.html so client-side routes work; without a build, a placeholder page.
    """
    dist = Path(current_app.config["FRONTEND_DIR"])
    if path and (dist / path).is_file():
        return send_from_directory(dist, path)
    if (dist / "index.html").is_file():
        return send_from_directory(dist, "index.html")
    return PLACEHOLDER_PAGE, 200, {"Content-Type": "text/html; charset=utf-8"}
