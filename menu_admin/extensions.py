# menu_admin/extensions.py
from flask import current_app
from flask_cors import CORS
from werkzeug.local import LocalProxy

from .storage.json_store import JsonStore
from .storage.uploads import UploadManager

# CORS is a real Flask extension (keeps init_app)
cors = CORS()


def init_storage(app):
    """Build the per-app collection store and upload manager."""
    app.extensions["json_store"] = JsonStore(app.config["DATA_DIR"])
    app.extensions["uploads"] = UploadManager(app.config["UPLOAD_DIR"], app.config["MAX_UPLOAD_BYTES"])


# Handles for request code; each resolves against the current app
store: JsonStore = LocalProxy(lambda: current_app.extensions["json_store"])
uploads: UploadManager = LocalProxy(lambda: current_app.extensions["uploads"])
