from flask import Blueprint, current_app, jsonify

from ..extensions import store

bp = Blueprint("admin_api", __name__)


@bp.post("/init")
def init_data():
    # Collections are loaded (or seeded) when the app starts; nothing left to do here.
    return jsonify({"success": True, "message": "Data initialized"})


@bp.post("/reset")
def reset_data():
    """Clear orders, reviews, restaurants and carts. Menu and regions survive a reset."""
    if not store.reset():
        current_app.logger.error("Reset finished with at least one collection unsaved")
        return jsonify({"success": False, "error": "Failed to reset data"}), 500
    return jsonify({"success": True, "message": "Data reset"})
