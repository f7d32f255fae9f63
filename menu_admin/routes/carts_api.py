from flask import Blueprint, jsonify, request

from ..extensions import store
from ..utils.http import persisted

bp = Blueprint("carts_api", __name__)


@bp.get("/cart/<user_id>")
def get_cart(user_id):
    return jsonify(store.carts.get(user_id))


@bp.put("/cart/<user_id>")
def put_cart(user_id):
    """Overwrite the user's whole cart with the request body (any JSON value)."""
    body = request.get_json(silent=True)
    store.carts.put(user_id, body if body is not None else {})
    return persisted(store.carts, {"success": True})
