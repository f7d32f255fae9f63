from flask import Blueprint, jsonify, request

from ..extensions import store
from ..utils.http import persisted

bp = Blueprint("menu_api", __name__)


@bp.get("/menu")
def get_menu():
    return jsonify(store.menu.get_all())


@bp.put("/menu")
def replace_menu():
    # Whole-value replace, no merge with the previous menu
    body = request.get_json(silent=True)
    store.menu.replace(body if body is not None else {})
    return persisted(store.menu, {"success": True})
