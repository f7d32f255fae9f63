from flask import Blueprint, jsonify

from ..extensions import store
from ..utils.http import json_object, parse_id, persisted

bp = Blueprint("orders_api", __name__)


@bp.get("/orders")
def list_orders():
    return jsonify(store.orders.get_all())


@bp.post("/orders")
def create_order():
    order = store.orders.append(json_object())
    return persisted(store.orders, order)


@bp.put("/orders/<order_id>")
def update_order(order_id):
    order = store.orders.update_by_id(parse_id(order_id), json_object())
    if order is None:
        return jsonify({"error": "Order not found"}), 404
    return persisted(store.orders, order)
