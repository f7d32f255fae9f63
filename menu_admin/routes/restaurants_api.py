from flask import Blueprint, jsonify

from ..extensions import store
from ..utils.http import json_object, parse_id, persisted

bp = Blueprint("restaurants_api", __name__)


@bp.get("/restaurants")
def list_restaurants():
    return jsonify(store.restaurants.get_all())


@bp.post("/restaurants")
def create_restaurant():
    restaurant = store.restaurants.append(json_object())
    return persisted(store.restaurants, restaurant)


@bp.put("/restaurants/<restaurant_id>")
def update_restaurant(restaurant_id):
    restaurant = store.restaurants.update_by_id(parse_id(restaurant_id), json_object())
    if restaurant is None:
        return jsonify({"error": "Restaurant not found"}), 404
    return persisted(store.restaurants, restaurant)


@bp.delete("/restaurants/<restaurant_id>")
def delete_restaurant(restaurant_id):
    store.restaurants.delete_by_id(parse_id(restaurant_id))
    return persisted(store.restaurants, {"success": True})


# -----------------------------
# Regions (bare names, not linked to restaurants)
# -----------------------------
@bp.get("/restaurants/regions")
def list_regions():
    return jsonify(store.regions.get_all())


@bp.post("/restaurants/regions")
def create_region():
    name = json_object().get("name")
    if not store.regions.add(name):
        # Already present: nothing changed on disk either
        return jsonify({"success": True})
    return persisted(store.regions, {"success": True})


@bp.put("/restaurants/regions/<path:old_name>")
def rename_region(old_name):
    """
    Rename a region in place. The new name is not checked against the
    other regions, so a rename can leave duplicates behind.
    """
    new_name = json_object().get("name")
    if not store.regions.rename(old_name, new_name):
        return jsonify({"error": "Region not found"}), 404
    return persisted(store.regions, {"success": True})


@bp.delete("/restaurants/regions/<path:name>")
def delete_region(name):
    store.regions.remove(name)
    return persisted(store.regions, {"success": True})
