from flask import Blueprint, jsonify

from ..extensions import store
from ..utils.http import json_object, parse_id, persisted

bp = Blueprint("reviews_api", __name__)


@bp.get("/reviews")
def list_reviews():
    return jsonify(store.reviews.get_all())


@bp.post("/reviews")
def create_review():
    review = store.reviews.append(json_object())
    return persisted(store.reviews, review)


@bp.delete("/reviews/<review_id>")
def delete_review(review_id):
    store.reviews.delete_by_id(parse_id(review_id))
    return persisted(store.reviews, {"success": True})
