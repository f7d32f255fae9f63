import re

from flask import jsonify, request

from ..storage.json_store import JsonCollection

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_id(raw):
    """
    Integer id from a URL segment, read like JavaScript's parseInt: optional
    leading whitespace and sign, then the leading ASCII digits ("42abc" -> 42).
    None when there are no leading digits, which matches no record.
    """
    m = _LEADING_INT.match(str(raw))
    return int(m.group(1)) if m else None


def json_object() -> dict:
    """Request body as a flat object; arrays spread into index keys, anything else is empty."""
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        return body
    if isinstance(body, list):
        return {str(i): v for i, v in enumerate(body)}
    return {}


def persisted(collection: JsonCollection, body, status: int = 200):
    """Persist ``collection`` and answer with ``body``, or a 500 if the write failed."""
    if not collection.persist():
        return jsonify({"error": f"Failed to save {collection.name}"}), 500
    return jsonify(body), status
