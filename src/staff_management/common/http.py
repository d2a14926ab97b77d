from __future__ import annotations

from flask import jsonify, request

from ..core.exceptions import DomainError, NotFound, ReferenceInUse, ReferenceNotFound, StorageError, ValidationError


def json_error(exc: DomainError):
    """Map a domain error to a JSON error response. Storage details never leak."""
    if isinstance(exc, StorageError):
        return jsonify({"success": False, "message": "Internal error"}), 500
    if isinstance(exc, NotFound):
        return jsonify({"success": False, "message": str(exc)}), 404
    if isinstance(exc, ReferenceNotFound):
        return jsonify({"success": False, "message": str(exc)}), 422
    if isinstance(exc, ReferenceInUse):
        return jsonify({"success": False, "message": str(exc)}), 409
    return jsonify({"success": False, "message": str(exc)}), 400


def json_body() -> dict:
    """Request JSON as a dict; missing body gives {}, any other JSON shape is rejected."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
