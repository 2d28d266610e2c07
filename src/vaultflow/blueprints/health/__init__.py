"""Health check blueprint."""

from __future__ import annotations

from flask import Blueprint, jsonify

bp = Blueprint("health", __name__)


@bp.get("/health")
def health():
    return jsonify({"status": "ok", "message": "VaultFlow API is running"})


__all__ = ["bp"]
