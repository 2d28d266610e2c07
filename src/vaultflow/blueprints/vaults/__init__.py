"""Vaults blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("vaults", __name__, url_prefix="/api/vaults")

from . import routes  # noqa: E402,F401 - ensure routes get registered

__all__ = ["bp"]
