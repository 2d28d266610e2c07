"""Flask wiring for the application context."""

from __future__ import annotations

from flask import Flask, current_app

from .context import AppContext, create_app_context

_EXTENSION_KEY = "vaultflow"


def init_db(app: Flask) -> AppContext:
    """Build the application context from the app's config and attach it."""

    ctx = create_app_context(app.config["VAULTFLOW_CONFIG"])
    app.extensions[_EXTENSION_KEY] = ctx
    return ctx


def get_context() -> AppContext:
    """Return the context bound to the active Flask app."""

    try:
        return current_app.extensions[_EXTENSION_KEY]
    except KeyError:  # pragma: no cover - only hit when init_db was skipped
        raise RuntimeError("Database engine not initialized") from None
