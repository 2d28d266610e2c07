"""Analytics routes."""

from __future__ import annotations

from flask import jsonify

from ...extensions import get_context
from ...services import analytics
from ..common import current_user_id, token_required
from . import bp


@bp.get("/summary")
@token_required
def summary():
    """Dashboard totals across every transaction, vault-targeted or not."""

    rows = get_context().transaction_repo.list_all(user_id=current_user_id())
    return jsonify(analytics.summarize(rows).to_dict())
