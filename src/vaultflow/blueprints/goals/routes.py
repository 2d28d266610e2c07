"""Goal routes."""

from __future__ import annotations

from flask import jsonify

from ...extensions import get_context
from ...services import goals as goal_service
from ..common import current_user_id, json_body, token_required
from . import bp
from .forms import GoalForm


@bp.get("")
@token_required
def list_goals():
    """Return goals, newest first, with vault-linked amounts replaced by live balances."""

    ctx = get_context()
    views = goal_service.list_goals(ctx.goal_repo, ctx.vault_repo, user_id=current_user_id())
    return jsonify([view.to_dict() for view in views])


@bp.post("")
@token_required
def create_goal():
    ctx = get_context()
    fields = GoalForm.from_mapping(json_body()).validated_fields()
    goal = goal_service.create_goal(ctx.goal_repo, fields, user_id=current_user_id())
    # Stored values: the live override only applies on list.
    return jsonify(goal_service.project_goal(goal, {}).to_dict()), 201


@bp.put("/<int:goal_id>")
@token_required
def update_goal(goal_id: int):
    ctx = get_context()
    fields = GoalForm.from_mapping(json_body()).validated_fields()
    goal = goal_service.update_goal(ctx.goal_repo, goal_id, fields, user_id=current_user_id())
    return jsonify(goal_service.project_goal(goal, {}).to_dict())


@bp.delete("/<int:goal_id>")
@token_required
def delete_goal(goal_id: int):
    goal_service.delete_goal(get_context().goal_repo, goal_id, user_id=current_user_id())
    return jsonify({"message": "Goal deleted successfully"})
