"""Transaction routes; every mutation goes through the allocation engine."""

from __future__ import annotations

from flask import jsonify

from ...errors import NotFoundError
from ...extensions import get_context
from ..common import current_user_id, json_body, token_required, transaction_to_dict
from . import bp
from .forms import TransactionForm


@bp.get("")
@token_required
def list_transactions():
    """Return the user's transactions, newest first."""

    rows = get_context().transaction_repo.list_all(user_id=current_user_id())
    return jsonify([transaction_to_dict(t) for t in rows])


@bp.get("/<int:transaction_id>")
@token_required
def get_transaction(transaction_id: int):
    transaction = get_context().transaction_repo.get_by_id(
        transaction_id, user_id=current_user_id()
    )
    if transaction is None:
        raise NotFoundError("Transaction not found")
    return jsonify(transaction_to_dict(transaction))


@bp.post("")
@token_required
def create_transaction():
    """Persist a transaction and credit/debit vaults."""

    fields = TransactionForm.from_mapping(json_body()).validated_fields()
    created = get_context().allocation.create(fields, user_id=current_user_id())
    return jsonify(transaction_to_dict(created)), 201


@bp.put("/<int:transaction_id>")
@token_required
def update_transaction(transaction_id: int):
    """Replace a transaction, moving its vault effect to the new state."""

    fields = TransactionForm.from_mapping(json_body()).validated_fields()
    updated = get_context().allocation.update(transaction_id, fields, user_id=current_user_id())
    return jsonify(transaction_to_dict(updated))


@bp.delete("/<int:transaction_id>")
@token_required
def delete_transaction(transaction_id: int):
    get_context().allocation.delete(transaction_id, user_id=current_user_id())
    return jsonify({"message": "Transaction deleted successfully"})
