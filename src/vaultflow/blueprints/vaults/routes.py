"""Vault routes."""

from __future__ import annotations

from flask import jsonify

from ...extensions import get_context
from ...services import vaults as vault_service
from ..common import current_user_id, json_body, token_required, vault_to_dict
from . import bp
from .forms import VaultForm


@bp.get("")
@token_required
def list_vaults():
    """Return the user's vaults with their running totals, oldest first."""

    rows = get_context().vault_repo.list_all(user_id=current_user_id())
    return jsonify([vault_to_dict(v) for v in rows])


@bp.post("")
@token_required
def create_vault():
    fields = VaultForm.from_mapping(json_body()).validated_fields()
    vault = vault_service.create_vault(
        get_context().vault_repo, user_id=current_user_id(), **fields
    )
    return jsonify(vault_to_dict(vault)), 201


@bp.put("/<int:vault_id>")
@token_required
def update_vault(vault_id: int):
    """Edit settings only; totals keep whatever the ledger has posted."""

    fields = VaultForm.from_mapping(json_body()).validated_fields()
    vault = vault_service.update_vault(
        get_context().vault_repo, vault_id, user_id=current_user_id(), **fields
    )
    return jsonify(vault_to_dict(vault))


@bp.delete("/<int:vault_id>")
@token_required
def delete_vault(vault_id: int):
    vault_service.delete_vault(get_context().vault_repo, vault_id, user_id=current_user_id())
    return jsonify({"message": "Vault deleted successfully"})
