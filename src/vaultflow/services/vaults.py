"""Vault management helpers."""

from __future__ import annotations

from typing import Optional

from ..constants import DEFAULT_VAULTS
from ..domain.repositories import VaultRepository
from ..errors import NotFoundError
from ..logging_config import get_logger
from ..models.vault import Vault

logger = get_logger(__name__)


def seed_default_vaults(repo: VaultRepository, *, user_id: int) -> list[Vault]:
    """Create the starter vault layout for a freshly registered user."""

    created = [
        repo.create(Vault(user_id=user_id, **template), user_id=user_id)
        for template in DEFAULT_VAULTS
    ]
    logger.info("Seeded %d default vaults", len(created), extra={"user_id": user_id})
    return created


def create_vault(
    repo: VaultRepository,
    *,
    user_id: int,
    name: str,
    percentage: float,
    description: Optional[str] = None,
) -> Vault:
    """Create an empty vault; its totals start at zero."""

    return repo.create(
        Vault(user_id=user_id, name=name, percentage=percentage, description=description),
        user_id=user_id,
    )


def update_vault(
    repo: VaultRepository,
    vault_id: int,
    *,
    user_id: int,
    name: str,
    percentage: float,
    description: Optional[str] = None,
) -> Vault:
    """Change a vault's settings.

    A new percentage only affects income applied (or reversed) from now on.
    """

    vault = repo.update_settings(
        vault_id,
        user_id=user_id,
        name=name,
        percentage=percentage,
        description=description,
    )
    if vault is None:
        raise NotFoundError("Vault not found")
    return vault


def delete_vault(repo: VaultRepository, vault_id: int, *, user_id: int) -> None:
    """Delete a vault without touching transactions or goals that reference it."""

    if not repo.delete(vault_id, user_id=user_id):
        raise NotFoundError("Vault not found")
    logger.info("Vault deleted", extra={"user_id": user_id, "vault_id": vault_id})
