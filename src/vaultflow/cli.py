"""Flask CLI commands for VaultFlow."""

from __future__ import annotations

import click


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("vaultflow-init-db")
    def vaultflow_init_db() -> None:
        """Create any missing tables."""

        from .extensions import get_context
        from .infra.database import init_database

        init_database(get_context().db_engine)
        click.echo("Database schema is up to date.")

    @app.cli.command("vaultflow-create-user")
    @click.option("--username", prompt=True, help="Login name for the new user")
    @click.option(
        "--password",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password (at least 6 characters)",
    )
    def vaultflow_create_user(username: str, password: str) -> None:
        """Register a user and seed the default vaults."""

        from .errors import ValidationError
        from .extensions import get_context
        from .services import auth

        ctx = get_context()
        try:
            user = auth.register_user(
                username=username,
                password=password,
                session_factory=ctx.session_factory,
                vault_repo=ctx.vault_repo,
            )
        except ValidationError as exc:
            raise click.ClickException(str(exc)) from exc
        vault_count = len(ctx.vault_repo.list_all(user_id=user.id))  # type: ignore[arg-type]
        click.echo(f"Created user {user.username} (id {user.id}) with {vault_count} vaults.")
