"""Recipe book CLI application using Typer.

This module provides command-line utilities for operating the backend:
serving the API, creating the database schema and repairing identity
changes that were only applied to one of the two stores.
"""

import asyncio
from datetime import timedelta
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from recipebook.infrastructure.persistence.sqlalchemy.database import Databases
from recipebook_auth import PasswordHashingService
from recipebook_auth.persistence.sqlalchemy import CredentialDirectorySQLAlchemy
from recipebook_config.settings import get_settings
from recipebook_identity import ReconciliationReport, ReconciliationService
from recipebook_identity.infrastructure.persistence.sqlalchemy import (
    IntentRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

app = typer.Typer(
    name="recipebook",
    help="Recipe Book - account administration CLI",
    no_args_is_help=True,
)
console = Console()


async def _init_db() -> None:
    databases = Databases.from_settings(get_settings())
    try:
        await databases.create_tables()
    finally:
        await databases.dispose()


async def _reconcile(grace: timedelta) -> ReconciliationReport:
    settings = get_settings()
    databases = Databases.from_settings(settings)
    try:
        await databases.create_tables()
        async with (
            databases.app_sessions() as session,
            databases.directory_sessions() as directory_session,
        ):
            service = ReconciliationService(
                user_repository=UserRepositorySQLAlchemy(session),
                credential_directory=CredentialDirectorySQLAlchemy(
                    directory_session,
                    PasswordHashingService(rounds=settings.password_hash_rounds),
                ),
                intent_repository=IntentRepositorySQLAlchemy(session),
            )
            return await service.sweep(grace)
    finally:
        await databases.dispose()


@app.command("serve")
def serve(
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "recipebook.presentation.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("init-db")
def init_db() -> None:
    """Create all missing database tables (idempotent)."""
    asyncio.run(_init_db())
    console.print("[bold green]Database schema is up to date[/bold green]")


@app.command("reconcile")
def reconcile(
    grace_seconds: Optional[int] = typer.Option(
        None,
        "--grace-seconds",
        help="Ignore pending intents younger than this (default from settings)",
    ),
) -> None:
    """Repair sign-ups and password changes that failed halfway.

    The user records are authoritative: missing credentials are created and
    stale directory passwords are reset to the stored value.
    """
    if grace_seconds is None:
        grace_seconds = get_settings().reconcile_grace_seconds

    report = asyncio.run(_reconcile(timedelta(seconds=grace_seconds)))

    table = Table(title="Identity reconciliation")
    table.add_column("Result")
    table.add_column("Intents", justify="right")
    table.add_row("repaired", str(report.repaired))
    table.add_row("abandoned", str(report.abandoned))
    table.add_row("failed", str(report.failed))
    console.print(table)

    if report.failed:
        console.print(
            "[yellow]Some intents could not be repaired; "
            "check the logs and run again.[/yellow]",
        )
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
