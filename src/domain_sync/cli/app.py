"""Typer CLI wiring domain-sync services."""

from __future__ import annotations

import asyncio
import logging
import sys

import typer
from rich.console import Console
from rich.table import Table

from domain_sync.config import AppSettings
from domain_sync.domain import EnrichedRegistration, Registration
from domain_sync.registry import CredentialError, DomainSyncError

from .deps import get_container

app = typer.Typer(help="Export Cloud Domains registrations as configuration blocks")

_MISSING_PROJECT = "Please set the PROJECT_ID environment variable"
_CREDENTIALS_HINT = (
    "GCP Credentials Invalid. Either run `gcloud auth application-default login` "
    "or set the GOOGLE_APPLICATION_CREDENTIALS env var"
)


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level for diagnostics written to stderr",
    ),
) -> None:
    """Configure logging before any command runs."""

    level = (log_level or get_container().settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _resolve_settings(project_id: str | None, location: str | None) -> AppSettings:
    settings = get_container().settings.with_overrides(project_id=project_id, location=location)
    if not settings.project_id:
        typer.echo(_MISSING_PROJECT, err=True)
        raise typer.Exit(code=1)
    return settings


def _fail(exc: DomainSyncError, action: str) -> typer.Exit:
    if isinstance(exc, CredentialError):
        typer.echo(_CREDENTIALS_HINT, err=True)
    typer.echo(f"{action} failed: {exc}", err=True)
    return typer.Exit(code=1)


@app.command("export")
def export(
    project_id: str | None = typer.Option(None, "--project-id", help="Override PROJECT_ID"),
    location: str | None = typer.Option(None, "--location", help="Registry location"),
) -> None:
    """Unlock every active domain and print its configuration block."""

    container = get_container()
    settings = _resolve_settings(project_id, location)

    async def _run() -> list[EnrichedRegistration]:
        async with container.registry_client(settings) as client:
            return await container.enrichment_pipeline(client).run()

    try:
        enriched = asyncio.run(_run())
    except DomainSyncError as exc:
        raise _fail(exc, "Export") from exc

    for block in container.renderer.render_all(enriched):
        typer.echo(block)


@app.command("list-registrations")
def list_registrations(
    project_id: str | None = typer.Option(None, "--project-id", help="Override PROJECT_ID"),
    location: str | None = typer.Option(None, "--location", help="Registry location"),
) -> None:
    """List registrations without unlocking anything."""

    container = get_container()
    settings = _resolve_settings(project_id, location)

    async def _run() -> list[Registration]:
        async with container.registry_client(settings) as client:
            return await client.list_registrations()

    try:
        registrations = asyncio.run(_run())
    except DomainSyncError as exc:
        raise _fail(exc, "Listing") from exc

    if not registrations:
        typer.echo("No registrations found")
        return

    table = Table(title=f"Registrations in {settings.project_id}")
    table.add_column("Domain")
    table.add_column("State")
    table.add_column("DNS")
    table.add_column("Forwarding")
    for registration in registrations:
        dns_settings = registration.dns_settings
        has_dns = dns_settings is not None and dns_settings.google_domains_dns is not None
        has_forwards = (
            dns_settings is not None and dns_settings.google_domains_redirects_data_available
        )
        table.add_row(
            registration.domain_name,
            registration.state,
            "yes" if has_dns else "no",
            "yes" if has_forwards else "no",
        )
    Console().print(table)


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    typer.echo("Project:\t" + (settings.project_id or "(unset)"))
    typer.echo("Location:\t" + settings.location)
    typer.echo("API base:\t" + settings.api_base)
    typer.echo(f"Timeout:\t{settings.request_timeout}")
    typer.echo(f"Concurrency:\t{settings.max_concurrency}")
