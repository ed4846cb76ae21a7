#!/usr/bin/env python3
"""
Main CLI entry point for the Phonebook server.
"""

import os
import sys
from pathlib import Path

import click
import uvicorn

from phonebook import __version__
from phonebook.config import settings
from phonebook.logging import configure_logging, get_logger

logger = get_logger(__name__)

PHONE_FILTER_CHOICES = {
    "any": "ANY",
    "has": "HAS_PHONE",
    "none": "NO_PHONE",
}


@click.group()
@click.version_option(version=__version__, prog_name="phonebook")
def cli() -> None:
    """Phonebook CLI - run the GraphQL server and inspect the directory."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Phonebook GraphQL server."""
    configure_logging(debug=(log_level == "debug"))

    # The app module reads settings at import time
    if log_level == "debug":
        os.environ["PHONEBOOK_DEBUG"] = "true"
        os.environ["PHONEBOOK_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("PHONEBOOK_DEBUG", "false")
        os.environ.setdefault("PHONEBOOK_LOG_LEVEL", log_level)

    display_host = "localhost" if host == "0.0.0.0" else host
    logger.info("Server ready", url=f"http://{display_host}:{port}/graphql")

    try:
        if reload:
            uvicorn.run(
                "phonebook.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from phonebook.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def schema(output: Path | None) -> None:
    """Print the GraphQL schema in SDL."""
    from phonebook.graphql.schema import export_schema

    sdl = export_schema()
    if output is None:
        click.echo(sdl)
        return

    output.write_text(sdl + "\n", encoding="utf-8")
    click.echo(f"✓ Schema written to {output}")


@cli.command()
@click.option(
    "--phone",
    "phone",
    default="any",
    type=click.Choice(list(PHONE_FILTER_CHOICES)),
    help="Only contacts with a phone (has), without one (none), or all (any)",
)
def contacts(phone: str) -> None:
    """List the sample contacts the server starts with."""
    from phonebook.seed import create_seeded_store
    from phonebook.store import PhoneFilter

    store = create_seeded_store(seed=True)
    records = store.list_contacts(PhoneFilter[PHONE_FILTER_CHOICES[phone]])

    if not records:
        click.echo("No contacts found.")
        return

    for record in records:
        click.echo(f"{record.name}")
        click.echo(f"  Phone: {record.phone or '-'}")
        click.echo(f"  Address: {record.street}, {record.city}")
        click.echo(f"  ID: {record.id}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
