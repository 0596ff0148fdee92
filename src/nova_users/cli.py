"""Command-line interface for Nova Users.

This module provides the CLI commands for running the Roles administration
and managing its database.
"""

import sys
from pathlib import Path
from typing import NoReturn

import click

from nova_users.core.config import get_settings
from nova_users.core.logging import configure_logging, get_logger

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@click.group()
@click.version_option(version="3.0.0", prog_name="Nova Users")
def cli() -> None:
    """Nova Users - Roles administration for the Users module."""
    # Settings are loaded from NOVA_* environment variables


@cli.command()
@click.option(
    "--host",
    type=str,
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool) -> None:
    """Start the Nova Users server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    if bind_workers > 1 and settings.database_url.startswith("sqlite"):
        click.echo(
            "ERROR: SQLite does not support multiple worker processes. "
            "Use --workers 1 or switch to PostgreSQL.",
            err=True,
        )
        raise SystemExit(1)

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting Nova Users server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "nova_users.infrastructure.web.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
@click.option(
    "--force",
    is_flag=True,
    help="Skip confirmation prompt",
)
def init_db(force: bool) -> None:
    """Create all database tables.

    Use this only in development. In production, run `migrate` instead.
    """
    import asyncio

    from nova_users.infrastructure.persistence import models  # noqa: F401
    from nova_users.infrastructure.persistence.database import get_db_manager

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use migrations instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    async def initialize():
        db = get_db_manager()
        try:
            await db.create_tables()
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    asyncio.run(initialize())


@cli.command()
@click.option(
    "--revision",
    type=str,
    default="head",
    show_default=True,
    help="Target revision",
)
@click.option(
    "--alembic-ini",
    type=click.Path(dir_okay=False),
    default=str(PROJECT_ROOT / "alembic.ini"),
    show_default=True,
    help="Path to the alembic.ini file",
)
def migrate(revision: str, alembic_ini: str) -> None:
    """Upgrade the database schema with Alembic."""
    from alembic import command
    from alembic.config import Config

    settings = get_settings()
    configure_logging(settings)
    logger = get_logger(__name__)

    config = Config(alembic_ini)
    script_location = config.get_main_option("script_location")
    if script_location and not Path(script_location).is_absolute():
        config.set_main_option(
            "script_location", str(Path(alembic_ini).resolve().parent / script_location)
        )
    config.set_main_option("sqlalchemy.url", settings.database_url)

    command.upgrade(config, revision)
    logger.info("Database migrated", revision=revision)
    click.echo(f"Database upgraded to {revision}.")


@cli.command()
@click.option("--name", type=str, default=None, help="Role name (prompts if not provided)")
@click.option("--slug", type=str, default=None, help="Role slug (prompts if not provided)")
@click.option(
    "--description",
    type=str,
    default=None,
    help="Role description (prompts if not provided)",
)
def create_role(name: str | None, slug: str | None, description: str | None) -> None:
    """Create a Role, validated like the Create Role form."""
    import asyncio

    from nova_users.domain.exceptions import DuplicateSlugError
    from nova_users.domain.services import RoleValidator
    from nova_users.infrastructure.persistence.database import get_db_manager
    from nova_users.infrastructure.persistence.repositories import RoleRepository

    settings = get_settings()
    configure_logging(settings)
    logger = get_logger(__name__)

    if name is None:
        name = click.prompt("Name", type=str)
    if slug is None:
        slug = click.prompt("Slug", type=str)
    if description is None:
        description = click.prompt("Description", type=str)

    data = RoleValidator.only({"name": name, "slug": slug, "description": description})

    async def create() -> None:
        db = get_db_manager()
        try:
            async with db.session() as session:
                repository = RoleRepository(session)
                validation = await RoleValidator(repository).validate(data)
                if validation.fails():
                    for message in validation.all():
                        click.echo(f"Error: {message}", err=True)
                    raise SystemExit(1)

                try:
                    role = await repository.create(data)
                except DuplicateSlugError as e:
                    existing = await repository.get_by_slug(e.slug)
                    if existing is not None:
                        click.echo(f"Error: {e} (#{existing.id} {existing.name})", err=True)
                    else:
                        click.echo(f"Error: {e}", err=True)
                    raise SystemExit(1)

            click.echo(f"Role created: #{role.id} {role.name} ({role.slug})")
            logger.info("Role created via CLI", role_id=role.id, slug=role.slug)
        finally:
            await db.disconnect()

    asyncio.run(create())


@cli.command()
@click.option("--page", type=int, default=1, show_default=True, help="Page to list")
def list_roles(page: int) -> None:
    """List the Roles with their number of users."""
    import asyncio

    from nova_users.infrastructure.persistence.database import get_db_manager
    from nova_users.infrastructure.persistence.repositories import RoleRepository

    settings = get_settings()
    configure_logging(settings)

    async def list_page() -> None:
        db = get_db_manager()
        try:
            async with db.session() as session:
                roles = await RoleRepository(session).list_paged(settings.roles_per_page, page)

            if not roles.total:
                click.echo("No Roles registered.")
                return

            click.echo(f"{'ID':>5}  {'Name':<40}  {'Slug':<40}  Users")
            for role in roles:
                click.echo(f"{role.id:>5}  {role.name:<40}  {role.slug:<40}  {len(role.users)}")
            click.echo(f"\nPage {roles.current_page} of {roles.last_page} ({roles.total} Roles)")
        finally:
            await db.disconnect()

    asyncio.run(list_page())


@cli.command()
def info() -> None:
    """Display Nova Users configuration."""
    from sqlalchemy.engine import make_url

    settings = get_settings()
    database_url = make_url(settings.database_url).render_as_string(hide_password=True)

    click.echo(f"""
Nova Users v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  Locale:       {settings.app_locale}
  Languages:    {', '.join(settings.languages)}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Database:
  URL:          {database_url}
  Table Prefix: {settings.table_prefix}
  Pool Size:    {settings.db_pool_size}
  Echo:         {settings.db_echo}

Assets:
  Driver:       {settings.assets_driver}
  Cache Time:   {settings.assets_cache_time}s

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `nova-users` command is run
    or when using `python -m nova_users`.
    """
    cli()


if __name__ == "__main__":
    sys.exit(main())
