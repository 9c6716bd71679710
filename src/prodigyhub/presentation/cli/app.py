"""ProdigyHub CLI application using Typer.

Operational commands that run the same application commands as the API,
against the configured database:

- ``prodigyhub sync addresses`` / ``sync status`` / ``sync user <id>``
- ``prodigyhub qualify --district ... --province ...``
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar
from uuid import UUID

import typer
from rich.console import Console
from rich.table import Table

from prodigyhub.application.commands import (
    CheckLocationQualificationCommand,
    SyncAddressesCommand,
    SyncAddressToUserCommand,
)
from prodigyhub.application.queries import AddressSyncStatusQuery
from prodigyhub.domain.qualification import Location
from prodigyhub.domain.shared.exceptions import DomainException
from prodigyhub.infrastructure.persistence.sqlalchemy.database import Database
from prodigyhub.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from prodigyhub.infrastructure.providers import (
    AreaInfrastructureProvider,
    RandomInfrastructureProvider,
)
from prodigyhub_config.settings import get_settings

T = TypeVar("T")

app = typer.Typer(
    name="prodigyhub",
    help="ProdigyHub - telecom qualification backend CLI",
    no_args_is_help=True,
)
console = Console()

sync_app = typer.Typer(
    name="sync",
    help="Copy qualification locations onto user addresses",
    no_args_is_help=True,
)
app.add_typer(sync_app)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stdout"),
) -> None:
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def _run(work: Callable[[SQLAlchemyRepositoryFactory], Awaitable[T]]) -> T:
    """Run ``work`` in one committed session against the configured database."""

    async def _main() -> T:
        database = Database(get_settings().database_url)
        await database.connect()
        try:
            async with database.session_maker() as session:
                factory = SQLAlchemyRepositoryFactory(session)
                try:
                    result = await work(factory)
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
                return result
        finally:
            await database.disconnect()

    try:
        return asyncio.run(_main())
    except DomainException as e:
        console.print(f"[red]Error:[/red] {e.message} [dim]({e.code.value})[/dim]")
        raise typer.Exit(code=1) from e


def _stats_table(title: str, rows: list[tuple[str, Any]]) -> Table:
    table = Table(title=title, show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    for label, value in rows:
        table.add_row(label, str(value))
    return table


@sync_app.command("addresses")
def sync_addresses(
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Qualifications to process (default: ADDRESS_SYNC_BATCH_LIMIT)",
    ),
) -> None:
    """Sync addresses from the oldest qualifications with a location."""
    batch_limit = limit or get_settings().address_sync_batch_limit
    result = _run(
        lambda factory: SyncAddressesCommand.from_factory(
            factory,
            batch_limit=batch_limit,
        ).execute(),
    )

    console.print(
        _stats_table(
            "Address sync completed",
            [
                ("Total qualifications", result.total_qualifications),
                ("Synced", result.synced_count),
                ("Errors", result.error_count),
                ("Success rate", result.success_rate),
                ("Heuristic matches", result.heuristic_matches),
            ],
        ),
    )
    if result.heuristic_matches:
        console.print(
            f"[yellow]{result.heuristic_matches} address(es) were assigned "
            "without an email match; review them.[/yellow]",
        )


@sync_app.command("status")
def sync_status() -> None:
    """Show how many users already have an address."""
    status = _run(lambda factory: AddressSyncStatusQuery.from_factory(factory).execute())

    console.print(
        _stats_table(
            "Address sync status",
            [
                ("Total users", status.total_users),
                ("Users with address", status.users_with_address),
                ("Users without address", status.users_without_address),
                ("Qualifications with location", status.qualifications_with_location),
                ("Sync percentage", status.sync_percentage),
            ],
        ),
    )


@sync_app.command("user")
def sync_user(
    user_id: UUID = typer.Argument(..., help="User ID"),
) -> None:
    """Apply the oldest qualification location to one user."""
    user = _run(
        lambda factory: SyncAddressToUserCommand.from_factory(factory).execute(user_id),
    )

    address = user.address
    console.print(f"[green]Address synced to {user.email}[/green]")
    if address is not None:
        console.print(
            f"  {address.street}, {address.city}, {address.district}, "
            f"{address.province} {address.postal_code}".rstrip(),
        )


@app.command("qualify")
def qualify(  # NOQA: PLR0913
    district: str = typer.Option(..., "--district", "-d", help="District"),
    province: str = typer.Option(..., "--province", "-p", help="Province"),
    service: Optional[list[str]] = typer.Option(
        None,
        "--service",
        "-s",
        help='Requested service, e.g. "Fiber 100M" (repeatable)',
    ),
    address: str = typer.Option("", "--address", help="Street address"),
    postal_code: str = typer.Option("", "--postal-code", help="Postal code"),
    alternatives: bool = typer.Option(
        False,
        "--alternatives",
        help="Suggest alternative services",
    ),
) -> None:
    """Check which services are available at a location and store the result."""
    settings = get_settings()
    location = Location(
        address=address,
        district=district,
        province=province,
        postal_code=postal_code,
    )

    async def _check(factory: SQLAlchemyRepositoryFactory) -> Any:
        provider: Any = RandomInfrastructureProvider()
        if settings.infrastructure_provider == "area":
            provider = AreaInfrastructureProvider(factory.area_repository(), provider)
        command = CheckLocationQualificationCommand.from_factory(factory, provider)
        return await command.execute(
            location=location,
            requested_services=service or [],
            include_alternatives=alternatives,
        )

    qualification = _run(_check)

    result = qualification.qualification_result
    color = {"qualified": "green", "conditional": "yellow"}.get(
        result.value if result else "",
        "red",
    )
    console.print(
        f"\n[bold]{district}, {province}[/bold]: "
        f"[{color}]{result.value if result else 'unknown'}[/{color}] "
        f"[dim]({qualification.id})[/dim]",
    )

    infra = qualification.infrastructure
    if infra is not None:
        table = Table(title="Infrastructure")
        table.add_column("Service", style="cyan")
        table.add_column("Available")
        table.add_column("Technology")
        table.add_column("Speed / coverage")
        table.add_row(
            "Fiber",
            "yes" if infra.fiber.available else "no",
            infra.fiber.technology,
            infra.fiber.max_speed,
        )
        table.add_row(
            "ADSL",
            "yes" if infra.adsl.available else "no",
            infra.adsl.technology,
            infra.adsl.max_speed,
        )
        table.add_row(
            "Mobile",
            "yes" if infra.mobile.available else "no",
            ", ".join(infra.mobile.technologies),
            infra.mobile.coverage,
        )
        console.print(table)

    if qualification.estimated_installation_time:
        console.print(f"Installation: {qualification.estimated_installation_time}")
    for option in qualification.alternative_options:
        console.print(
            f"  [dim]alternative:[/dim] {option.service} "
            f"({option.technology}, {option.speed}, LKR {option.monthly_fee}/month)",
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
