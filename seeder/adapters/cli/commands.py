"""
Commandes CLI du seeder : seed (live ou dry-run) et info.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger

from seeder.adapters.catalog.loader import CatalogFileError, load_catalog
from seeder.adapters.cli.helpers import console, load_settings, with_container
from seeder.adapters.cli.render import DRY_RUN_FOOTER, print_payload
from seeder.config import ConfigurationError
from seeder.core.entities.media import RecordCollection
from seeder.core.ports.catalog_store import CatalogStoreError, UpsertResult
from seeder.services.seeder import SeederService


def seed(
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Imprimer les payloads sans les envoyer"),
    ] = False,
    data: Annotated[
        Optional[Path],
        typer.Option(
            "--data", "-d",
            help="Fichier JSON du catalogue (defaut : fixture embarquee)",
        ),
    ] = None,
    table: Annotated[
        Optional[list[str]],
        typer.Option(
            "--table", "-t",
            help="Limiter le seed a cette table (repetable)",
        ),
    ] = None,
) -> None:
    """Upsert des collections du catalogue (movies, series) dans Supabase."""
    _seed(dry_run=dry_run, data=data, tables=table)


def _select_tables(
    collections: list[RecordCollection], tables: Optional[list[str]]
) -> list[RecordCollection]:
    """Filtre les collections, dans l'ordre du fichier."""
    if not tables:
        return collections
    known = {c.table for c in collections}
    unknown = [t for t in tables if t not in known]
    if unknown:
        raise typer.BadParameter(
            f"table(s) inconnue(s): {', '.join(unknown)} (disponibles: {', '.join(sorted(known))})",
            param_hint="--table",
        )
    return [c for c in collections if c.table in tables]


@with_container
def _seed(
    container, dry_run: bool, data: Optional[Path], tables: Optional[list[str]]
) -> None:
    """Implementation de la commande seed."""
    settings = load_settings(container.config)

    # La configuration est resolue avant tout : aucun client HTTP sans cible
    try:
        container.store_target()
    except ConfigurationError as e:
        logger.error(f"Erreur: {e}")
        raise typer.Exit(code=1)

    try:
        collections = load_catalog(data or settings.catalog_file)
    except CatalogFileError as e:
        logger.error(f"Catalogue invalide: {e}")
        raise typer.Exit(code=1)

    collections = _select_tables(collections, tables)

    if dry_run:
        SeederService(renderer=print_payload).dry_run(collections)
        typer.echo(DRY_RUN_FOOTER)
        return

    def on_result(result: UpsertResult) -> None:
        logger.success(f"Table {result.table} inseree/mise a jour avec succes.")

    with container.catalog_store() as store:
        service = SeederService(store=store)
        try:
            report = service.seed(collections, on_result=on_result)
        except CatalogStoreError as e:
            logger.error(f"Echec upsert {e.table}: {e}")
            raise typer.Exit(code=1)

    console.print("\n[bold]Resume:[/bold]")
    for result in report.results:
        console.print(
            f"  [green]✓[/green] {result.table} (HTTP {result.status_code})",
            highlight=False,
        )


@with_container
def _info(container) -> None:
    settings = load_settings(container.config)
    try:
        target = container.store_target()
        typer.echo(f"Store : {target.url}")
        typer.echo(f"Cle : {target.masked_key}")
    except ConfigurationError as e:
        typer.echo(f"Store : non configure ({', '.join(e.missing)})")
    typer.echo(f"Timeout : {settings.request_timeout:g} s")
    typer.echo(f"Colonne de conflit : {settings.conflict_column}")
    typer.echo(f"Catalogue : {settings.catalog_file or 'fixture embarquee'}")
    typer.echo(f"Niveau de log : {settings.log_level}")


def info() -> None:
    """Affiche la configuration resolue (cle masquee)."""
    _info()
