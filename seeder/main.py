"""
Point d'entree CLI du seeder.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger
from pydantic import ValidationError

from . import __version__
from .adapters.cli.commands import info, seed
from .adapters.cli.helpers import load_settings, verbosity_level
from .config import Settings
from .logging_config import configure_logging

app = typer.Typer(
    name="catalog-seeder",
    help="Seed du catalogue (films, series) dans un store Supabase",
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (avertissements et erreurs)"),
    ] = False,
) -> None:
    """Catalog Seeder - upsert des donnees de test du catalogue."""
    if verbose or quiet:
        settings = load_settings()
        configure_logging(
            log_level=verbosity_level(verbose, quiet, settings.log_level),
            log_file=settings.log_file,
        )


app.command()(seed)
app.command()(info)


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Catalog Seeder v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    try:
        settings = Settings()
        configure_logging(log_level=settings.log_level, log_file=settings.log_file)
    except ValidationError:
        # Parametres invalides : signales par la commande invoquee
        configure_logging()

    logger.debug("Demarrage du seeder", version=__version__)

    app()


if __name__ == "__main__":
    main()
