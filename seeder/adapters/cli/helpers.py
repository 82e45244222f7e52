"""
Utilitaires partages pour les commandes CLI du seeder.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container neuf
- load_settings : construction des parametres, erreur fatale si invalides
- verbosity_level : niveau de log console selon -v / -q
"""

from functools import wraps
from typing import Callable

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console

from seeder.config import Settings
from seeder.container import Container

console = Console()


def load_settings(factory: Callable[[], Settings] = Settings) -> Settings:
    """
    Construit les parametres ; une valeur invalide termine la commande.

    Args:
        factory: Fournisseur des parametres (ex: container.config)

    Raises:
        typer.Exit: Code 1 si une variable SEEDER_ est invalide
    """
    try:
        return factory()
    except ValidationError as e:
        logger.error(f"Erreur: parametres invalides: {e}")
        raise typer.Exit(code=1)


def with_container(func):
    """
    Decorateur qui injecte un container en premier argument.

    Usage:
        @with_container
        def _my_command(container, ...):
            config = container.config()
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        container = Container()
        return func(container, *args, **kwargs)
    return wrapper


def verbosity_level(verbose: int, quiet: bool, default: str = "INFO") -> str:
    """Niveau de log console : -q -> WARNING, -v -> DEBUG, -vv -> TRACE."""
    if quiet:
        return "WARNING"
    if verbose >= 2:
        return "TRACE"
    if verbose == 1:
        return "DEBUG"
    return default
