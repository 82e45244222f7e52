"""
Rendu des payloads en mode dry-run.

Ecrit le JSON indente de chaque collection sur stdout, sous un en-tete
par table, sans aucun appel reseau.
"""

import json

import typer

from seeder.core.entities.media import RecordCollection

DRY_RUN_FOOTER = "-- dry-run: nothing sent"


def render_payload(collection: RecordCollection) -> str:
    """Retourne la section affichee pour une collection."""
    body = json.dumps(collection.to_payload(), indent=2, ensure_ascii=False)
    return f"--- {collection.table} payload ---\n{body}"


def print_payload(collection: RecordCollection) -> None:
    """Affiche la section d'une collection sur stdout."""
    typer.echo(render_payload(collection))
