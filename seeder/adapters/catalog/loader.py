"""
Chargement des collections du catalogue depuis un fichier JSON.

Format attendu : un objet dont chaque cle est un nom de table et chaque valeur
un tableau d'enregistrements.

    {"movies": [{"title": ..., "tmdb_id": 1000001, ...}], "series": [...]}

Sans chemin explicite, la fixture embarquee (seeder/data/sample_catalog.json)
est utilisee.
"""

import json
from importlib import resources
from pathlib import Path
from typing import Optional

from loguru import logger

from seeder.core.entities.media import MediaRecord, RecordCollection

SAMPLE_CATALOG = "sample_catalog.json"


class CatalogFileError(Exception):
    """Fichier de catalogue absent, illisible ou mal forme."""


def _read_text(path: Optional[Path]) -> tuple[str, str]:
    if path is None:
        source = resources.files("seeder.data").joinpath(SAMPLE_CATALOG)
        return source.read_text(encoding="utf-8"), f"<embarque>/{SAMPLE_CATALOG}"

    if not path.exists():
        raise CatalogFileError(f"Fichier non trouve: {path}")
    try:
        return path.read_text(encoding="utf-8"), str(path)
    except OSError as e:
        raise CatalogFileError(f"Lecture impossible de {path}: {e}") from e


def load_catalog(path: Optional[Path] = None) -> list[RecordCollection]:
    """
    Charge les collections du catalogue, dans l'ordre du fichier.

    Args:
        path: Fichier JSON a lire, ou None pour la fixture embarquee

    Returns:
        Liste de RecordCollection, une par table

    Raises:
        CatalogFileError: Si le fichier est absent ou ne respecte pas le format
    """
    text, origin = _read_text(path)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogFileError(f"JSON invalide dans {origin}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogFileError(f"{origin}: objet table -> enregistrements attendu")

    collections = []
    for table, items in data.items():
        if not isinstance(items, list):
            raise CatalogFileError(f"{origin}: la table '{table}' doit etre un tableau")

        records = []
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                raise CatalogFileError(f"{origin}: {table}[{index}] n'est pas un objet")
            try:
                records.append(MediaRecord.from_mapping(item))
            except TypeError as e:
                raise CatalogFileError(f"{origin}: {table}[{index}] invalide: {e}") from e

        collections.append(RecordCollection(table=table, records=tuple(records)))

    logger.debug(
        "Catalogue charge",
        source=origin,
        tables={c.table: len(c) for c in collections},
    )
    return collections
