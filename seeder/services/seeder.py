"""
Service d'orchestration du seed du catalogue.

Enchaine les upserts table par table, dans l'ordre des collections.
Le premier echec interrompt le seed : les tables suivantes ne sont pas envoyees.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from loguru import logger

from seeder.core.entities.media import RecordCollection
from seeder.core.ports.catalog_store import ICatalogStore, UpsertResult


@dataclass
class SeedReport:
    """Resultats des upserts reussis, dans l'ordre d'envoi."""

    results: list[UpsertResult] = field(default_factory=list)

    @property
    def tables(self) -> list[str]:
        return [r.table for r in self.results]


class SeederService:
    """
    Seed des collections du catalogue vers le store.

    Le store n'est utilise qu'en mode live : dry_run() passe uniquement
    par le renderer.
    """

    def __init__(
        self,
        store: Optional[ICatalogStore] = None,
        renderer: Optional[Callable[[RecordCollection], None]] = None,
    ) -> None:
        self._store = store
        self._renderer = renderer

    def dry_run(self, collections: Iterable[RecordCollection]) -> None:
        """Affiche chaque collection via le renderer, sans appel reseau."""
        if self._renderer is None:
            raise ValueError("renderer requis pour le dry-run")
        for collection in collections:
            self._renderer(collection)

    def seed(
        self,
        collections: Iterable[RecordCollection],
        on_result: Optional[Callable[[UpsertResult], None]] = None,
    ) -> SeedReport:
        """
        Upsert sequentiel des collections.

        Args:
            collections: Collections a envoyer, dans l'ordre
            on_result: Callback appele apres chaque upsert reussi

        Returns:
            SeedReport des upserts reussis

        Raises:
            CatalogStoreError: Au premier echec, sans tenter les tables suivantes
        """
        if self._store is None:
            raise ValueError("store requis pour le seed")

        report = SeedReport()
        for collection in collections:
            logger.debug("Upsert de la table", table=collection.table, records=len(collection))
            result = self._store.upsert(collection)
            report.results.append(result)
            if on_result is not None:
                on_result(result)
        return report
