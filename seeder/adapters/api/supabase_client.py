"""
Client REST Supabase (PostgREST) pour l'upsert des collections du catalogue.

Implemente ICatalogStore : un POST par table sur
<url>/rest/v1/<table>?on_conflict=<colonne>, le corps etant le tableau JSON
des enregistrements. La resolution des conflits est deleguee au serveur.

Pas de retry : un echec remonte immediatement a l'appelant.

Usage:
    with SupabaseRestClient(url="https://xyz.supabase.co", key="anon") as store:
        result = store.upsert(collection)
"""

from typing import Optional

import httpx
from loguru import logger

from seeder.core.entities.media import RecordCollection
from seeder.core.ports.catalog_store import (
    CatalogRejectedError,
    CatalogRequestError,
    CatalogStoreError,
    ICatalogStore,
    UpsertResult,
)

__all__ = [
    "CatalogRejectedError",
    "CatalogRequestError",
    "CatalogStoreError",
    "SupabaseRestClient",
]


class SupabaseRestClient(ICatalogStore):
    """
    Client synchrone pour l'API REST d'un projet Supabase.

    La cle est envoyee a la fois en header apikey et en Bearer, et le header
    Prefer demande au serveur de retourner la representation des lignes ecrites.

    Attributes:
        DEFAULT_TIMEOUT: Timeout par defaut des requetes (secondes)
    """

    DEFAULT_TIMEOUT = 20.0

    def __init__(
        self,
        url: str,
        key: str,
        timeout: float = DEFAULT_TIMEOUT,
        conflict_column: str = "tmdb_id",
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialise le client.

        Args:
            url: URL de base du projet (slash final tolere)
            key: Cle API du projet
            timeout: Timeout de chaque requete en secondes
            conflict_column: Colonne passee en on_conflict
            client: Client httpx a utiliser ; sinon cree a la demande et ferme par close()
        """
        self._url = url.rstrip("/")
        self._key = key
        self._timeout = timeout
        self._conflict_column = conflict_column
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.Client:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(timeout=self._timeout)
            self._owns_client = True
        return self._client

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "apikey": self._key,
            "Authorization": f"Bearer {self._key}",
            "Prefer": "return=representation",
        }

    def endpoint(self, table: str) -> str:
        """URL REST de la table, sans parametres."""
        return f"{self._url}/rest/v1/{table}"

    def upsert(self, collection: RecordCollection) -> UpsertResult:
        """
        Envoie la collection en un seul POST.

        Args:
            collection: Enregistrements et table cible

        Returns:
            UpsertResult avec le statut et le corps brut

        Raises:
            CatalogRequestError: URL/corps invalides ou erreur de transport
            CatalogRejectedError: Statut >= 400
        """
        table = collection.table
        client = self._get_client()

        try:
            request = client.build_request(
                "POST",
                self.endpoint(table),
                params={"on_conflict": self._conflict_column},
                headers=self._headers(),
                json=collection.to_payload(),
                timeout=self._timeout,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise CatalogRequestError(f"new request: {e}", table=table) from e

        logger.debug(
            "Upsert en cours", table=table, records=len(collection), url=str(request.url)
        )

        try:
            response = client.send(request)
        except httpx.RequestError as e:
            raise CatalogRequestError(f"request failed: {e}", table=table) from e

        body = response.text
        if response.status_code >= 400:
            raise CatalogRejectedError(table, response.status_code, body)

        logger.info(f"[upsert {table}] status={response.status_code}, response={body}")
        return UpsertResult(table=table, status_code=response.status_code, body=body)

    def close(self) -> None:
        """Ferme le client HTTP s'il a ete cree par cette instance."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "SupabaseRestClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
