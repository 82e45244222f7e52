"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

- ICatalogStore : Store distant recevant les collections du catalogue
- UpsertResult : Resultat d'un upsert reussi
- CatalogStoreError et sous-classes : Erreurs remontees par le store
"""

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
    "ICatalogStore",
    "UpsertResult",
]
