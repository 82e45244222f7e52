"""
Interface port pour le store du catalogue.

Definit le contrat d'upsert par table, le resultat retourne par le store
et la hierarchie d'erreurs remontee par les implementations.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from seeder.core.entities.media import RecordCollection


class CatalogStoreError(Exception):
    """
    Erreur de base du store du catalogue.

    Attributs :
        table : Table visee, si connue
    """

    def __init__(self, message: str, table: Optional[str] = None) -> None:
        self.table = table
        super().__init__(message)


class CatalogRequestError(CatalogStoreError):
    """
    La requete n'a pas pu etre construite ou envoyee.

    Couvre l'URL ou le corps invalides et les erreurs de transport
    (connexion refusee, timeout). L'exception d'origine est chainee.
    """


class CatalogRejectedError(CatalogStoreError):
    """
    Le store a repondu avec un statut >= 400.

    Attributs :
        table : Table visee
        status_code : Code HTTP retourne
        body : Corps brut de la reponse
    """

    def __init__(self, table: str, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"status {status_code}: {body}", table=table)


@dataclass(frozen=True)
class UpsertResult:
    """
    Resultat d'un upsert reussi.

    Attributs :
        table : Table visee
        status_code : Code HTTP (< 400)
        body : Representation des lignes ecrites, non interpretee
    """

    table: str
    status_code: int
    body: str


class ICatalogStore(ABC):
    """Store distant recevant les collections du catalogue."""

    @abstractmethod
    def upsert(self, collection: RecordCollection) -> UpsertResult:
        """
        Insere ou met a jour une collection dans sa table.

        Args :
            collection : Enregistrements et table cible

        Retourne :
            UpsertResult du store

        Leve :
            CatalogRequestError : Requete impossible a construire ou a envoyer
            CatalogRejectedError : Statut >= 400
        """
        ...
