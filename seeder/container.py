"""
Container d'injection de dependances via dependency-injector.

Centralise la construction des parametres, de la cible du store et du client REST.
"""

from dependency_injector import containers, providers

from .adapters.api.supabase_client import SupabaseRestClient
from .config import Settings, StoreTarget


def _resolve_target(settings: Settings) -> StoreTarget:
    return settings.resolve_target()


class Container(containers.DeclarativeContainer):
    """Container DI du seeder.

    Utilisation :
        container = Container()
        target = container.store_target()  # leve ConfigurationError si absent
        with container.catalog_store() as store:
            store.upsert(collection)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Cible resolue (URL + cle), avec repli VITE_
    store_target = providers.Singleton(_resolve_target, settings=config)

    # Client REST - nouvelle instance a chaque appel
    catalog_store = providers.Factory(
        SupabaseRestClient,
        url=store_target.provided.url,
        key=store_target.provided.key,
        timeout=config.provided.request_timeout,
        conflict_column=config.provided.conflict_column,
    )
