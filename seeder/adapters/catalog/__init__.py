"""Chargement des collections du catalogue."""

from seeder.adapters.catalog.loader import CatalogFileError, load_catalog

__all__ = ["CatalogFileError", "load_catalog"]
