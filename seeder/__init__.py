"""
Catalog Seeder - seed des donnees de test du catalogue dans Supabase.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports)
- services/ : Couche application (orchestration du seed)
- adapters/ : Couche infrastructure (CLI, client REST, chargement du catalogue)
"""

__version__ = "0.1.0"
