"""
Couche adaptateurs (infrastructure).

- api/ : Client REST Supabase (httpx)
- catalog/ : Chargement du catalogue depuis un fichier JSON
- cli/ : Interface ligne de commande (Typer)
"""
