"""Clients API externes : store REST Supabase."""

from seeder.adapters.api.supabase_client import SupabaseRestClient

__all__ = ["SupabaseRestClient"]
