"""Reading tracker: authenticated book list API over Supabase."""

__version__ = "0.1.0"
