"""Flag, path and configuration helpers for gitdrills."""
