"""Shared helpers (logging setup, bundled schema loading)."""
