"""Token storage backends."""

from .token_store import FileTokenStore, MemoryTokenStore, TokenStore

__all__ = ["TokenStore", "MemoryTokenStore", "FileTokenStore"]
