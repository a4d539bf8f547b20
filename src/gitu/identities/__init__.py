"""Identity profiles and their persistent store."""

from .models import Identity, IdentityEntry, Store
from .store import IdentityStore

__all__ = ["Identity", "IdentityEntry", "IdentityStore", "Store"]
