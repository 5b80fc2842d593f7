"""
Providers: implementaciones del contrato LiveStore.
"""

from deriva.providers.http import HttpStore
from deriva.providers.snapshot import SnapshotStore

__all__ = ["HttpStore", "SnapshotStore"]
