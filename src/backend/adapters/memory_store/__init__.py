"""In-process store backend (no persistence)."""

from .store import InMemoryVelocityStore

__all__ = ["InMemoryVelocityStore"]
