"""Scalability: per-key locking for the thread-pooled host."""

from proposal_registry.scalability.key_lock import KeyedLock

__all__ = ["KeyedLock"]
