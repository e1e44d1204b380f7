"""Collision-free element identifiers for cross-referencing markup."""

from __future__ import annotations

import random
import threading

from bootstencil.config import BOOTSTENCIL_UID_SEED

_SEED_RANGE = (1000, 100000)


class UidAllocator:
    """Monotonic identifier counter.

    The counter is seeded on first use: from ``seed`` when given, else from
    ``BOOTSTENCIL_UID_SEED``, else from a random value picked once for the
    allocator's lifetime. Each :meth:`next_id` call consumes exactly one value.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._counter: int | None = None
        self._lock = threading.Lock()

    def next_id(self, prefix: str) -> str:
        """Return ``"{prefix}-{counter}"`` and advance the counter."""
        with self._lock:
            if self._counter is None:
                self._counter = self._initial_value()
            value = self._counter
            self._counter += 1
        return f"{prefix}-{value}"

    def peek(self) -> int | None:
        """Return the next counter value, ``None`` before first use."""
        return self._counter

    def _initial_value(self) -> int:
        if self._seed is not None:
            return self._seed
        if BOOTSTENCIL_UID_SEED is not None:
            return BOOTSTENCIL_UID_SEED
        return random.randrange(*_SEED_RANGE)


_default_allocators: dict[str, UidAllocator] = {}
_registry_lock = threading.Lock()


def default_allocator(kind: str) -> UidAllocator:
    """Get the process-wide allocator shared by every renderer of one type."""
    with _registry_lock:
        allocator = _default_allocators.get(kind)
        if allocator is None:
            allocator = _default_allocators[kind] = UidAllocator()
        return allocator


def reset_default_allocators() -> None:
    """Forget all process-wide allocators (used by tests)."""
    with _registry_lock:
        _default_allocators.clear()
