"""Singleton - a class with exactly one shared instance."""

import threading
from typing import Optional


class Singleton:
    """
    Process-wide single instance.

    The instance is created lazily on first access. Creation is guarded by
    a class-level lock with double-checked locking, so concurrent first
    calls still produce one object.
    """

    _instance: Optional["Singleton"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "Singleton":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_instance(cls) -> "Singleton":
        """Get singleton instance."""
        return cls()


def demo() -> None:
    s1 = Singleton.get_instance()
    s2 = Singleton.get_instance()

    print(f"Are instances the same? {s1 is s2}")
