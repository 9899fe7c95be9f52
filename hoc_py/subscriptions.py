"""Subscriptions to external data sources.

A data source is any object with ``subscribe(listener) -> handle`` and
``unsubscribe(handle)``. It is owned by the caller and passed in explicitly;
containers may hold any number of listeners on it.

Each component instance keeps its handles in a ``SubscriptionSet`` so that
unmount can release exactly what mount acquired.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple, runtime_checkable

from hoc_py.errors import SubscriptionOwnershipError


logger = logging.getLogger(__name__)

Listener = Callable[[], None]


@runtime_checkable
class DataSource(Protocol):
    def subscribe(self, listener: Listener) -> Any: ...

    def unsubscribe(self, handle: Any) -> None: ...


@dataclass
class _Subscription:
    source: Any
    handle: Any


class SubscriptionSet:
    """Handles held by one component instance.

    Releasing a handle twice is a no-op; releasing a handle this set never
    issued raises SubscriptionOwnershipError.
    """

    def __init__(self, owner: str):
        self.owner = owner
        self._active: List[_Subscription] = []
        self._released: List[_Subscription] = []
        self.issued = 0

    def add(self, source: DataSource, listener: Listener) -> Any:
        handle = source.subscribe(listener)
        self._active.append(_Subscription(source, handle))
        self.issued += 1
        logger.debug("%s subscribed (handle=%r)", self.owner, handle)
        return handle

    def release(self, handle: Any) -> bool:
        """Release ``handle``. Returns False if it was already released."""
        entry = self._find(self._active, handle)
        if entry is None:
            if self._find(self._released, handle) is not None:
                return False
            raise SubscriptionOwnershipError(self.owner, handle)
        self._active.remove(entry)
        self._released.append(entry)
        entry.source.unsubscribe(entry.handle)
        logger.debug("%s unsubscribed (handle=%r)", self.owner, handle)
        return True

    def release_all(self) -> int:
        count = 0
        for entry in list(self._active):
            if self.release(entry.handle):
                count += 1
        return count

    @property
    def pending(self) -> List[Any]:
        return [entry.handle for entry in self._active]

    @property
    def released(self) -> int:
        return len(self._released)

    @staticmethod
    def _find(entries: List[_Subscription], handle: Any) -> Optional[_Subscription]:
        for entry in entries:
            if entry.handle is handle or entry.handle == handle:
                return entry
        return None


class MemoryDataSource:
    """Dict-backed data source.

    ``set`` notifies every listener synchronously. ``calls`` records every
    subscribe/unsubscribe as ``(operation, handle)``.
    """

    def __init__(self, values: Optional[Dict[Any, Any]] = None):
        self._values: Dict[Any, Any] = dict(values or {})
        self._listeners: Dict[int, Listener] = {}
        self._ids = itertools.count(1)
        self.calls: List[Tuple[str, int]] = []

    def get(self, key: Any, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: Any, value: Any) -> None:
        self._values[key] = value
        self.notify()

    def notify(self) -> None:
        for listener in list(self._listeners.values()):
            listener()

    def subscribe(self, listener: Listener) -> int:
        handle = next(self._ids)
        self._listeners[handle] = listener
        self.calls.append(("subscribe", handle))
        return handle

    def unsubscribe(self, handle: int) -> None:
        if handle not in self._listeners:
            raise KeyError(f"Unknown subscription handle: {handle!r}")
        del self._listeners[handle]
        self.calls.append(("unsubscribe", handle))

    @property
    def listener_count(self) -> int:
        return len(self._listeners)


__all__ = ["DataSource", "Listener", "SubscriptionSet", "MemoryDataSource"]
