"""Storage abstractions for the work-order list.

The whole collection is saved as one JSON array under a single key of a
key-value store. Loading never fails: absent or corrupt state falls back to
the built-in seed list.
"""
from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Set

from pydantic import TypeAdapter, ValidationError

from workboard.config import runtime_config
from workboard.work_orders.models import WorkOrder
from workboard.work_orders.seed import seed_work_orders

logger = logging.getLogger(__name__)

_WORK_ORDER_LIST = TypeAdapter(List[WorkOrder])


class PersistenceReadError(Exception):
    """Saved board state is missing or unreadable."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryKeyValueStore:
    """Process-local key-value store."""

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class FilesystemKeyValueStore:
    """One file per key under a root directory."""

    def __init__(self, root: Optional[str] = None) -> None:
        dir_path = root or runtime_config.get_store_dir()
        self._root = Path(dir_path or Path(tempfile.gettempdir()) / "workboard_store")
        self._root.mkdir(parents=True, exist_ok=True)

    def _file_path(self, key: str) -> Path:
        safe = "".join(ch if ch.isalnum() or ch in "._-" else "_" for ch in key)
        return self._root / f"{safe}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._file_path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._file_path(key)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)


def store_from_env() -> KeyValueStore:
    backend = runtime_config.get_store_backend()
    if backend == "filesystem":
        return FilesystemKeyValueStore(root=runtime_config.get_store_dir())
    if backend == "memory":
        return InMemoryKeyValueStore()
    raise RuntimeError("WORKBOARD_STORE_BACKEND must be 'memory' or 'filesystem'")


def serialize_work_orders(orders: List[WorkOrder]) -> str:
    return json.dumps([o.to_record() for o in orders])


def deserialize_work_orders(raw: Optional[str]) -> List[WorkOrder]:
    """Strict decode of a saved payload; raises PersistenceReadError."""
    if raw is None:
        raise PersistenceReadError("no saved work orders")
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise PersistenceReadError(f"saved work orders are not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise PersistenceReadError(f"saved work orders must be a JSON array, got {type(data).__name__}")
    try:
        orders = _WORK_ORDER_LIST.validate_python(data)
    except ValidationError as exc:
        raise PersistenceReadError(f"saved work orders failed validation: {exc.error_count()} errors") from exc
    _check_collection(orders)
    return orders


def _check_collection(orders: List[WorkOrder]) -> None:
    """Ids are unique and no two orders on one work center share a day."""
    seen: Set[str] = set()
    by_center: Dict[str, List[WorkOrder]] = {}
    for order in orders:
        if order.id in seen:
            raise PersistenceReadError(f"saved work orders repeat id {order.id}")
        seen.add(order.id)
        by_center.setdefault(order.work_center_id, []).append(order)
    for center_id, center_orders in by_center.items():
        center_orders.sort(key=lambda o: o.start_date)
        for prev, nxt in zip(center_orders, center_orders[1:]):
            if prev.overlaps(nxt.start_date, nxt.end_date):
                raise PersistenceReadError(
                    f"saved work orders {prev.id} and {nxt.id} overlap on {center_id}"
                )


class WorkOrderRepository:
    """Loads and saves the work-order list through a key-value store."""

    def __init__(self, store: Optional[KeyValueStore] = None, key: Optional[str] = None) -> None:
        self._store = store if store is not None else store_from_env()
        self._key = key or runtime_config.get_store_key()

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> List[WorkOrder]:
        try:
            return deserialize_work_orders(self._store.get(self._key))
        except PersistenceReadError as exc:
            logger.warning("Using seed work orders: %s", exc)
            return seed_work_orders()

    def save(self, orders: List[WorkOrder]) -> bool:
        """Write the collection. Failures are logged; memory stays authoritative."""
        try:
            self._store.set(self._key, serialize_work_orders(orders))
        except Exception as exc:
            logger.warning("Failed to save %d work orders under %s: %s", len(orders), self._key, exc)
            return False
        return True
