"""Runtime configuration helpers for the scheduling board."""
from __future__ import annotations

import os
from typing import Optional

DEFAULT_STORE_KEY = "workboard.workOrders"
DEFAULT_ANCHOR_OFFSET_DAYS = 14


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


def _get_int(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from exc


def get_store_backend() -> str:
    return (_get_env("WORKBOARD_STORE_BACKEND") or "memory").lower()


def get_store_dir() -> Optional[str]:
    return _get_env("WORKBOARD_STORE_DIR")


def get_store_key() -> str:
    return _get_env("WORKBOARD_STORE_KEY") or DEFAULT_STORE_KEY


def get_anchor_offset_days() -> int:
    return _get_int("WORKBOARD_ANCHOR_OFFSET_DAYS", DEFAULT_ANCHOR_OFFSET_DAYS)


def get_bar_gutter_px() -> int:
    return _get_int("WORKBOARD_BAR_GUTTER_PX", 0)
