"""Built-in reference data used when no saved board state is available."""
from __future__ import annotations

from typing import List

from workboard.work_orders.models import WorkCenter, WorkOrder

SEED_WORK_CENTERS = [
    {"id": "wc-1", "name": "Extrusion Line A"},
    {"id": "wc-2", "name": "CNC Machine 1"},
    {"id": "wc-3", "name": "Assembly Station"},
    {"id": "wc-4", "name": "Quality Control"},
    {"id": "wc-5", "name": "Packaging Line"},
]

SEED_WORK_ORDERS = [
    {
        "id": "wo-1",
        "workCenterId": "wc-1",
        "name": "Extrude Batch 1042",
        "status": "complete",
        "startDate": "2026-01-10",
        "endDate": "2026-01-14",
    },
    {
        "id": "wo-2",
        "workCenterId": "wc-1",
        "name": "Extrude Batch 1043",
        "status": "open",
        "startDate": "2026-01-18",
        "endDate": "2026-01-20",
    },
    {
        "id": "wo-3",
        "workCenterId": "wc-3",
        "name": "Assemble Unit K",
        "status": "in-progress",
        "startDate": "2026-01-13",
        "endDate": "2026-01-17",
    },
]


def seed_work_centers() -> List[WorkCenter]:
    return [WorkCenter(**wc) for wc in SEED_WORK_CENTERS]


def seed_work_orders() -> List[WorkOrder]:
    # fresh instances each call so callers can never share mutable state
    return [WorkOrder(**wo) for wo in SEED_WORK_ORDERS]
