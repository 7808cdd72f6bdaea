"""Work orders and the no-double-booking scheduling engine."""

from workboard.work_orders.models import (
    WorkCenter,
    WorkOrder,
    WorkOrderBar,
    WorkOrderDraft,
    WorkOrderStatus,
)
from workboard.work_orders.repository import (
    FilesystemKeyValueStore,
    InMemoryKeyValueStore,
    KeyValueStore,
    PersistenceReadError,
    WorkOrderRepository,
)
from workboard.work_orders.service import (
    EmptyNameError,
    OverlapConflict,
    SchedulingError,
    SchedulingService,
    UnknownWorkCenter,
    WorkOrderNotFound,
)

__all__ = [
    "WorkCenter",
    "WorkOrder",
    "WorkOrderBar",
    "WorkOrderDraft",
    "WorkOrderStatus",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "FilesystemKeyValueStore",
    "PersistenceReadError",
    "WorkOrderRepository",
    "SchedulingError",
    "EmptyNameError",
    "OverlapConflict",
    "WorkOrderNotFound",
    "UnknownWorkCenter",
    "SchedulingService",
]
