"""
Scheduling Service.

Owns the work-order collection and enforces that no two orders on the same
work center occupy overlapping days.
"""

from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Callable, List, Optional
from uuid import uuid4

from workboard.work_orders.models import WorkCenter, WorkOrder, WorkOrderDraft
from workboard.work_orders.repository import WorkOrderRepository
from workboard.work_orders.seed import seed_work_centers

logger = logging.getLogger(__name__)

OVERLAP_MESSAGE = "Work orders cannot overlap on the same work center."


class SchedulingError(Exception):
    """Base scheduling error."""


class EmptyNameError(SchedulingError):
    """Raised when a work order name is blank after trimming."""

    def __init__(self, message: str = "Work order name is required.") -> None:
        super().__init__(message)


class OverlapConflict(SchedulingError):
    """
    Raised when a candidate range intersects an existing order on the same
    work center. ``conflicting_id`` names the first order found.
    """

    def __init__(self, message: str = OVERLAP_MESSAGE, conflicting_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.conflicting_id = conflicting_id


class WorkOrderNotFound(SchedulingError):
    """Raised when an edit targets an id that is not in the collection."""


class UnknownWorkCenter(SchedulingError):
    """Raised when a draft names a work center outside the reference list."""

    def __init__(self, work_center_id: str) -> None:
        super().__init__(f"Unknown work center: {work_center_id}")
        self.work_center_id = work_center_id


def normalize_draft(draft: WorkOrderDraft) -> WorkOrderDraft:
    """Trim the name and order the dates. Raises EmptyNameError."""
    name = draft.name.strip()
    if not name:
        raise EmptyNameError()
    start, end = draft.start_date, draft.end_date
    if start > end:
        start, end = end, start
    return draft.model_copy(update={"name": name, "start_date": start, "end_date": end})


def _to_order(order_id: str, draft: WorkOrderDraft) -> WorkOrder:
    return WorkOrder(
        id=order_id,
        work_center_id=draft.work_center_id,
        name=draft.name,
        status=draft.status,
        start_date=draft.start_date,
        end_date=draft.end_date,
    )


class SchedulingService:
    """
    Service for creating, editing and deleting work orders.
    Collection order is insertion order; nothing is re-sorted.
    """

    def __init__(
        self,
        repository: Optional[WorkOrderRepository] = None,
        id_fn: Optional[Callable[[], str]] = None,
        orders: Optional[List[WorkOrder]] = None,
        work_centers: Optional[List[WorkCenter]] = None,
    ) -> None:
        self._repo = repository or WorkOrderRepository()
        self._id_fn = id_fn or (lambda: uuid4().hex)
        self._work_centers = list(work_centers) if work_centers is not None else seed_work_centers()
        self._orders: List[WorkOrder] = list(orders) if orders is not None else self._repo.load()
        # check-then-write must not interleave when the service is shared
        self._lock = threading.Lock()

    def list_work_centers(self) -> List[WorkCenter]:
        return list(self._work_centers)

    def list_work_orders(self) -> List[WorkOrder]:
        return list(self._orders)

    def get(self, order_id: str) -> Optional[WorkOrder]:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def for_work_center(self, work_center_id: str) -> List[WorkOrder]:
        return [o for o in self._orders if o.work_center_id == work_center_id]

    def find_conflict(
        self,
        work_center_id: str,
        start: date,
        end: date,
        exclude_id: Optional[str] = None,
    ) -> Optional[WorkOrder]:
        for other in self._orders:
            if other.work_center_id != work_center_id or other.id == exclude_id:
                continue
            if other.overlaps(start, end):
                return other
        return None

    def has_overlap(self, draft: WorkOrderDraft, exclude_id: Optional[str] = None) -> bool:
        start, end = sorted((draft.start_date, draft.end_date))
        return self.find_conflict(draft.work_center_id, start, end, exclude_id) is not None

    def _check(self, draft: WorkOrderDraft, exclude_id: Optional[str]) -> WorkOrderDraft:
        normalized = normalize_draft(draft)
        if not any(wc.id == normalized.work_center_id for wc in self._work_centers):
            raise UnknownWorkCenter(normalized.work_center_id)
        conflict = self.find_conflict(
            normalized.work_center_id, normalized.start_date, normalized.end_date, exclude_id
        )
        if conflict is not None:
            logger.info(
                "Rejected %s..%s on %s: overlaps %s",
                normalized.start_date,
                normalized.end_date,
                normalized.work_center_id,
                conflict.id,
            )
            raise OverlapConflict(conflicting_id=conflict.id)
        return normalized

    def create(self, draft: WorkOrderDraft) -> WorkOrder:
        with self._lock:
            normalized = self._check(draft, exclude_id=None)
            order = _to_order(self._id_fn(), normalized)
            self._orders.append(order)
            self._persist()
        logger.info("Created work order %s on %s", order.id, order.work_center_id)
        return order

    def update(self, order_id: str, draft: WorkOrderDraft) -> WorkOrder:
        with self._lock:
            index = self._index_of(order_id)
            if index is None:
                raise WorkOrderNotFound(f"Work order {order_id} not found")
            normalized = self._check(draft, exclude_id=order_id)
            order = _to_order(order_id, normalized)
            self._orders[index] = order
            self._persist()
        logger.info("Updated work order %s", order_id)
        return order

    def submit(self, draft: WorkOrderDraft, editing_id: Optional[str] = None) -> WorkOrder:
        """Create when ``editing_id`` is None, otherwise edit that order."""
        if editing_id is None:
            return self.create(draft)
        return self.update(editing_id, draft)

    def delete(self, order_id: str) -> bool:
        with self._lock:
            before = len(self._orders)
            self._orders = [o for o in self._orders if o.id != order_id]
            removed = len(self._orders) != before
            if removed:
                self._persist()
        if removed:
            logger.info("Deleted work order %s", order_id)
        return removed

    def _index_of(self, order_id: str) -> Optional[int]:
        for i, order in enumerate(self._orders):
            if order.id == order_id:
                return i
        return None

    def _persist(self) -> None:
        self._repo.save(self._orders)
