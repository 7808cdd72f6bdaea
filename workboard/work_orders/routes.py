"""FastAPI routes for work centers and work orders."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from workboard.common.error_envelope import error_response
from workboard.work_orders.models import WorkOrderDraft, status_options
from workboard.work_orders.service import (
    EmptyNameError,
    OverlapConflict,
    SchedulingService,
    UnknownWorkCenter,
    WorkOrderNotFound,
)

router = APIRouter(prefix="/board")

_service: Optional[SchedulingService] = None


def get_service() -> SchedulingService:
    global _service
    if _service is None:
        _service = SchedulingService()
    return _service


def _raise_for(exc: Exception) -> None:
    if isinstance(exc, OverlapConflict):
        error_response(
            code="work_orders.overlap_conflict",
            message=str(exc),
            status_code=409,
            resource_kind="work_order",
            details={"conflictingId": exc.conflicting_id},
        )
    if isinstance(exc, EmptyNameError):
        error_response(
            code="work_orders.empty_name",
            message=str(exc),
            status_code=422,
            resource_kind="work_order",
        )
    if isinstance(exc, UnknownWorkCenter):
        error_response(
            code="work_orders.unknown_work_center",
            message=str(exc),
            status_code=422,
            resource_kind="work_center",
            details={"workCenterId": exc.work_center_id},
        )
    if isinstance(exc, WorkOrderNotFound):
        error_response(
            code="work_orders.not_found",
            message=str(exc),
            status_code=404,
            resource_kind="work_order",
        )
    raise exc


@router.get("/work-centers")
def list_work_centers(service: SchedulingService = Depends(get_service)):
    return {"items": service.list_work_centers()}


@router.get("/statuses")
def list_statuses():
    return {"items": status_options()}


@router.get("/work-orders")
def list_work_orders(
    work_center_id: Optional[str] = None,
    service: SchedulingService = Depends(get_service),
):
    if work_center_id:
        orders = service.for_work_center(work_center_id)
    else:
        orders = service.list_work_orders()
    return {"items": [o.to_record() for o in orders]}


@router.get("/work-orders/{order_id}")
def get_work_order(order_id: str, service: SchedulingService = Depends(get_service)):
    order = service.get(order_id)
    if order is None:
        _raise_for(WorkOrderNotFound(f"Work order {order_id} not found"))
    return order.to_record()


@router.post("/work-orders")
def create_work_order(draft: WorkOrderDraft, service: SchedulingService = Depends(get_service)):
    try:
        return service.create(draft).to_record()
    except (OverlapConflict, EmptyNameError, UnknownWorkCenter) as exc:
        _raise_for(exc)


@router.put("/work-orders/{order_id}")
def update_work_order(
    order_id: str,
    draft: WorkOrderDraft,
    service: SchedulingService = Depends(get_service),
):
    try:
        return service.update(order_id, draft).to_record()
    except (OverlapConflict, EmptyNameError, UnknownWorkCenter, WorkOrderNotFound) as exc:
        _raise_for(exc)


@router.delete("/work-orders/{order_id}")
def delete_work_order(order_id: str, service: SchedulingService = Depends(get_service)):
    removed = service.delete(order_id)
    return {"status": "deleted", "removed": removed}
