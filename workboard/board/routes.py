"""FastAPI routes for the rendered timeline."""
from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends
from workboard.board.controller import SchedulingBoard
from workboard.calendar_core.dates import InvalidDateFormat, parse_date_only
from workboard.common.error_envelope import error_response
from workboard.common.wire import WireModel
from workboard.timeline_core.models import PointerIntent, ZoomLevel
from workboard.work_orders.routes import get_service
from workboard.work_orders.service import SchedulingService

router = APIRouter(prefix="/board/timeline")


class DraftRequest(WireModel):
    work_center_id: str
    x: float
    y: float = 0.0
    scroll_left: float = 0.0
    zoom: ZoomLevel = ZoomLevel.DAY
    anchor: Optional[str] = None


def _parse_anchor(anchor: Optional[str]) -> Optional[date]:
    if anchor is None:
        return None
    try:
        return parse_date_only(anchor)
    except InvalidDateFormat as exc:
        error_response(
            code="calendar.invalid_date",
            message=str(exc),
            status_code=422,
            resource_kind="timeline",
            details={"anchor": anchor},
        )


def _board(service: SchedulingService, zoom: ZoomLevel, anchor: Optional[str]) -> SchedulingBoard:
    return SchedulingBoard(service=service, anchor=_parse_anchor(anchor), zoom=zoom)


@router.get("")
def get_timeline(
    zoom: ZoomLevel = ZoomLevel.DAY,
    anchor: Optional[str] = None,
    container_width_px: Optional[float] = None,
    service: SchedulingService = Depends(get_service),
):
    board = _board(service, zoom, anchor)
    if container_width_px is not None:
        board.commit_layout(container_width_px)
    render = board.render()
    return {
        "anchor": board.view.anchor.isoformat(),
        "timeline": render.timeline.to_wire(),
        "rows": [row.to_wire() for row in render.rows],
    }


@router.post("/draft")
def create_draft(req: DraftRequest, service: SchedulingService = Depends(get_service)):
    board = _board(service, req.zoom, req.anchor)
    panel = board.open_create_from_pointer(
        req.work_center_id,
        PointerIntent(x=req.x, y=req.y),
        scroll_left=req.scroll_left,
    )
    return {
        "draft": panel.to_draft().to_wire(),
        "primaryCta": panel.primary_cta_text,
    }
