"""
Scheduling Board controller.

Top-level owner of the timeline view state, the scheduling service and the
board UI state. User actions come in here and flow through the scheduling
service before the work-order collection changes.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from workboard.board import ui_state as ui
from workboard.board.bars import bars_by_work_center, bars_for_work_center
from workboard.board.panel import PanelAction, PanelFormState, reduce_panel
from workboard.board.ui_state import BoardUiState, PanelMode
from workboard.calendar_core.dates import today as current_day
from workboard.common.wire import WireModel
from workboard.config import runtime_config
from workboard.timeline_core.models import PointerIntent, TimelineSnapshot, ZoomLevel
from workboard.timeline_core.view import TimelineViewState, default_anchor
from workboard.work_orders.models import WorkCenter, WorkOrder, WorkOrderBar, WorkOrderDraft, WorkOrderStatus
from workboard.work_orders.seed import seed_work_centers
from workboard.work_orders.service import SchedulingError, SchedulingService

logger = logging.getLogger(__name__)


class BoardRow(WireModel):
    work_center: WorkCenter
    bars: List[WorkOrderBar] = Field(default_factory=list)


class BoardRender(BaseModel):
    """Everything a renderer needs for one frame."""
    title: str
    timeline: TimelineSnapshot
    rows: List[BoardRow] = Field(default_factory=list)
    ui: BoardUiState
    panel: Optional[PanelFormState] = None


class SchedulingBoard:
    title = "Work Orders"

    def __init__(
        self,
        service: Optional[SchedulingService] = None,
        work_centers: Optional[List[WorkCenter]] = None,
        anchor: Optional[date] = None,
        zoom: ZoomLevel = ZoomLevel.DAY,
        today_fn: Optional[Callable[[], date]] = None,
        gutter_px: Optional[float] = None,
    ) -> None:
        self._today_fn = today_fn or current_day
        self.work_centers = list(work_centers) if work_centers is not None else seed_work_centers()
        self.service = service or SchedulingService(work_centers=self.work_centers)
        anchor = anchor or default_anchor(self._today_fn(), runtime_config.get_anchor_offset_days())
        self.view = TimelineViewState(anchor, zoom=zoom, today_fn=self._today_fn)
        self.gutter_px = runtime_config.get_bar_gutter_px() if gutter_px is None else gutter_px
        self.ui = BoardUiState()
        self.panel: Optional[PanelFormState] = None

    # Zoom

    def set_timescale(self, zoom: ZoomLevel) -> bool:
        return self.view.set_timescale(zoom)

    def commit_layout(self, container_width_px: float) -> float:
        return self.view.commit_layout(container_width_px)

    # Bars

    def bars_for(self, work_center_id: str) -> List[WorkOrderBar]:
        return bars_for_work_center(
            work_center_id,
            self.service.list_work_orders(),
            self.view.mapper,
            self.view.pixels_per_day,
            self.gutter_px,
        )

    def bars(self) -> Dict[str, List[WorkOrderBar]]:
        return bars_by_work_center(
            self.work_centers,
            self.service.list_work_orders(),
            self.view.mapper,
            self.view.pixels_per_day,
            self.gutter_px,
        )

    # Create / edit

    def open_create_from_pointer(
        self,
        work_center_id: str,
        intent: PointerIntent,
        scroll_left: Optional[float] = None,
    ) -> PanelFormState:
        """Open the create panel prefilled with seven days from the clicked day."""
        self.close_menu()
        offset = self.view.scroll_left if scroll_left is None else scroll_left
        day_index = self.view.mapper.pointer_to_day_index(intent, offset, self.view.pixels_per_day)
        start, end = self.view.mapper.default_draft_range(day_index)
        initial = WorkOrderDraft(
            work_center_id=work_center_id,
            name="",
            status=WorkOrderStatus.OPEN,
            start_date=start,
            end_date=end,
        )
        self.ui = ui.open_panel(self.ui, PanelMode.CREATE, initial)
        self.panel = PanelFormState.from_initial(PanelMode.CREATE, initial)
        return self.panel

    def open_edit(self, order_id: str) -> Optional[PanelFormState]:
        order = self.service.get(order_id)
        if order is None:
            return None
        self.close_menu()
        initial = WorkOrderDraft(
            work_center_id=order.work_center_id,
            name=order.name,
            status=order.status,
            start_date=order.start_date,
            end_date=order.end_date,
        )
        self.ui = ui.open_panel(self.ui, PanelMode.EDIT, initial, editing_id=order_id)
        self.panel = PanelFormState.from_initial(PanelMode.EDIT, initial)
        return self.panel

    def dispatch_panel(self, action: PanelAction) -> Optional[PanelFormState]:
        """Apply a form action; any edit clears the last submit error."""
        if self.panel is None:
            return None
        self.panel = reduce_panel(self.panel, action)
        if action.type != "submit":
            self.panel_changed()
        return self.panel

    def panel_changed(self) -> None:
        self.ui = ui.set_panel_error(self.ui, None)

    def submit_panel(self) -> Optional[WorkOrder]:
        """
        Validate the form and hand the draft to the scheduling service.
        Returns the stored order, or None when the panel stays open.
        """
        if self.panel is None:
            return None
        self.panel = reduce_panel(self.panel, PanelAction(type="submit"))
        if not self.panel.is_valid:
            return None

        editing_id = self.ui.panel_editing_id if self.ui.panel_mode == PanelMode.EDIT else None
        try:
            order = self.service.submit(self.panel.to_draft(), editing_id=editing_id)
        except SchedulingError as exc:
            logger.info("Panel submit rejected: %s", exc)
            self.ui = ui.set_panel_error(self.ui, str(exc))
            return None
        self.close_panel()
        return order

    def close_panel(self) -> None:
        self.ui = ui.close_panel(self.ui)
        self.panel = None

    def delete_bar(self, order_id: str) -> None:
        self.close_menu()
        self.service.delete(order_id)

    # Menu

    def toggle_menu(self, bar_id: str) -> None:
        self.ui = ui.toggle_menu(self.ui, bar_id)

    def close_menu(self) -> None:
        self.ui = ui.close_menu(self.ui)

    def on_global_click(self) -> None:
        self.close_menu()

    # Render

    def render(self) -> BoardRender:
        bars = self.bars()
        return BoardRender(
            title=self.title,
            timeline=self.view.snapshot(),
            rows=[BoardRow(work_center=wc, bars=bars[wc.id]) for wc in self.work_centers],
            ui=self.ui,
            panel=self.panel,
        )
