"""Work order panel form state and reducer.

Applies panel actions to an immutable form state. Pure logic, no side
effects (except logging).
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from workboard.board.ui_state import PanelMode
from workboard.calendar_core.dates import parse_date_only
from workboard.work_orders.models import WorkOrderDraft, WorkOrderStatus

logger = logging.getLogger(__name__)


class PanelFormState(BaseModel):
    """Current values of the create/edit panel."""
    model_config = ConfigDict(frozen=True)

    mode: PanelMode = PanelMode.CREATE
    work_center_id: str
    name: str = ""
    status: WorkOrderStatus = WorkOrderStatus.OPEN
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    submitted: bool = False

    @classmethod
    def from_initial(cls, mode: PanelMode, initial: WorkOrderDraft) -> "PanelFormState":
        return cls(
            mode=mode,
            work_center_id=initial.work_center_id,
            name=initial.name or "",
            status=initial.status,
            start_date=initial.start_date,
            end_date=initial.end_date,
        )

    def errors(self) -> Dict[str, bool]:
        date_order = (
            self.start_date is not None
            and self.end_date is not None
            and self.end_date < self.start_date
        )
        return {
            "name_required": not self.name.strip(),
            "start_required": self.start_date is None,
            "end_required": self.end_date is None,
            "date_order": date_order,
        }

    def visible_errors(self) -> Dict[str, bool]:
        """Errors are only shown after a submit attempt."""
        if not self.submitted:
            return {key: False for key in self.errors()}
        return self.errors()

    @property
    def is_valid(self) -> bool:
        return not any(self.errors().values())

    @property
    def primary_cta_text(self) -> str:
        return "Save" if self.mode == PanelMode.EDIT else "Create"

    def to_draft(self) -> WorkOrderDraft:
        """Submit payload: trimmed name, dates in ascending order."""
        if self.start_date is None or self.end_date is None:
            raise ValueError("start_date and end_date are required")
        start, end = sorted((self.start_date, self.end_date))
        return WorkOrderDraft(
            work_center_id=self.work_center_id,
            name=self.name.strip(),
            status=self.status,
            start_date=start,
            end_date=end,
        )


class PanelAction(BaseModel):
    """A single panel action: ``set_name``, ``set_status``, ``set_start_date``,
    ``set_end_date``, ``submit`` or ``reset``."""
    model_config = ConfigDict(frozen=True)

    type: str
    value: Any = None


def _as_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    return parse_date_only(value)


class PanelReducer:
    """Applies actions to PanelFormState."""

    @staticmethod
    def apply(state: PanelFormState, action: PanelAction) -> PanelFormState:
        handler = getattr(PanelReducer, f"_apply_{action.type}", None)
        if handler is None:
            logger.warning("Unknown panel action: %s", action.type)
            return state
        return handler(state, action.value)

    @staticmethod
    def _apply_set_name(state: PanelFormState, value: Any) -> PanelFormState:
        return state.model_copy(update={"name": "" if value is None else str(value)})

    @staticmethod
    def _apply_set_status(state: PanelFormState, value: Any) -> PanelFormState:
        return state.model_copy(update={"status": WorkOrderStatus(value)})

    @staticmethod
    def _apply_set_start_date(state: PanelFormState, value: Any) -> PanelFormState:
        return state.model_copy(update={"start_date": _as_date(value)})

    @staticmethod
    def _apply_set_end_date(state: PanelFormState, value: Any) -> PanelFormState:
        return state.model_copy(update={"end_date": _as_date(value)})

    @staticmethod
    def _apply_submit(state: PanelFormState, value: Any) -> PanelFormState:
        return state.model_copy(update={"submitted": True})

    @staticmethod
    def _apply_reset(state: PanelFormState, value: Any) -> PanelFormState:
        return state.model_copy(update={"submitted": False})


def reduce_panel(state: PanelFormState, action: PanelAction) -> PanelFormState:
    return PanelReducer.apply(state, action)

