"""
Work Order Models.

Work centers, work orders and the drafts submitted by the edit panel.
Dates are calendar days; on the wire they are ``YYYY-MM-DD`` strings under
the camelCase keys used by the saved board state.
"""

from __future__ import annotations

import uuid
from datetime import date
from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from workboard.calendar_core.dates import format_date_only, parse_date_only
from workboard.common.wire import WireModel


class WorkOrderStatus(str, Enum):
    """Status of a work order."""
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    COMPLETE = "complete"
    BLOCKED = "blocked"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    WorkOrderStatus.OPEN: "Open",
    WorkOrderStatus.IN_PROGRESS: "In Progress",
    WorkOrderStatus.COMPLETE: "Complete",
    WorkOrderStatus.BLOCKED: "Blocked",
}


class StatusOption(BaseModel):
    value: WorkOrderStatus
    label: str


def status_options() -> List[StatusOption]:
    return [StatusOption(value=s, label=s.label) for s in WorkOrderStatus]


def _coerce_date(value: Any) -> Any:
    if isinstance(value, str):
        return parse_date_only(value)
    return value


class WorkCenter(BaseModel):
    """A machine, line or station that hosts one work order per day."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class _DatedModel(WireModel):
    work_center_id: str
    name: str
    status: WorkOrderStatus = WorkOrderStatus.OPEN
    start_date: date
    end_date: date

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_iso_dates(cls, value: Any) -> Any:
        return _coerce_date(value)

    @field_serializer("start_date", "end_date")
    def serialize_dates(self, value: date) -> str:
        return format_date_only(value)


class WorkOrderDraft(_DatedModel):
    """
    Candidate work order as submitted by the create/edit panel.
    Not yet normalized: dates may be reversed and the name untrimmed.
    """


class WorkOrder(_DatedModel):
    """
    A scheduled task on one work center over an inclusive date range.
    """
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @model_validator(mode="after")
    def dates_ordered(self) -> "WorkOrder":
        if self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self

    def to_record(self) -> dict:
        """Persisted/JSON shape: camelCase keys, ISO dates."""
        return self.to_wire()

    def overlaps(self, start: date, end: date) -> bool:
        """Closed-interval intersection; touching on one day counts."""
        return start <= self.end_date and self.start_date <= end


class WorkOrderBar(WireModel):
    """Bar view-model for one work order on its work-center row."""
    id: str
    name: str
    status: WorkOrderStatus
    left_px: float
    width_px: float
    start_day: int
    end_day: int
