"""Board UI state.

Which bar menu is open and whether the create/edit panel is showing.
The state is an immutable value owned by the board controller; every
transition returns a new instance.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from workboard.work_orders.models import WorkOrderDraft


class PanelMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class BoardUiState(BaseModel):
    model_config = ConfigDict(frozen=True)

    open_menu_bar_id: Optional[str] = None
    panel_open: bool = False
    panel_mode: PanelMode = PanelMode.CREATE
    panel_editing_id: Optional[str] = None
    panel_initial: Optional[WorkOrderDraft] = None
    panel_error: Optional[str] = None


def toggle_menu(state: BoardUiState, bar_id: str) -> BoardUiState:
    next_id = None if state.open_menu_bar_id == bar_id else bar_id
    return state.model_copy(update={"open_menu_bar_id": next_id})


def close_menu(state: BoardUiState) -> BoardUiState:
    if state.open_menu_bar_id is None:
        return state
    return state.model_copy(update={"open_menu_bar_id": None})


def open_panel(
    state: BoardUiState,
    mode: PanelMode,
    initial: WorkOrderDraft,
    editing_id: Optional[str] = None,
) -> BoardUiState:
    if mode == PanelMode.EDIT and not editing_id:
        raise ValueError("editing_id is required in edit mode")
    return state.model_copy(
        update={
            "open_menu_bar_id": None,
            "panel_open": True,
            "panel_mode": PanelMode(mode),
            "panel_editing_id": editing_id if mode == PanelMode.EDIT else None,
            "panel_initial": initial,
            "panel_error": None,
        }
    )


def close_panel(state: BoardUiState) -> BoardUiState:
    return state.model_copy(
        update={
            "panel_open": False,
            "panel_editing_id": None,
            "panel_initial": None,
            "panel_error": None,
        }
    )


def set_panel_error(state: BoardUiState, message: Optional[str]) -> BoardUiState:
    if state.panel_error == message:
        return state
    return state.model_copy(update={"panel_error": message})
