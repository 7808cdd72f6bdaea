"""Scheduling board controller, UI state and panel form reducer."""

from workboard.board.controller import BoardRender, BoardRow, SchedulingBoard
from workboard.board.panel import PanelAction, PanelFormState, reduce_panel
from workboard.board.pointer import pointer_intent_from_click, pointer_intent_from_keyboard
from workboard.board.ui_state import BoardUiState, PanelMode

__all__ = [
    "BoardRender",
    "BoardRow",
    "BoardUiState",
    "PanelAction",
    "PanelFormState",
    "PanelMode",
    "SchedulingBoard",
    "pointer_intent_from_click",
    "pointer_intent_from_keyboard",
    "reduce_panel",
]
