"""PointerIntent factories for pointer and keyboard activation of a track."""
from __future__ import annotations

from workboard.timeline_core.models import PointerIntent


def pointer_intent_from_click(client_x: float, track_left: float, client_y: float = 0.0, track_top: float = 0.0) -> PointerIntent:
    """Click position relative to the track's visible left edge."""
    return PointerIntent(x=client_x - track_left, y=client_y - track_top)


def pointer_intent_from_keyboard(track_width: float, track_height: float = 0.0) -> PointerIntent:
    """Keyboard activation targets the centre of the visible track."""
    return PointerIntent(x=track_width / 2, y=track_height / 2)
