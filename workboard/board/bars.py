"""Bar view-models: work orders placed on the timeline."""
from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

from workboard.timeline_core.mapper import CoordinateMapper
from workboard.work_orders.models import WorkCenter, WorkOrder, WorkOrderBar


def build_bar(order: WorkOrder, mapper: CoordinateMapper, pixels_per_day: float, gutter_px: float = 0.0) -> WorkOrderBar:
    geometry = mapper.bar_geometry(order.start_date, order.end_date, pixels_per_day, gutter_px)
    return WorkOrderBar(
        id=order.id,
        name=order.name,
        status=order.status,
        left_px=geometry.left_px,
        width_px=geometry.width_px,
        start_day=mapper.date_to_day_index(order.start_date),
        end_day=mapper.date_to_day_index(order.end_date),
    )


def bars_for_work_center(
    work_center_id: str,
    orders: Iterable[WorkOrder],
    mapper: CoordinateMapper,
    pixels_per_day: float,
    gutter_px: float = 0.0,
) -> List[WorkOrderBar]:
    return [
        build_bar(o, mapper, pixels_per_day, gutter_px)
        for o in orders
        if o.work_center_id == work_center_id
    ]


def bars_by_work_center(
    work_centers: Iterable[WorkCenter],
    orders: Iterable[WorkOrder],
    mapper: CoordinateMapper,
    pixels_per_day: float,
    gutter_px: float = 0.0,
) -> Dict[str, List[WorkOrderBar]]:
    """Every work center gets an entry, empty rows included."""
    rows: Dict[str, List[WorkOrderBar]] = defaultdict(list)
    for order in orders:
        rows[order.work_center_id].append(build_bar(order, mapper, pixels_per_day, gutter_px))
    return {wc.id: rows.get(wc.id, []) for wc in work_centers}
