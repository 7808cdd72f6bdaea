"""
Tests for the Scheduling Service.
"""

import pytest
from datetime import date
from itertools import count

from workboard.work_orders.models import WorkCenter, WorkOrder, WorkOrderDraft, WorkOrderStatus
from workboard.work_orders.repository import InMemoryKeyValueStore, WorkOrderRepository
from workboard.work_orders.service import (
    OVERLAP_MESSAGE,
    EmptyNameError,
    OverlapConflict,
    SchedulingService,
    UnknownWorkCenter,
    WorkOrderNotFound,
    normalize_draft,
)


def draft(start, end, wc="wc-1", name="Batch"):
    return WorkOrderDraft(work_center_id=wc, name=name, start_date=start, end_date=end)


class TestSchedulingService:

    @pytest.fixture
    def store(self):
        return InMemoryKeyValueStore()

    @pytest.fixture
    def service(self, store):
        ids = count(1)
        existing = [
            WorkOrder(
                id="wo-a",
                work_center_id="wc-1",
                name="Existing",
                status=WorkOrderStatus.OPEN,
                start_date=date(2026, 1, 3),
                end_date=date(2026, 1, 6),
            )
        ]
        return SchedulingService(
            repository=WorkOrderRepository(store=store, key="orders"),
            id_fn=lambda: f"new-{next(ids)}",
            orders=existing,
        )

    def test_touching_end_point_is_overlap(self, service):
        with pytest.raises(OverlapConflict) as exc:
            service.create(draft("2026-01-06", "2026-01-08"))
        assert str(exc.value) == OVERLAP_MESSAGE
        assert exc.value.conflicting_id == "wo-a"
        assert len(service.list_work_orders()) == 1

    def test_adjacent_next_day_is_accepted(self, service):
        order = service.create(draft("2026-01-07", "2026-01-08"))
        assert order.id == "new-1"
        assert [o.id for o in service.list_work_orders()] == ["wo-a", "new-1"]

    def test_contained_and_enclosing_ranges_conflict(self, service):
        with pytest.raises(OverlapConflict):
            service.create(draft("2026-01-04", "2026-01-04"))
        with pytest.raises(OverlapConflict):
            service.create(draft("2026-01-01", "2026-01-20"))
        with pytest.raises(OverlapConflict):
            service.create(draft("2026-01-01", "2026-01-03"))

    def test_other_work_center_does_not_conflict(self, service):
        order = service.create(draft("2026-01-03", "2026-01-06", wc="wc-2"))
        assert order.work_center_id == "wc-2"
        assert len(service.for_work_center("wc-1")) == 1
        assert len(service.for_work_center("wc-2")) == 1

    def test_reversed_range_normalized_before_check_and_storage(self, service):
        order = service.create(draft("2026-02-10", "2026-02-01"))
        assert order.start_date == date(2026, 2, 1)
        assert order.end_date == date(2026, 2, 10)

    def test_reversed_range_still_checked(self, service):
        with pytest.raises(OverlapConflict):
            service.create(draft("2026-01-10", "2026-01-05"))

    def test_name_trimmed(self, service):
        order = service.create(draft("2026-03-01", "2026-03-02", name="  Run 7  "))
        assert order.name == "Run 7"

    def test_blank_name_rejected(self, service):
        with pytest.raises(EmptyNameError):
            service.create(draft("2026-03-01", "2026-03-02", name="   "))
        assert len(service.list_work_orders()) == 1

    def test_single_day_order(self, service):
        order = service.create(draft("2026-01-07", "2026-01-07"))
        assert order.start_date == order.end_date

    def test_edit_excludes_itself(self, service):
        updated = service.update("wo-a", draft("2026-01-04", "2026-01-09", name="Moved"))
        assert updated.id == "wo-a"
        assert updated.name == "Moved"
        orders = service.list_work_orders()
        assert len(orders) == 1
        assert orders[0].end_date == date(2026, 1, 9)

    def test_edit_keeps_position(self, service):
        service.create(draft("2026-01-10", "2026-01-12"))
        service.create(draft("2026-01-20", "2026-01-22"))
        service.update("new-1", draft("2026-01-13", "2026-01-14", name="Shifted"))
        assert [o.id for o in service.list_work_orders()] == ["wo-a", "new-1", "new-2"]

    def test_edit_conflicting_with_other_rejected(self, service):
        service.create(draft("2026-01-10", "2026-01-12"))
        with pytest.raises(OverlapConflict):
            service.update("new-1", draft("2026-01-06", "2026-01-12"))
        assert service.get("new-1").start_date == date(2026, 1, 10)

    def test_edit_unknown_id(self, service):
        with pytest.raises(WorkOrderNotFound):
            service.update("missing", draft("2026-05-01", "2026-05-02"))

    def test_submit_dispatches_on_editing_id(self, service):
        created = service.submit(draft("2026-04-01", "2026-04-02"))
        edited = service.submit(draft("2026-04-03", "2026-04-04"), editing_id=created.id)
        assert edited.id == created.id
        assert len(service.list_work_orders()) == 2

    def test_delete_is_unconditional(self, service):
        assert service.delete("wo-a") is True
        assert service.delete("wo-a") is False
        assert service.list_work_orders() == []

    def test_has_overlap(self, service):
        assert service.has_overlap(draft("2026-01-06", "2026-01-08")) is True
        assert service.has_overlap(draft("2026-01-06", "2026-01-08"), exclude_id="wo-a") is False

    def test_mutations_persisted(self, service, store):
        service.create(draft("2026-01-07", "2026-01-08"))
        reloaded = WorkOrderRepository(store=store, key="orders").load()
        assert [o.id for o in reloaded] == ["wo-a", "new-1"]

        service.delete("wo-a")
        reloaded = WorkOrderRepository(store=store, key="orders").load()
        assert [o.id for o in reloaded] == ["new-1"]

    def test_unknown_work_center_rejected(self, service, store):
        with pytest.raises(UnknownWorkCenter) as exc:
            service.create(draft("2026-03-01", "2026-03-02", wc="wc-999"))
        assert exc.value.work_center_id == "wc-999"
        assert len(service.list_work_orders()) == 1
        assert store.get("orders") is None

    def test_edit_onto_unknown_work_center_rejected(self, service):
        with pytest.raises(UnknownWorkCenter):
            service.update("wo-a", draft("2026-01-03", "2026-01-06", wc="wc-999"))
        assert service.get("wo-a").work_center_id == "wc-1"

    def test_rejected_submit_not_persisted(self, service, store):
        with pytest.raises(OverlapConflict):
            service.create(draft("2026-01-06", "2026-01-08"))
        assert store.get("orders") is None


def test_non_overlapping_sequence_always_accepted():
    service = SchedulingService(
        repository=WorkOrderRepository(store=InMemoryKeyValueStore(), key="k"),
        orders=[],
    )
    for i in range(10):
        start = date(2026, 1, 1 + i * 3)
        end = date(2026, 1, 2 + i * 3)
        before = len(service.list_work_orders())
        service.create(draft(start, end))
        assert len(service.list_work_orders()) == before + 1


def test_loads_from_repository_when_no_orders_given():
    service = SchedulingService(repository=WorkOrderRepository(store=InMemoryKeyValueStore(), key="k"))
    assert [o.id for o in service.list_work_orders()] == ["wo-1", "wo-2", "wo-3"]


def test_normalize_draft_keeps_status():
    d = WorkOrderDraft(
        work_center_id="wc-1",
        name=" x ",
        status=WorkOrderStatus.BLOCKED,
        start_date=date(2026, 1, 5),
        end_date=date(2026, 1, 1),
    )
    n = normalize_draft(d)
    assert (n.name, n.status, n.start_date, n.end_date) == ("x", WorkOrderStatus.BLOCKED, date(2026, 1, 1), date(2026, 1, 5))


def test_custom_work_center_list():
    service = SchedulingService(
        repository=WorkOrderRepository(store=InMemoryKeyValueStore(), key="k"),
        orders=[],
        work_centers=[WorkCenter(id="press", name="Press 1")],
    )
    assert [wc.id for wc in service.list_work_centers()] == ["press"]
    assert service.create(draft("2026-01-01", "2026-01-02", wc="press")).work_center_id == "press"
    with pytest.raises(UnknownWorkCenter):
        service.create(draft("2026-01-05", "2026-01-06", wc="wc-1"))
