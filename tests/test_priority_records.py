from dataclasses import FrozenInstanceError

import pytest

from pathsearch.heap import PriorityHeap
from pathsearch.records import NO_PARENT, PriorityRecord, record_outranks, start_record


def test_total_cost_adds_g_and_h():
    record = PriorityRecord("A", "S", 2.5, 1.5)
    assert record.total_cost == 4.0
    assert record.has_parent


def test_lower_total_cost_outranks():
    cheap = PriorityRecord("A", "S", 1.0, 1.0)
    dear = PriorityRecord("B", "S", 1.0, 2.0)

    assert cheap.outranks(dear)
    assert not dear.outranks(cheap)


def test_equal_totals_prefer_lower_cost_from_start():
    near = PriorityRecord("A", "S", 1.0, 3.0)
    far = PriorityRecord("B", "S", 3.0, 1.0)

    assert record_outranks(near, far)
    assert not record_outranks(far, near)
    assert not record_outranks(near, PriorityRecord("C", "S", 1.0, 3.0))


def test_heap_of_records_pops_best_record_first():
    records = [
        PriorityRecord("far", "S", 3.0, 1.0),
        PriorityRecord("worst", "S", 5.0, 0.0),
        PriorityRecord("near", "S", 1.0, 3.0),
    ]
    heap = PriorityHeap.from_iterable(records, record_outranks)

    assert [heap.pop().node for _ in range(3)] == ["near", "far", "worst"]


def test_start_record_uses_explicit_sentinel():
    record = start_record(None, 7.0)

    assert record.node is None
    assert record.parent is NO_PARENT
    assert not record.has_parent
    assert record.cost_from_start == 0.0
    assert record.total_cost == 7.0


def test_records_are_immutable():
    record = PriorityRecord("A", "S", 1.0, 0.0)
    with pytest.raises(FrozenInstanceError):
        record.cost_from_start = 0.0  # type: ignore[misc]
