import pytest

from simulation import CapacityExceeded, Request, RequestQueue


def make_request(request_id: int) -> Request:
    return Request(request_id=request_id, start_floor=request_id, target_floor=0)


def test_enqueue_past_capacity_raises():
    queue = RequestQueue(capacity=2)
    queue.enqueue(make_request(0))
    queue.enqueue(make_request(1))

    assert queue.is_full
    with pytest.raises(CapacityExceeded) as excinfo:
        queue.enqueue(make_request(2))
    assert excinfo.value.capacity == 2
    assert len(queue) == 2


def test_drain_matching_removes_from_middle_and_keeps_order():
    queue = RequestQueue()
    for i in range(5):
        queue.enqueue(make_request(i))

    matched = queue.drain_matching(lambda r: "odd" if r.request_id % 2 else None)

    assert [(r.request_id, tag) for r, tag in matched] == [(1, "odd"), (3, "odd")]
    assert [r.request_id for r in queue] == [0, 2, 4]


def test_drain_matching_with_no_match_leaves_queue_untouched():
    queue = RequestQueue()
    queue.enqueue(make_request(0))
    queue.enqueue(make_request(1))

    assert queue.drain_matching(lambda r: None) == []
    assert [r.request_id for r in queue] == [0, 1]
