from simulation import Building, Elevator, Request, RequestQueue


def make_building(elevators, num_floors=10):
    return Building(num_floors=num_floors, elevators=elevators, queue=RequestQueue(10))


def test_dispatch_hands_target_to_elevator_and_removes_request():
    building = make_building([Elevator(0, current_floor=2), Elevator(1, current_floor=8)])
    building.queue.enqueue(Request(request_id=0, start_floor=7, target_floor=1))

    matched = building.dispatch()

    elevator = building.elevators[1]
    assert [(r.request_id, e.elevator_id) for r, e in matched] == [(0, 1)]
    assert elevator.target_floor == 1
    assert not elevator.idle
    assert len(building.queue) == 0


def test_unmatched_requests_stay_queued_in_order():
    building = make_building([Elevator(0)])
    for i, start in enumerate([3, 6, 9]):
        building.queue.enqueue(Request(request_id=i, start_floor=start, target_floor=0))

    building.dispatch()

    assert [r.request_id for r in building.queue] == [1, 2]


def test_elevator_reaches_request_target_and_returns_to_idle():
    building = make_building([Elevator(0)])
    building.queue.enqueue(Request(request_id=0, start_floor=5, target_floor=9))
    building.dispatch()
    elevator = building.elevators[0]

    floors = []
    for _ in range(9):
        building.move_elevators()
        floors.append(elevator.current_floor)

    assert floors == list(range(1, 10))
    assert not elevator.idle
    building.move_elevators()
    assert elevator.idle
    assert elevator.target_floor is None
    assert elevator.current_floor == 9


def test_broken_elevator_does_not_move():
    elevator = Elevator(0, current_floor=4, target_floor=8, idle=False, broken=True, repair_intervals=5)
    building = make_building([elevator])

    building.move_elevators()

    assert elevator.current_floor == 4


def test_counts_and_ground_check():
    building = make_building(
        [
            Elevator(0),
            Elevator(1, current_floor=3, broken=True, repair_intervals=10),
            Elevator(2, current_floor=5, target_floor=0, idle=False),
        ]
    )

    assert building.idle_count == 1
    assert building.broken_count == 1
    assert building.any_broken()
    assert not building.all_at_ground()
