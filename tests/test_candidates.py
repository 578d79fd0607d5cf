from axis_separation.candidates import CandidateLinePool
from axis_separation.model import CandidateLine


def test_generate_lists_vertical_before_horizontal():
    pool = CandidateLinePool.generate([0, 2, 4], [0, 0, 4])

    assert pool.all_candidates() == [
        CandidateLine("v", 1.0, 0),
        CandidateLine("v", 3.0, 1),
        CandidateLine("h", 0.0, 2),
        CandidateLine("h", 2.0, 3),
    ]
    assert pool.total == 4
    assert len(pool) == 4


def test_midpoints_are_floats():
    pool = CandidateLinePool.generate([1, 2], [7, 10])

    coords = [line.coord for line in pool.live_candidates()]
    assert coords == [1.5, 8.5]
    assert all(isinstance(value, float) for value in coords)


def test_fewer_than_two_points_generate_nothing():
    assert CandidateLinePool.generate([], []).total == 0
    assert CandidateLinePool.generate([5], [5]).total == 0


def test_consume_keeps_enumeration_order():
    pool = CandidateLinePool.generate([0, 1, 2], [0, 1, 2])
    lines = pool.all_candidates()

    pool.consume(lines[1])
    pool.consume(lines[1])

    assert list(pool.live_candidates()) == [lines[0], lines[2], lines[3]]
    assert not pool.is_live(lines[1])
    assert len(pool) == 3
    assert pool.total == 4


def test_live_candidates_restart_on_every_call():
    pool = CandidateLinePool.generate([0, 1], [0, 1])

    first = list(pool.live_candidates())
    second = list(pool.live_candidates())

    assert first == second
    assert len(first) == 2
