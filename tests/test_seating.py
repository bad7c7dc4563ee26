import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosolve.seating import ExamRoom, max_dist_to_closest


def test_single_person_at_left_end():
    seats = [1] + [0] * 5
    assert max_dist_to_closest(seats) == len(seats) - 1


def test_single_person_at_right_end():
    seats = [0, 0, 0, 1]
    assert max_dist_to_closest(seats) == seats.index(1)


def test_single_person_in_middle():
    seats = [0, 0, 1, 0, 0, 0, 0]
    assert max_dist_to_closest(seats) == len(seats) - 1 - seats.index(1)


def test_gap_between_people():
    assert max_dist_to_closest([1, 0, 0, 0, 1, 0, 1]) == 2


def test_no_one_seated_is_an_error():
    with pytest.raises(ValueError):
        max_dist_to_closest([0, 0, 0])


def _room_with(seats):
    room = ExamRoom(len(seats))
    for _ in seats:
        room.seat()
    for index, seat in enumerate(seats):
        if not seat:
            room.leave(index)
    return room


@given(
    st.lists(st.sampled_from([0, 1]), min_size=2, max_size=30).filter(
        lambda s: 0 in s and 1 in s
    )
)
def test_exam_room_reaches_the_best_distance(seats):
    room = _room_with(seats)
    chosen = room.seat()
    assert seats[chosen] == 0
    nearest = min(abs(chosen - i) for i, s in enumerate(seats) if s)
    assert nearest == max_dist_to_closest(seats)


def test_exam_room_example():
    room = ExamRoom(10)
    assert [room.seat() for _ in range(4)] == [0, 9, 4, 2]
    room.leave(4)
    assert room.seat() == 5


def test_room_fills_every_seat_then_refuses():
    room = ExamRoom(7)
    assert sorted(room.seat() for _ in range(7)) == list(range(7))
    with pytest.raises(RuntimeError):
        room.seat()


def test_leaving_frees_the_seat():
    room = ExamRoom(3)
    taken = [room.seat() for _ in range(3)]
    room.leave(taken[-1])
    assert room.seat() == taken[-1]


def test_room_needs_a_seat():
    with pytest.raises(ValueError):
        ExamRoom(0)