import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosolve.geometry import max_points, skyline, smallest_range


def test_all_points_on_a_diagonal():
    points = [[1, 1], [2, 2], [3, 3]]
    assert max_points(points) == len(points)


def test_line_among_other_points():
    line = [(i, 3 * i - 2) for i in range(6)]
    assert max_points(line + [(0, 5), (1, 7)]) == len(line)


def test_vertical_line():
    column = [(2, y) for y in range(5)]
    assert max_points(column + [(0, 0)]) == len(column)


def test_repeated_point():
    points = [(1, 1)] * 4
    assert max_points(points) == len(points)


def test_no_points():
    assert max_points([]) == 0


@given(
    st.lists(
        st.tuples(st.integers(-5, 5), st.integers(-5, 5)), min_size=1, max_size=12
    )
)
def test_max_points_bounds(points):
    result = max_points(points)
    assert 1 <= result <= len(points)
    if len(points) >= 2:
        assert result >= 2


def test_single_building():
    assert skyline([[2, 9, 10]]) == [(2, 10), (9, 0)]


def test_skyline_example():
    buildings = [[2, 9, 10], [3, 7, 15], [5, 12, 12], [15, 20, 10], [19, 24, 8]]
    assert skyline(buildings) == [
        (2, 10),
        (3, 15),
        (7, 12),
        (12, 0),
        (15, 10),
        (20, 8),
        (24, 0),
    ]


_buildings = st.lists(
    st.tuples(st.integers(0, 20), st.integers(1, 10), st.integers(1, 20)).map(
        lambda t: (t[0], t[0] + t[1], t[2])
    ),
    min_size=1,
    max_size=8,
)


@given(_buildings)
def test_skyline_invariants(buildings):
    points = skyline(buildings)
    xs = [x for x, _ in points]
    heights = [h for _, h in points]
    assert xs == sorted(set(xs))
    assert all(a != b for a, b in zip(heights, heights[1:]))
    assert heights[-1] == 0
    assert xs[0] == min(left for left, _, _ in buildings)
    for x, h in points:
        covering = [bh for left, right, bh in buildings if left <= x < right]
        assert h == max(covering, default=0)


def test_invalid_building():
    with pytest.raises(ValueError):
        skyline([[3, 3, 5]])


def test_smallest_range_example():
    nums = [[4, 10, 15, 24, 26], [0, 9, 12, 20], [5, 18, 22, 30]]
    assert smallest_range(nums) == (20, 24)


def test_single_list_gives_its_first_value():
    values = [3, 5, 8]
    assert smallest_range([values]) == (values[0], values[0])


@given(
    st.lists(
        st.lists(st.integers(-50, 50), min_size=1, max_size=8).map(sorted),
        min_size=1,
        max_size=5,
    )
)
def test_smallest_range_covers_every_list(nums):
    low, high = smallest_range(nums)
    assert low <= high
    assert all(any(low <= v <= high for v in values) for values in nums)
    firsts = [values[0] for values in nums]
    assert high - low <= max(firsts) - min(firsts)


def test_smallest_range_rejects_empty_input():
    with pytest.raises(ValueError):
        smallest_range([])
    with pytest.raises(ValueError):
        smallest_range([[1, 2], []])