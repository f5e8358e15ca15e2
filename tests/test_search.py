import numpy as np
import pytest

from gridpath import (
    DIRECTIONS,
    Found,
    Grid,
    InternalInconsistency,
    InvalidInput,
    NotFound,
    SearchCursor,
    StepEvent,
    search,
)
from gridpath.search import manhattan, reconstruct_path


def _assert_valid_path(grid, result, start, end):
    path = result.path
    assert path[0] == start
    assert path[-1] == end
    for a, b in zip(path, path[1:]):
        assert manhattan(a, b) == 1
    for cell in path:
        assert not grid.is_blocked(cell)
    assert set(path[1:]) <= set(result.visit_order)


def test_direction_order_is_down_up_right_left():
    assert DIRECTIONS == ((1, 0), (-1, 0), (0, 1), (0, -1))


def test_open_3x3_corner_to_corner():
    result = search(Grid(3, 3), (0, 0), (2, 2))

    assert isinstance(result, Found)
    assert result.found
    assert result.path == ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2))
    assert result.visit_order == ((1, 0), (0, 1), (2, 0), (1, 1), (0, 2), (2, 1), (1, 2), (2, 2))


def test_blocked_middle_row_is_not_found():
    grid = Grid(3, 3)
    for c in range(3):
        grid.set_blocked((1, c))

    result = search(grid, (0, 0), (2, 0))

    assert isinstance(result, NotFound)
    assert not result.found
    assert result.path == ()
    assert result.visit_order == ((0, 1), (0, 2))


def test_enclosed_end_never_visits_inside_the_wall():
    grid = Grid(5, 5)
    for cell in [(1, 2), (3, 2), (2, 1), (2, 3)]:
        grid.set_blocked(cell)

    result = search(grid, (0, 0), (2, 2))

    assert not result.found
    assert (2, 2) not in result.visit_order
    # every open cell except the start and the enclosed end
    assert len(result.visit_order) == 25 - 4 - 2


@pytest.mark.parametrize(
    "shape, start, end",
    [
        ((1, 2), (0, 0), (0, 1)),
        ((1, 10), (0, 9), (0, 0)),
        ((7, 4), (6, 3), (0, 0)),
        ((20, 20), (3, 17), (15, 2)),
    ],
)
def test_open_grid_path_is_manhattan(shape, start, end):
    grid = Grid(*shape)
    result = search(grid, start, end)

    assert len(result.path) == manhattan(start, end) + 1
    _assert_valid_path(grid, result, start, end)


def test_detour_around_wall():
    grid = Grid.from_array(
        [
            [0, 0, 0, 0],
            [1, 1, 1, 0],
            [0, 0, 0, 0],
        ]
    )
    result = search(grid, (2, 0), (0, 0))

    assert len(result.path) == 9
    _assert_valid_path(grid, result, (2, 0), (0, 0))


@pytest.mark.parametrize("seed", range(8))
def test_random_grids_are_consistent(seed):
    rng = np.random.default_rng(seed)
    walls = rng.random((12, 15)) < 0.3
    walls[0, 0] = False
    walls[11, 14] = False
    grid = Grid.from_array(walls)

    result = search(grid, (0, 0), (11, 14))

    assert len(set(result.visit_order)) == len(result.visit_order)
    assert (0, 0) not in result.visit_order
    for cell in result.visit_order:
        assert not grid.is_blocked(cell)
    if result.found:
        _assert_valid_path(grid, result, (0, 0), (11, 14))
        assert len(result.path) >= manhattan((0, 0), (11, 14)) + 1


def test_search_is_idempotent():
    grid = Grid.from_array(np.eye(6, dtype=bool)[::-1])
    grid.set_blocked((0, 5), False)
    first = search(grid, (0, 0), (5, 5))
    second = search(grid, (0, 0), (5, 5))

    assert first == second


def test_cursor_steps_one_dequeue_at_a_time():
    cursor = SearchCursor(Grid(3, 3), (0, 0), (2, 2))

    assert cursor.step() == StepEvent((0, 0), ((1, 0), (0, 1)))
    assert cursor.step() == StepEvent((1, 0), ((2, 0), (1, 1)))
    assert cursor.visit_order == ((1, 0), (0, 1), (2, 0), (1, 1))
    assert not cursor.done

    events = []
    while (event := cursor.step()) is not None:
        events.append(event)

    assert events[-1] == StepEvent((2, 2), ())
    assert cursor.done
    assert cursor.reached
    assert cursor.step() is None
    assert cursor.result() == search(Grid(3, 3), (0, 0), (2, 2))


def test_cursor_result_drains_remaining_steps():
    cursor = SearchCursor(Grid(4, 4), (0, 0), (3, 3))
    cursor.step()

    assert cursor.result() == search(Grid(4, 4), (0, 0), (3, 3))


def test_cursor_ignores_walls_added_mid_search():
    grid = Grid(3, 3)
    cursor = SearchCursor(grid, (0, 0), (2, 2))
    cursor.step()
    grid.set_blocked((2, 1))
    grid.set_blocked((1, 2))

    assert cursor.run().path == ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2))


@pytest.mark.parametrize(
    "start, end",
    [
        (None, (1, 1)),
        ((0, 0), None),
        ((0, 0), (0, 0)),
        ((3, 0), (0, 0)),
        ((0, 0), (0, -1)),
        ((1, 1), (0, 0)),
        ((0, 0), (1, 1)),
    ],
)
def test_invalid_endpoints_are_rejected(start, end):
    grid = Grid(3, 3)
    grid.set_blocked((1, 1))

    with pytest.raises(InvalidInput):
        search(grid, start, end)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        search(Grid(2, 2), (0, 0), (0, 0))


def test_reconstruct_path_missing_link():
    with pytest.raises(InternalInconsistency):
        reconstruct_path({(1, 0): (0, 0)}, (0, 0), (2, 0))


def test_reconstruct_path_cycle():
    with pytest.raises(InternalInconsistency):
        reconstruct_path({(1, 0): (2, 0), (2, 0): (1, 0)}, (0, 0), (2, 0))


def test_reconstruct_path_walks_back_to_start():
    predecessors = {(0, 1): (0, 0), (0, 2): (0, 1), (1, 0): (0, 0)}

    assert reconstruct_path(predecessors, (0, 0), (0, 2)) == ((0, 0), (0, 1), (0, 2))


def test_list_endpoints_are_normalised():
    result = search(Grid(3, 3), [0, 0], [2, 2])

    assert result == search(Grid(3, 3), (0, 0), (2, 2))
    assert result.path[0] == (0, 0)
    assert all(type(cell) is tuple for cell in result.path)


def test_blocked_list_endpoint_is_invalid():
    grid = Grid(3, 3)
    grid.set_blocked((0, 0))

    with pytest.raises(InvalidInput, match="wall"):
        search(grid, [0, 0], [2, 2])


@pytest.mark.parametrize("start", [[0], (0, 0, 0), "x", 7])
def test_malformed_endpoint_is_invalid(start):
    with pytest.raises(InvalidInput):
        search(Grid(3, 3), start, (2, 2))


def test_same_cell_as_list_and_tuple_is_invalid():
    with pytest.raises(InvalidInput, match="same cell"):
        search(Grid(3, 3), [1, 1], (1, 1))
