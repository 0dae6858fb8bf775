import numpy as np
import pytest

from pathfinder.domains.grid import Grid, GridPos


@pytest.fixture
def grid():
    return Grid([[1, 2, 3], [4, 5, 6]])


class TestGrid:
    def test_shape_and_get(self, grid):
        assert grid.shape == (2, 3)
        assert grid.get(1, 2) == 6

    def test_set(self, grid):
        grid.set(0, 0, 9)
        assert grid.get(0, 0) == 9

    def test_in_bounds(self, grid):
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(1, 2)
        assert not grid.in_bounds(2, 0)
        assert not grid.in_bounds(0, 3)
        assert not grid.in_bounds(-1, 0)

    def test_cursor_at(self, grid):
        assert grid.cursor_at(1, 1).value == 5
        assert grid.cursor_at(5, 5) is None

    def test_cursors_row_major(self, grid):
        assert [c.value for c in grid.cursors()] == [1, 2, 3, 4, 5, 6]

    def test_str(self, grid):
        assert str(grid) == "123\n456"

    def test_rejects_non_2d(self):
        with pytest.raises(ValueError):
            Grid([1, 2, 3])

    def test_wraps_numpy_array(self):
        arr = np.zeros((3, 4), dtype=np.int8)
        assert Grid(arr).shape == (3, 4)


class TestGridPos:
    def test_moves(self, grid):
        c = grid.cursor_at(0, 1)
        assert c.right().value == 3
        assert c.left().value == 1
        assert c.down().value == 5
        assert c.up() is None
        assert c.move_by(1, 1).coord == (1, 2)

    def test_iter_by(self, grid):
        c = grid.cursor_at(0, 0)
        assert [p.value for p in c.iter_by(0, 1)] == [2, 3]
        assert [p.value for p in c.iter_by(1, 1)] == [5]
        assert list(grid.cursor_at(1, 2).iter_by(0, 1)) == []

    def test_equality_ignores_grid(self, grid):
        other = Grid([[0, 0, 0], [0, 0, 0]])
        assert grid.cursor_at(1, 1) == other.cursor_at(1, 1)
        assert hash(grid.cursor_at(1, 1)) == hash(GridPos(1, 1, other))

    def test_neighbors_corner_and_middle(self):
        g = Grid(np.zeros((3, 3), dtype=int))
        assert set(p.coord for p in g.cursor_at(0, 0).neighbors()) == {(0, 1), (1, 0)}
        assert len(g.cursor_at(1, 1).neighbors()) == 4

    def test_estimate_is_manhattan(self, grid):
        assert grid.cursor_at(0, 0).estimate_cost_to(grid.cursor_at(1, 2)) == 3
