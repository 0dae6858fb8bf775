import pytest

from pathfinder.domains.heightmap import (
    ClimbPos, HeightmapError, best_hike, load_heightmap, parse_heightmap, shortest_climb,
)


@pytest.fixture
def example(hill_text):
    return parse_heightmap(hill_text)


class TestParse:
    def test_start_end_and_heights(self, example):
        assert example.start == (0, 0)
        assert example.end == (2, 5)
        assert example.grid.shape == (5, 8)
        assert example.grid.get(0, 0) == 0
        assert example.grid.get(2, 5) == 25
        assert example.grid.get(0, 3) == ord("q") - ord("a")

    def test_invalid_char(self):
        with pytest.raises(HeightmapError, match="invalid char"):
            parse_heightmap("SaE\nab1")

    def test_missing_end(self):
        with pytest.raises(HeightmapError):
            parse_heightmap("Sab\nabc")

    def test_duplicate_start(self):
        with pytest.raises(HeightmapError, match="second start"):
            parse_heightmap("SaS\nabE")

    def test_ragged_rows(self):
        with pytest.raises(HeightmapError, match="row 1"):
            parse_heightmap("SaE\nab")

    def test_is_value_error(self):
        assert issubclass(HeightmapError, ValueError)

    def test_load_from_file(self, hill_file):
        assert load_heightmap(hill_file).end == (2, 5)


class TestClimb:
    def test_neighbors_respect_climb_limit(self):
        hm = parse_heightmap("SacE")
        # a(0) -> c(2) is too steep; back to S(0) is fine
        assert [p.coord for p in hm.pos((0, 1)).neighbors()] == [(0, 0)]

    def test_descending_is_free(self):
        hm = parse_heightmap("SzaE")
        assert (0, 2) in [p.coord for p in hm.pos((0, 1)).neighbors()]

    def test_neighbors_are_climb_positions(self, example):
        assert all(isinstance(p, ClimbPos) for p in example.pos(example.start).neighbors())

    def test_shortest_climb_example(self, example):
        assert shortest_climb(example) == 31

    def test_best_hike_example(self, example):
        assert best_hike(example) == 29

    def test_unreachable(self):
        hm = parse_heightmap("SzE")
        assert shortest_climb(hm) is None
        assert best_hike(hm) is None

    def test_lowest_cells(self):
        hm = parse_heightmap("SbE\naba")
        assert [p.coord for p in hm.lowest()] == [(0, 0), (1, 0), (1, 2)]
