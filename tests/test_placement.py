import pytest
from floorgen.level.placement import (
    find_position,
    grow_clump,
    in_interior,
    min_center_distance,
    not_center,
    place_many,
    place_single,
    sample_positions
)
from floorgen.level.seed_manager import SeededRandom
from floorgen.tiles.tile_types import TileType


def make_grid(tile=TileType.FLOOR, size=30):
    return [[tile for _ in range(size)] for _ in range(size)]


def snapshot(grid):
    return [list(row) for row in grid]


class TestPredicates:
    """Test the acceptance predicate helpers."""

    def test_not_center(self):
        """Only the center tile is rejected"""
        keep = not_center(make_grid())

        assert keep(15, 15) is False
        assert keep(14, 15) is True

    def test_min_center_distance_is_chebyshev(self):
        """Distance is max(|dx|, |dy|)"""
        far = min_center_distance(make_grid(), 5)

        assert far(20, 15) is True
        assert far(19, 19) is False
        assert far(10, 19) is True

    def test_in_interior(self):
        grid = make_grid()
        assert in_interior(grid, 2, 2)
        assert in_interior(grid, 27, 27)
        assert not in_interior(grid, 1, 15)
        assert not in_interior(grid, 15, 28)


class TestFindPosition:
    """Test the bounded-retry primitive."""

    def test_returns_interior_floor(self):
        """Accepted coordinate is FLOOR and outside the border"""
        grid = make_grid()
        pos = find_position(grid, SeededRandom(1))

        assert pos is not None
        assert in_interior(grid, *pos)

    def test_gives_up_on_solid_grid(self):
        """No FLOOR anywhere means None after the budget"""
        assert find_position(make_grid(TileType.WALL), SeededRandom(1)) is None

    def test_predicate_respected(self):
        grid = make_grid()
        pos = find_position(grid, SeededRandom(9), min_center_distance(grid, 8), attempts=500)

        assert pos is not None
        assert max(abs(pos[0] - 15), abs(pos[1] - 15)) >= 8

    def test_deterministic(self):
        """Same seed gives the same coordinate"""
        grid = make_grid()
        assert find_position(grid, SeededRandom(77)) == find_position(grid, SeededRandom(77))


class TestSamplePositions:
    """Test multi-point sampling under one budget."""

    def test_grid_unchanged(self):
        """Sampling never writes to the grid"""
        grid = make_grid()
        before = snapshot(grid)

        sample_positions(grid, SeededRandom(2), 5)

        assert grid == before

    def test_count_and_spacing(self):
        """Predicate sees accepted points and keeps them apart"""
        grid = make_grid()

        def spaced(x, y, accepted):
            return all(abs(x - px) >= 2 or abs(y - py) >= 2 for px, py in accepted)

        points = sample_positions(grid, SeededRandom(4), 6, spaced, attempts=200)

        assert len(points) <= 6
        for i, (ax, ay) in enumerate(points):
            for bx, by in points[i + 1:]:
                assert abs(ax - bx) >= 2 or abs(ay - by) >= 2

    def test_budget_exhaustion_truncates(self):
        """Impossible requests come back short, not as errors"""
        points = sample_positions(make_grid(TileType.WALL), SeededRandom(4), 3)
        assert points == []


class TestPlaceMany:
    """Test tile writing placement."""

    def test_place_single_writes_tile(self):
        grid = make_grid()
        pos = place_single(grid, SeededRandom(8), TileType.CRATE)

        assert pos is not None
        assert grid[pos[1]][pos[0]] == TileType.CRATE

    def test_place_many_only_on_floor(self):
        """Every placed tile was FLOOR before and is the new tile after"""
        grid = make_grid()
        placed = place_many(grid, SeededRandom(8), TileType.ROCK, 10, not_center(grid))

        assert 0 < len(placed) <= 10
        assert len(set(placed)) == len(placed)
        for x, y in placed:
            assert grid[y][x] == TileType.ROCK
        assert grid[15][15] == TileType.FLOOR


class TestGrowClump:
    """Test organic clump growth."""

    def test_exact_budget_on_open_grid(self):
        """An open floor always absorbs the whole budget"""
        grid = make_grid()
        placed = grow_clump(grid, SeededRandom(21), TileType.GRASS, 12, 3, 6)

        assert len(placed) == 12
        assert len(set(placed)) == 12
        for x, y in placed:
            assert grid[y][x] == TileType.GRASS
            assert in_interior(grid, x, y)

    def test_center_never_converted(self):
        for seed in range(10):
            grid = make_grid()
            grow_clump(grid, SeededRandom(seed), TileType.SPIKE, 30, 4, 8)
            assert grid[15][15] == TileType.FLOOR

    def test_clumps_are_connected(self):
        """A single clump is 4-connected"""
        grid = make_grid()
        placed = grow_clump(grid, SeededRandom(13), TileType.PIT, 5, 5, 5)
        cells = set(placed)

        seen = {placed[0]}
        stack = [placed[0]]
        while stack:
            x, y = stack.pop()
            for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
                if (nx, ny) in cells and (nx, ny) not in seen:
                    seen.add((nx, ny))
                    stack.append((nx, ny))

        assert seen == cells

    def test_zero_budget(self):
        grid = make_grid()
        assert grow_clump(grid, SeededRandom(1), TileType.ROCK, 0, 2, 4) == []

    def test_only_floor_converted(self):
        """Non-FLOOR tiles are left alone"""
        grid = make_grid(TileType.WALL)
        grid[10][10] = TileType.FLOOR

        placed = grow_clump(grid, SeededRandom(1), TileType.ROCK, 5, 2, 4, attempts=2000)

        assert placed == [(10, 10)]
        assert sum(row.count(TileType.WALL) for row in grid) == 30 * 30 - 1
