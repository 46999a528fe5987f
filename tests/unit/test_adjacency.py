"""
Unit tests for AdjacencyResolver.

Tests edge handling for every direction and mine counting.
"""
import pytest
from minesweeper import MINE, AdjacencyResolver, CellGrid, Direction, IndexOutOfRange


@pytest.fixture
def resolver() -> AdjacencyResolver:
    """Resolver over an empty 4x4 grid."""
    return AdjacencyResolver(CellGrid(4))


class TestNeighbor:
    """Test single-direction lookups."""

    def test_interior_cell_has_all_directions(
        self, resolver: AdjacencyResolver
    ) -> None:
        """Cell (1, 1) resolves every direction."""
        expected = {
            Direction.NW: 0, Direction.N: 1, Direction.NE: 2,
            Direction.W: 4, Direction.E: 6,
            Direction.SW: 8, Direction.S: 9, Direction.SE: 10,
        }
        for direction, index in expected.items():
            assert resolver.neighbor(5, direction) == index

    @pytest.mark.parametrize(
        "index,missing",
        [
            (0, {Direction.NW, Direction.N, Direction.NE, Direction.W, Direction.SW}),
            (3, {Direction.NW, Direction.N, Direction.NE, Direction.E, Direction.SE}),
            (12, {Direction.NW, Direction.W, Direction.SW, Direction.S, Direction.SE}),
            (15, {Direction.NE, Direction.E, Direction.SW, Direction.S, Direction.SE}),
        ],
    )
    def test_corners_lose_five_directions(
        self, resolver: AdjacencyResolver, index: int, missing: set
    ) -> None:
        """Corners lose exactly the directions leaving the board."""
        for direction in Direction:
            result = resolver.neighbor(index, direction)
            if direction in missing:
                assert result is None
            else:
                assert result is not None

    @pytest.mark.parametrize("index", [1, 2, 4, 7, 8, 11, 13, 14])
    def test_edges_lose_three_directions(
        self, resolver: AdjacencyResolver, index: int
    ) -> None:
        """Edge cells have five neighbors."""
        assert len(resolver.neighbors(index)) == 5

    @pytest.mark.parametrize("index", [5, 6, 9, 10])
    def test_interior_keeps_eight(
        self, resolver: AdjacencyResolver, index: int
    ) -> None:
        """Interior cells have eight neighbors."""
        assert len(resolver.neighbors(index)) == 8

    def test_right_edge_does_not_wrap(self, resolver: AdjacencyResolver) -> None:
        """East of the last column is not the next row."""
        assert resolver.neighbor(7, Direction.E) is None
        assert resolver.neighbor(8, Direction.W) is None

    def test_out_of_range_index(self, resolver: AdjacencyResolver) -> None:
        """Index off the board is rejected."""
        with pytest.raises(IndexOutOfRange):
            resolver.neighbor(16, Direction.N)


class TestCountMines:
    """Test adjacent mine counting."""

    def test_counts_surrounding_mines(self) -> None:
        """Center of a fully mined ring sees eight mines."""
        grid = CellGrid(3)
        for index in range(9):
            if index != 4:
                grid.set_content(index, MINE)
        resolver = AdjacencyResolver(grid)
        assert resolver.count_mines_around(4) == 8

    def test_corner_count(self) -> None:
        """Corner only sees its three neighbors."""
        grid = CellGrid(3)
        grid.set_content(1, MINE)
        grid.set_content(4, MINE)
        grid.set_content(8, MINE)
        resolver = AdjacencyResolver(grid)
        assert resolver.count_mines_around(0) == 2
        assert resolver.count_mines_around(2) == 2

    def test_no_mines(self) -> None:
        """Empty grid counts zero everywhere."""
        resolver = AdjacencyResolver(CellGrid(3))
        assert all(resolver.count_mines_around(i) == 0 for i in range(9))
