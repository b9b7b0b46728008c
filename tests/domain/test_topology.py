"""Tests for maze_chase.domain.topology module."""

from __future__ import annotations

from maze_chase.domain.grid import Grid
from maze_chase.domain.topology import (
    reachable_cells,
    unreachable_collectibles,
    walkable_graph,
)


def _isolate_corner(grid: Grid) -> None:
    """Wall off (1, 1) in a 5x5 maze."""
    for x, y in [(2, 1), (1, 2)]:
        grid.walls[x, y] = True
        grid.collectibles[x, y] = False


class TestWalkableGraph:
    def test_nodes_are_walkable_cells(self) -> None:
        grid = Grid.generate(15, 10)
        g = walkable_graph(grid)
        assert set(g.nodes) == set(grid.walkable_cells())

    def test_edges_join_orthogonal_neighbours(self) -> None:
        grid = Grid.generate(15, 10)
        g = walkable_graph(grid)
        for (ax, ay), (bx, by) in g.edges:
            assert abs(ax - bx) + abs(ay - by) == 1

    def test_pillar_has_no_node(self) -> None:
        g = walkable_graph(Grid.generate(15, 10))
        assert (4, 3) not in g


class TestReachability:
    def test_default_maze_fully_connected(self) -> None:
        grid = Grid.generate(15, 10)
        assert reachable_cells(grid, (1, 1)) == set(grid.walkable_cells())
        assert unreachable_collectibles(grid, (1, 1)) == []

    def test_wall_start_reaches_nothing(self) -> None:
        assert reachable_cells(Grid.generate(15, 10), (0, 0)) == set()

    def test_isolated_cell_reported(self) -> None:
        grid = Grid.generate(5, 5)
        _isolate_corner(grid)
        assert unreachable_collectibles(grid, (3, 3)) == [(1, 1)]
        assert reachable_cells(grid, (1, 1)) == {(1, 1)}

    def test_consumed_cells_not_reported(self) -> None:
        grid = Grid.generate(5, 5)
        _isolate_corner(grid)
        grid.consume_if_collectible(1, 1)
        assert unreachable_collectibles(grid, (3, 3)) == []
