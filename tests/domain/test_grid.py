"""Tests for maze_chase.domain.grid module."""

from __future__ import annotations

import pytest

from maze_chase.domain.grid import (
    DIRECTION_ORDER,
    Cell,
    CellKind,
    Direction,
    Grid,
    Marker,
    MarkerKind,
    is_generated_wall,
)


class TestGridGenerate:
    @pytest.mark.parametrize("width,height", [(15, 10), (9, 7), (5, 3), (13, 13)])
    def test_border_and_pillar_rule(self, width: int, height: int) -> None:
        grid = Grid.generate(width, height)
        for x in range(width):
            for y in range(height):
                border = x in (0, width - 1) or y in (0, height - 1)
                pillar = x % 4 == 0 and y % 3 == 0
                assert grid.is_wall(x, y) == (border or pillar), (x, y)

    def test_every_open_cell_starts_with_collectible(self) -> None:
        grid = Grid.generate(15, 10)
        for x in range(15):
            for y in range(10):
                assert grid.has_collectible(x, y) == (not grid.is_wall(x, y))

    def test_default_board_has_98_open_cells(self) -> None:
        grid = Grid.generate(15, 10)
        # 13 * 8 interior cells minus 6 pillars at x in {4, 8, 12}, y in {3, 6}
        assert grid.collectible_count() == 98
        assert len(grid.walkable_cells()) == 98

    def test_no_markers_after_generation(self) -> None:
        assert Grid.generate(15, 10).markers == {}

    def test_is_generated_wall_pillars(self) -> None:
        assert is_generated_wall(4, 3, 15, 10)
        assert is_generated_wall(8, 6, 15, 10)
        assert not is_generated_wall(4, 4, 15, 10)
        assert not is_generated_wall(5, 3, 15, 10)


class TestWalkability:
    def test_out_of_bounds_is_not_walkable(self) -> None:
        grid = Grid.generate(15, 10)
        assert not grid.is_walkable(-1, 1)
        assert not grid.is_walkable(1, -1)
        assert not grid.is_walkable(15, 1)
        assert not grid.is_walkable(1, 10)

    def test_walls_are_not_walkable(self) -> None:
        grid = Grid.generate(15, 10)
        assert not grid.is_walkable(0, 0)
        assert not grid.is_walkable(4, 3)

    def test_markers_do_not_block_walkability(self) -> None:
        grid = Grid.generate(15, 10)
        grid.place_marker(MarkerKind.ADVERSARY, 2, 2, agent_id=1)
        assert grid.is_walkable(2, 2)


class TestMarkers:
    def test_place_marker_keeps_collectible_flag(self) -> None:
        grid = Grid.generate(15, 10)
        grid.place_marker(MarkerKind.PLAYER, 2, 2)
        assert grid.cell_at(2, 2) == Cell(CellKind.PLAYER)
        assert grid.has_collectible(2, 2)

    def test_clear_marker_restores_collectible(self) -> None:
        grid = Grid.generate(15, 10)
        grid.place_marker(MarkerKind.ADVERSARY, 2, 2, agent_id=3)
        assert grid.cell_at(2, 2) == Cell(CellKind.ADVERSARY, 3)
        grid.clear_marker(2, 2)
        assert grid.cell_at(2, 2) == Cell(CellKind.COLLECTIBLE)

    def test_clear_marker_restores_empty_after_consumption(self) -> None:
        grid = Grid.generate(15, 10)
        grid.place_marker(MarkerKind.PLAYER, 2, 2)
        grid.consume_if_collectible(2, 2)
        grid.clear_marker(2, 2)
        assert grid.cell_at(2, 2) == Cell(CellKind.EMPTY)

    def test_adversary_at(self) -> None:
        grid = Grid.generate(15, 10)
        grid.place_marker(MarkerKind.ADVERSARY, 3, 2, agent_id=2)
        grid.place_marker(MarkerKind.PLAYER, 1, 1)
        assert grid.adversary_at(3, 2) == 2
        assert grid.adversary_at(1, 1) is None
        assert grid.adversary_at(5, 5) is None

    def test_marker_at(self) -> None:
        grid = Grid.generate(15, 10)
        grid.place_marker(MarkerKind.ADVERSARY, 3, 2, agent_id=2)
        grid.place_marker(MarkerKind.PLAYER, 1, 1)
        assert grid.marker_at(3, 2) == Marker(MarkerKind.ADVERSARY, 2)
        assert grid.marker_at(1, 1) == Marker(MarkerKind.PLAYER)
        assert grid.marker_at(5, 5) is None

    def test_place_marker_on_wall_raises(self) -> None:
        grid = Grid.generate(15, 10)
        with pytest.raises(ValueError):
            grid.place_marker(MarkerKind.PLAYER, 0, 0)

    def test_adversary_marker_requires_id(self) -> None:
        grid = Grid.generate(15, 10)
        with pytest.raises(ValueError, match="agent_id"):
            grid.place_marker(MarkerKind.ADVERSARY, 1, 1)

    def test_clear_marker_on_unoccupied_cell_is_noop(self) -> None:
        grid = Grid.generate(15, 10)
        grid.clear_marker(1, 1)
        assert grid.cell_at(1, 1) == Cell(CellKind.COLLECTIBLE)


class TestConsume:
    def test_consume_is_idempotent(self) -> None:
        grid = Grid.generate(15, 10)
        before = grid.collectible_count()
        assert grid.consume_if_collectible(1, 1) is True
        assert grid.consume_if_collectible(1, 1) is False
        assert grid.collectible_count() == before - 1

    def test_consume_on_wall_returns_false(self) -> None:
        grid = Grid.generate(15, 10)
        assert grid.consume_if_collectible(0, 0) is False

    def test_remove_collectible(self) -> None:
        grid = Grid.generate(15, 10)
        grid.remove_collectible(5, 5)
        assert not grid.has_collectible(5, 5)
        assert grid.consume_if_collectible(5, 5) is False


class TestBounds:
    @pytest.mark.parametrize("x,y", [(-1, -1), (-1, 1), (1, -1), (15, 1), (1, 10)])
    def test_cell_lookups_reject_out_of_bounds(self, x: int, y: int) -> None:
        grid = Grid.generate(15, 10)
        for lookup in (
            grid.cell_at,
            grid.is_wall,
            grid.has_collectible,
            grid.consume_if_collectible,
            grid.remove_collectible,
        ):
            with pytest.raises(ValueError, match="outside the 15x10 grid"):
                lookup(x, y)

    def test_negative_index_does_not_wrap(self) -> None:
        grid = Grid.generate(15, 10)
        before = grid.collectible_count()
        with pytest.raises(ValueError):
            grid.consume_if_collectible(-2, -2)
        assert grid.collectible_count() == before
        assert grid.has_collectible(13, 8)


class TestDirection:
    def test_order_is_right_left_down_up(self) -> None:
        assert [d.label for d in DIRECTION_ORDER] == ["Right", "Left", "Down", "Up"]

    def test_deltas(self) -> None:
        assert (Direction.RIGHT.dx, Direction.RIGHT.dy) == (1, 0)
        assert (Direction.LEFT.dx, Direction.LEFT.dy) == (-1, 0)
        assert (Direction.DOWN.dx, Direction.DOWN.dy) == (0, 1)
        assert (Direction.UP.dx, Direction.UP.dy) == (0, -1)
