"""Connectivity of the walkable maze as a NetworkX graph."""

from __future__ import annotations

import networkx as nx

from maze_chase.domain.grid import DIRECTION_ORDER, Grid


def walkable_graph(grid: Grid) -> nx.Graph:
    """Graph with one node per walkable cell and edges between orthogonal neighbours."""
    g = nx.Graph()
    for x, y in grid.walkable_cells():
        g.add_node((x, y))
        for direction in DIRECTION_ORDER:
            nx_, ny_ = x + direction.dx, y + direction.dy
            if grid.is_walkable(nx_, ny_):
                g.add_edge((x, y), (nx_, ny_))
    return g


def reachable_cells(grid: Grid, start: tuple[int, int]) -> set[tuple[int, int]]:
    """Walkable cells connected to ``start``; empty if ``start`` is not walkable."""
    if not grid.is_walkable(*start):
        return set()
    return set(nx.node_connected_component(walkable_graph(grid), start))


def unreachable_collectibles(grid: Grid, start: tuple[int, int]) -> list[tuple[int, int]]:
    """Collectible cells the player can never reach from ``start``, sorted."""
    reachable = reachable_cells(grid, start)
    return sorted(
        cell
        for cell in grid.walkable_cells()
        if grid.has_collectible(*cell) and cell not in reachable
    )
