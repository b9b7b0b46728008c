"""Simulation controller: player moves, adversary turns, and terminal conditions.

One tick is strictly sequential: the player moves first, then each adversary
in ascending id order. Collisions are checked immediately after every single
move, so the first adversary to reach the player ends the tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from random import Random

from maze_chase.config.types import GameConfig
from maze_chase.domain.adversary import Adversary, Prediction
from maze_chase.domain.grid import Grid, MarkerKind
from maze_chase.domain.topology import unreachable_collectibles
from maze_chase.simulation.snapshot import AdversaryView, GameSnapshot, capture_cells
from maze_chase.simulation.state import GameState, PlayerCommand, TickOutcome

logger = logging.getLogger(__name__)


@dataclass
class MazeChaseGame:
    """Owns the player, the adversaries, and the remaining-collectible counter."""

    grid: Grid
    player_x: int
    player_y: int
    adversaries: list[Adversary]
    remaining_collectibles: int
    rng: Random
    state: GameState = GameState.RUNNING
    tick: int = 0

    @classmethod
    def create(cls, config: GameConfig, rng: Random) -> MazeChaseGame:
        """Generate the maze and place the player and adversaries at their start cells.

        Collectibles under every starting occupant are removed before counting.
        """
        grid = Grid.generate(config.grid_width, config.grid_height)
        px, py = config.player_start
        if not grid.is_walkable(px, py):
            raise ValueError(f"player start ({px}, {py}) is not walkable")
        grid.place_marker(MarkerKind.PLAYER, px, py)
        grid.remove_collectible(px, py)

        occupied = {(px, py)}
        adversaries: list[Adversary] = []
        for index in range(config.n_adversaries):
            agent_id = index + 1
            ax, ay = config.adversary_start(index)
            if not grid.is_walkable(ax, ay):
                raise ValueError(f"adversary {agent_id} start ({ax}, {ay}) is not walkable")
            if (ax, ay) in occupied:
                raise ValueError(f"adversary {agent_id} start ({ax}, {ay}) is already occupied")
            occupied.add((ax, ay))
            grid.place_marker(MarkerKind.ADVERSARY, ax, ay, agent_id=agent_id)
            grid.remove_collectible(ax, ay)
            adversaries.append(
                Adversary(agent_id=agent_id, x=ax, y=ay, color=config.adversary_color(agent_id))
            )

        isolated = unreachable_collectibles(grid, (px, py))
        if isolated:
            logger.warning(
                "%d collectible(s) unreachable from player start: %s", len(isolated), isolated
            )

        return cls(
            grid=grid,
            player_x=px,
            player_y=py,
            adversaries=adversaries,
            remaining_collectibles=grid.collectible_count(),
            rng=rng,
        )

    @property
    def player(self) -> tuple[int, int]:
        return self.player_x, self.player_y

    def step(self, command: PlayerCommand) -> TickOutcome:
        """Advance one tick in response to ``command``."""
        if self.state.is_terminal:
            raise RuntimeError(f"game already finished ({self.state.value})")

        direction = command.direction
        if direction is None:
            self.state = GameState.QUIT
            logger.info("player quit at tick %d", self.tick)
            return TickOutcome(state=self.state)

        self.tick += 1
        moved = False
        consumed = False
        nx_, ny_ = self.player_x + direction.dx, self.player_y + direction.dy
        if self.grid.is_walkable(nx_, ny_):
            caught_by = self.grid.adversary_at(nx_, ny_)
            if caught_by is not None:
                self._lose(caught_by)
                return TickOutcome(state=self.state, caught_by=caught_by)

            consumed = self.grid.consume_if_collectible(nx_, ny_)
            if consumed:
                self.remaining_collectibles -= 1
            self.grid.clear_marker(self.player_x, self.player_y)
            self.player_x, self.player_y = nx_, ny_
            self.grid.place_marker(MarkerKind.PLAYER, nx_, ny_)
            moved = True
            logger.debug(
                "tick %d: player -> (%d, %d)%s",
                self.tick,
                nx_,
                ny_,
                " consumed" if consumed else "",
            )
        else:
            logger.debug("tick %d: player move %s blocked", self.tick, direction.label)

        if self.remaining_collectibles == 0:
            self.state = GameState.WON
            logger.info("all collectibles consumed at tick %d", self.tick)
            return TickOutcome(state=self.state, moved=moved, consumed=consumed)

        for adversary in self.adversaries:
            adversary_direction = adversary.move(self.grid, self.rng)
            logger.debug(
                "tick %d: adversary %d %s -> (%d, %d)",
                self.tick,
                adversary.agent_id,
                adversary_direction.label if adversary_direction else "stays",
                adversary.x,
                adversary.y,
            )
            if adversary.position == self.player:
                self._lose(adversary.agent_id)
                return TickOutcome(
                    state=self.state, moved=moved, consumed=consumed, caught_by=adversary.agent_id
                )

        return TickOutcome(state=self.state, moved=moved, consumed=consumed)

    def _lose(self, agent_id: int) -> None:
        self.state = GameState.LOST
        logger.info("player caught by adversary %d at tick %d", agent_id, self.tick)

    def predictions_for(self, adversary: Adversary) -> list[Prediction]:
        return adversary.predict(self.grid, self.player_x, self.player_y)

    def snapshot(self) -> GameSnapshot:
        """Capture a read-only view of the current frame."""
        return GameSnapshot(
            width=self.grid.width,
            height=self.grid.height,
            cells=capture_cells(self.grid),
            player=self.player,
            adversaries=tuple(
                AdversaryView(
                    agent_id=a.agent_id,
                    x=a.x,
                    y=a.y,
                    color=a.color,
                    predictions=tuple(self.predictions_for(a)),
                )
                for a in self.adversaries
            ),
            remaining_collectibles=self.remaining_collectibles,
            state=self.state,
            tick=self.tick,
        )
