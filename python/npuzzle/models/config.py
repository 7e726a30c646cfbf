"""Search settings shared by the CLI and the solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from npuzzle.engine.heuristics import HeuristicKind

if TYPE_CHECKING:
    from npuzzle.engine.gamesolver.solver import Solver
    from npuzzle.models.board import Board


class SearchStrategy(StrEnum):
    """How the frontier is ordered."""

    ASTAR = "astar"  # g + h
    GREEDY = "greedy"  # h
    UNIFORM = "uniform"  # g


@dataclass
class SearchConfig:
    """Everything chosen once, before a search starts."""

    heuristic: HeuristicKind = HeuristicKind.MANHATTAN
    strategy: SearchStrategy = SearchStrategy.ASTAR
    max_steps: int | None = None
    time_limit: float | None = None

    def __post_init__(self) -> None:
        self.heuristic = HeuristicKind(self.heuristic)
        self.strategy = SearchStrategy(self.strategy)
        if self.max_steps is not None and self.max_steps < 1:
            raise ValueError(f"max_steps must be positive, got {self.max_steps}.")
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {self.time_limit}.")

    def build_solver(self, goal: Board) -> Solver:
        from npuzzle.engine.gamesolver.solver import Solver

        return Solver(
            goal,
            heuristic=self.heuristic,
            strategy=self.strategy,
            max_steps=self.max_steps,
            time_limit=self.time_limit,
        )
