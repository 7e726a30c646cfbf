"""Best-first sliding puzzle solver."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from enum import StrEnum
from time import perf_counter

from npuzzle.engine.gamesolver.path import moves_from_path, reconstruct_path
from npuzzle.engine.gamesolver.solvability import is_solvable
from npuzzle.engine.gamestate import State
from npuzzle.engine.heuristics import Heuristic, HeuristicKind
from npuzzle.models.board import OFFSETS, Board, Direction
from npuzzle.models.config import SearchStrategy
from npuzzle.models.errors import SearchExhausted, UnsolvableError

logger = logging.getLogger(__name__)


class SearchStatus(StrEnum):
    READY = "ready"
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    ABORTED = "aborted"


@dataclass
class SearchResult:
    """Outcome of one ``Solver.search`` call.

    ``path`` runs from the initial board to the goal and is empty unless the
    search was solved.
    """

    status: SearchStatus
    path: list[Board] = field(default_factory=list)
    total_generated: int = 0
    max_open_size: int = 0
    expanded: int = 0
    elapsed: float = 0.0

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def moves(self) -> int:
        return max(len(self.path) - 1, 0)

    @property
    def directions(self) -> list[Direction]:
        return moves_from_path(self.path)


class Solver:
    """Searches from a board to a fixed goal.

    The frontier is a heap of ``(priority, insertion order, state)``.  A
    cheaper path to a queued board replaces it in ``open_index`` and pushes a
    new heap entry; the superseded entry stays in the heap and is skipped
    when popped.  Boards are never reopened once closed.
    """

    def __init__(
        self,
        goal: Board,
        heuristic: HeuristicKind | str = HeuristicKind.MANHATTAN,
        strategy: SearchStrategy | str = SearchStrategy.ASTAR,
        max_steps: int | None = None,
        time_limit: float | None = None,
    ) -> None:
        self.goal = goal
        self.heuristic = Heuristic(heuristic, goal)
        self.strategy = SearchStrategy(strategy)
        self.max_steps = max_steps
        self.time_limit = time_limit
        self.status = SearchStatus.READY

    # -- public API -----------------------------------------------------------

    def solve(self, board: Board) -> SearchResult:
        """Check solvability, then search.

        Raises ``UnsolvableError`` before any search if the parity test fails.
        """
        if not is_solvable(board, self.goal):
            raise UnsolvableError(
                f"Board {list(board.tiles)} cannot reach the "
                f"{self.goal.size}×{self.goal.size} goal."
            )
        return self.search(board)

    def hint(self, board: Board) -> Direction | None:
        """Return the first move of a solution, or ``None`` if solved / unsolvable.

        ``None`` is also returned when a budget aborts the search.
        """
        if board == self.goal:
            return None

        try:
            result = self.solve(board)
        except UnsolvableError:
            return None

        return result.directions[0] if result.solved else None

    def successors(self, state: State) -> list[State]:
        """Return the states one blank slide away from *state*.

        Directions are tried in the fixed order north, south, west, east.
        """
        board = state.board
        n = board.size
        br, bc = board.blank_pos
        blank = br * n + bc
        children: list[State] = []
        for direction in Direction:
            dr, dc = OFFSETS[direction]
            r, c = br + dr, bc + dc
            if not (0 <= r < n and 0 <= c < n):
                continue
            child = board.swap(blank, r * n + c)
            children.append(
                State(
                    child,
                    cost=state.cost + 1,
                    heuristic=self.heuristic(child),
                    parent=state,
                )
            )
        return children

    def search(self, initial: Board | State) -> SearchResult:
        """Run the search loop to completion.

        Returns a solved or aborted ``SearchResult``.  Raises
        ``SearchExhausted`` if the frontier empties, which only happens for a
        board that skipped the solvability check or a broken engine.
        """
        board = initial.board if isinstance(initial, State) else initial
        if board.size != self.goal.size:
            raise ValueError(
                f"Board is {board.size}×{board.size} but the goal is "
                f"{self.goal.size}×{self.goal.size}."
            )

        self.status = SearchStatus.RUNNING
        start = perf_counter()
        logger.debug(
            "Starting %s search with %s heuristic on %s",
            self.strategy.value, self.heuristic.kind.value, list(board.tiles),
        )

        root = State(board, cost=0, heuristic=self.heuristic(board))
        counter = itertools.count()
        frontier: list[tuple[int, int, State]] = [
            (self._priority(root), next(counter), root)
        ]
        open_index: dict[Board, State] = {root.board: root}
        closed: set[Board] = set()
        generated = 1  # the root is admitted like any successor
        max_open = 1
        expanded = 0

        while frontier:
            _, _, state = heapq.heappop(frontier)
            if open_index.get(state.board) is not state:
                continue  # stale: superseded or already closed

            if state.board == self.goal:
                self.status = SearchStatus.SOLVED
                path = reconstruct_path(state)
                logger.info(
                    "Solved in %d moves: %d expanded, %d generated, "
                    "max open %d",
                    len(path) - 1, expanded, generated, max_open,
                )
                return SearchResult(
                    status=self.status,
                    path=path,
                    total_generated=generated,
                    max_open_size=max_open,
                    expanded=expanded,
                    elapsed=perf_counter() - start,
                )

            if self._over_budget(expanded, start):
                self.status = SearchStatus.ABORTED
                logger.warning(
                    "Search aborted after %d expansions (%.2fs)",
                    expanded, perf_counter() - start,
                )
                return SearchResult(
                    status=self.status,
                    total_generated=generated,
                    max_open_size=max_open,
                    expanded=expanded,
                    elapsed=perf_counter() - start,
                )

            del open_index[state.board]
            closed.add(state.board)
            expanded += 1

            for child in self.successors(state):
                if child.board in closed:
                    continue
                known = open_index.get(child.board)
                if known is not None and known.cost <= child.cost:
                    continue
                open_index[child.board] = child
                heapq.heappush(
                    frontier, (self._priority(child), next(counter), child)
                )
                generated += 1
            max_open = max(max_open, len(open_index))

        self.status = SearchStatus.EXHAUSTED
        result = SearchResult(
            status=self.status,
            total_generated=generated,
            max_open_size=max_open,
            expanded=expanded,
            elapsed=perf_counter() - start,
        )
        logger.error(
            "Frontier exhausted after %d expansions without reaching the goal",
            expanded,
        )
        raise SearchExhausted(result)

    # -- helpers --------------------------------------------------------------

    def _priority(self, state: State) -> int:
        if self.strategy is SearchStrategy.GREEDY:
            return state.heuristic
        if self.strategy is SearchStrategy.UNIFORM:
            return state.cost
        return state.f

    def _over_budget(self, expanded: int, start: float) -> bool:
        if self.max_steps is not None and expanded >= self.max_steps:
            return True
        return (
            self.time_limit is not None
            and perf_counter() - start >= self.time_limit
        )
