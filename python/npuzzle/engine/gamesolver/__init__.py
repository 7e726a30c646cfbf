from npuzzle.engine.gamesolver.path import moves_from_path, reconstruct_path, replay
from npuzzle.engine.gamesolver.solvability import count_inversions, is_solvable
from npuzzle.engine.gamesolver.solver import SearchResult, SearchStatus, Solver

__all__ = [
    "SearchResult",
    "SearchStatus",
    "Solver",
    "count_inversions",
    "is_solvable",
    "moves_from_path",
    "reconstruct_path",
    "replay",
]
