from npuzzle.engine.heuristics.heuristics import Heuristic, HeuristicKind

__all__ = ["Heuristic", "HeuristicKind"]
