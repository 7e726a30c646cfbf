from npuzzle.engine.gamestate.state import State

__all__ = ["State"]
