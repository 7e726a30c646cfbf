from npuzzle.engine.gameparser.parser import BoardParser

__all__ = ["BoardParser"]
