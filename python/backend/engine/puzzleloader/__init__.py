from backend.engine.puzzleloader.loader import PuzzleLoader

__all__ = ["PuzzleLoader"]
