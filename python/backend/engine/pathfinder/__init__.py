from backend.engine.pathfinder.finder import PathFinder

__all__ = ["PathFinder"]
