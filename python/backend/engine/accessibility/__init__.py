from backend.engine.accessibility.explorer import AccessibilityExplorer

__all__ = ["AccessibilityExplorer"]
