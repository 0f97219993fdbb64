from .width_tracker import ColumnWidthTracker

__all__ = ["ColumnWidthTracker"]
