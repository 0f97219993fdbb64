"""GLib/GObject integration: debounced recalculation and layout tracking."""

from .debounce import DebouncedTrigger, create_debounced_width_calculator

__all__ = ["DebouncedTrigger", "create_debounced_width_calculator"]
