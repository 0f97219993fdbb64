from __future__ import annotations

import logging
from typing import Iterable

from gi.repository import GObject

from kanban_layout.core.dimensions import BoardLayout, column_style_properties, compute_board_layout
from kanban_layout.core.models import Column
from kanban_layout.core.viewport import ViewportInfo, classify_viewport
from kanban_layout.core.width_config import LayoutOptions
from kanban_layout.ui_gtk.debounce import create_debounced_width_calculator

logger = logging.getLogger(__name__)

# Viewport assumed until the rendering layer reports a real one.
DEFAULT_VIEWPORT = (1200, 800)


class ColumnWidthTracker(GObject.Object):
    """Keeps the board layout in step with viewport and content changes.

    Changes are coalesced through a debounced trigger; ``layout-changed``
    fires after each recompute.
    """

    __gsignals__ = {
        "layout-changed": (GObject.SignalFlags.RUN_LAST, None, ()),
    }

    def __init__(self, options: LayoutOptions | None = None) -> None:
        super().__init__()
        self._options = options or LayoutOptions()
        self._columns: tuple[Column, ...] = ()
        self._viewport = classify_viewport(*DEFAULT_VIEWPORT)
        self._layout: BoardLayout | None = None
        self._trigger = create_debounced_width_calculator(
            self.recalculate, self._options.recalc_delay_ms
        )

    @property
    def layout(self) -> BoardLayout | None:
        return self._layout

    @property
    def viewport(self) -> ViewportInfo:
        return self._viewport

    @property
    def pending(self) -> bool:
        return self._trigger.pending

    def set_columns(self, columns: Iterable[Column]) -> None:
        self._columns = tuple(columns)
        self._trigger()

    def set_viewport(self, width: float, height: float) -> None:
        unchanged = (width, height) == (self._viewport.width, self._viewport.height)
        if unchanged and self._layout is not None:
            return
        self._viewport = classify_viewport(width, height)
        self._trigger()

    def cancel_pending(self) -> None:
        self._trigger.cancel()

    def recalculate(self) -> BoardLayout:
        """Recompute immediately and emit ``layout-changed``."""
        self._trigger.cancel()
        viewport = self._viewport
        self._layout = compute_board_layout(
            self._columns,
            viewport.width,
            options=self._options,
            is_mobile=viewport.is_mobile,
            is_landscape=viewport.is_landscape,
        )
        logger.debug(
            "recalculated %s columns for %sx%s (%s)",
            len(self._columns),
            viewport.width,
            viewport.height,
            self._layout.mode,
        )
        self.emit("layout-changed")
        return self._layout

    def style_properties(self) -> dict[str, dict[str, str]]:
        if self._layout is None:
            return {}
        return column_style_properties(self._layout.dimensions)
