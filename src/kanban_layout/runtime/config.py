from __future__ import annotations

import logging
import os

from kanban_layout.core.width_config import LayoutOptions

logger = logging.getLogger(__name__)


def load_layout_options() -> LayoutOptions:
    """Build :class:`LayoutOptions` from ``KANBAN_*`` environment variables."""
    defaults = LayoutOptions()
    min_width = _env_int("KANBAN_MIN_COLUMN_WIDTH", defaults.min_column_width)
    max_width = _env_int("KANBAN_MAX_COLUMN_WIDTH", defaults.max_column_width)
    if min_width > max_width:
        logger.warning(
            "ignoring column bounds min=%s max=%s (min exceeds max)", min_width, max_width
        )
        min_width, max_width = defaults.min_column_width, defaults.max_column_width
    return LayoutOptions(
        min_column_width=min_width,
        max_column_width=max_width,
        gap=_env_int("KANBAN_COLUMN_GAP", defaults.gap),
        padding=_env_int("KANBAN_BOARD_PADDING", defaults.padding),
        recalc_delay_ms=max(0, _env_int("KANBAN_RECALC_DELAY_MS", defaults.recalc_delay_ms)),
    )


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %s", name, value, default)
        return default
