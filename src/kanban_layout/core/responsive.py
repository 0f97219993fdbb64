"""Responsive layout classification.

Pure classification of the current viewport into one of the
:class:`LayoutMode` values. Nothing is remembered between calls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .enums import LayoutMode

MOBILE_BREAKPOINT = 768
TABLET_BREAKPOINT = 1024

TABLET_COLUMNS_PORTRAIT = 2
TABLET_COLUMNS_LANDSCAPE = 3


@dataclass(frozen=True, slots=True)
class ResponsiveLayout:
    layout: LayoutMode
    columns_per_row: int
    column_width: float


def _max_columns_per_row(available_width: float, min_column_width: float, gap: float) -> int:
    # Largest N with N*min + (N-1)*gap <= available
    # => N <= (available + gap) / (min + gap)
    denom = min_column_width + gap
    if denom <= 0:
        return 1
    return max(0, math.floor((available_width + gap) / denom))


def _uniform_width(available_width: float, columns_per_row: int, gap: float) -> float:
    return (available_width - (columns_per_row - 1) * gap) / columns_per_row


def get_responsive_layout(
    column_count: int,
    viewport_width: float,
    min_column_width: float = 280,
    gap: float = 24,
    padding: float = 48,
    is_mobile: bool = False,
    is_landscape: bool = False,
) -> ResponsiveLayout:
    """Pick the layout mode and uniform column width for a viewport.

    *is_mobile* is accepted for callers that track it, but the mode is
    decided by *viewport_width* alone. *is_landscape* moves narrow
    viewports to horizontal scrolling and lets tablets show three columns.
    """
    available_width = viewport_width - padding

    if viewport_width < MOBILE_BREAKPOINT:
        if is_landscape or available_width >= min_column_width:
            return ResponsiveLayout(
                layout=LayoutMode.MOBILE_SCROLL,
                columns_per_row=1,
                column_width=max(min_column_width, available_width),
            )
        return ResponsiveLayout(
            layout=LayoutMode.MOBILE_STACK,
            columns_per_row=1,
            column_width=max(0, available_width),
        )

    max_columns = _max_columns_per_row(available_width, min_column_width, gap)

    if viewport_width < TABLET_BREAKPOINT:
        preferred = TABLET_COLUMNS_LANDSCAPE if is_landscape else TABLET_COLUMNS_PORTRAIT
        columns_per_row = max(1, min(column_count, max(preferred, min(max_columns, preferred))))
        return ResponsiveLayout(
            layout=LayoutMode.TABLET_WRAP,
            columns_per_row=columns_per_row,
            column_width=max(
                min_column_width, _uniform_width(available_width, columns_per_row, gap)
            ),
        )

    columns_per_row = max(1, min(column_count, max_columns))
    return ResponsiveLayout(
        layout=LayoutMode.DESKTOP,
        columns_per_row=columns_per_row,
        column_width=max(
            min_column_width, _uniform_width(available_width, columns_per_row, gap)
        ),
    )
