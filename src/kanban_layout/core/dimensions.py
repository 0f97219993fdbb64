"""Board-level recompute: responsive mode plus per-column dimensions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from .enums import LayoutMode
from .models import Column
from .responsive import ResponsiveLayout, get_responsive_layout
from .width_config import LayoutOptions
from .widths import distribute_width_proportionally, optimal_widths, round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ColumnDimensions:
    min_width: int
    max_width: int
    calculated_width: int
    content_width: int  # optimal width, independent of distribution


@dataclass(frozen=True, slots=True)
class BoardLayout:
    responsive: ResponsiveLayout
    dimensions: dict[str, ColumnDimensions] = field(default_factory=dict)
    gap: int = 24

    @property
    def mode(self) -> LayoutMode:
        return self.responsive.layout

    def total_width(self) -> int:
        """Width of one rendered row, gaps included."""
        if not self.dimensions:
            return 0
        if not self.mode.is_uniform:
            widths = [d.calculated_width for d in self.dimensions.values()]
        else:
            per_row = min(len(self.dimensions), self.responsive.columns_per_row)
            widths = [d.calculated_width for d in list(self.dimensions.values())[:per_row]]
        return sum(widths) + (len(widths) - 1) * self.gap


def compute_board_layout(
    columns: Sequence[Column],
    viewport_width: float,
    *,
    options: LayoutOptions = LayoutOptions(),
    is_mobile: bool = False,
    is_landscape: bool = False,
) -> BoardLayout:
    """Classify the viewport once and size every column for it.

    Uniform modes give every column the classifier's width. Desktop sizes
    columns by content and shrinks them proportionally when the board is
    wider than the viewport.
    """
    config = options.width_config()
    responsive = get_responsive_layout(
        len(columns),
        viewport_width,
        options.min_column_width,
        options.gap,
        options.padding,
        is_mobile,
        is_landscape,
    )
    content = optimal_widths(columns, config)
    dimensions: dict[str, ColumnDimensions] = {}

    if responsive.layout in (LayoutMode.MOBILE_STACK, LayoutMode.MOBILE_SCROLL):
        width = round_half_up(responsive.column_width)
        for column in columns:
            dimensions[column.column_id] = ColumnDimensions(
                min_width=width,
                max_width=width,
                calculated_width=width,
                content_width=content[column.column_id],
            )
    elif responsive.layout is LayoutMode.TABLET_WRAP:
        width = round_half_up(responsive.column_width)
        for column in columns:
            dimensions[column.column_id] = ColumnDimensions(
                min_width=options.min_column_width,
                max_width=width,
                calculated_width=width,
                content_width=content[column.column_id],
            )
    else:
        budget = viewport_width - options.padding - max(0, len(columns) - 1) * options.gap
        distributed = distribute_width_proportionally(columns, budget, config)
        for column in columns:
            dimensions[column.column_id] = ColumnDimensions(
                min_width=config.min_width,
                max_width=config.max_width,
                calculated_width=distributed[column.column_id],
                content_width=content[column.column_id],
            )

    logger.debug(
        "layout %s for %s columns at %spx", responsive.layout, len(columns), viewport_width
    )
    return BoardLayout(responsive=responsive, dimensions=dimensions, gap=options.gap)


def column_style_properties(dimensions: dict[str, ColumnDimensions]) -> dict[str, dict[str, str]]:
    """CSS custom properties for each column, keyed by column id."""
    return {
        column_id: {
            "--kanban-column-calculated-width": f"{dims.calculated_width}px",
            "--kanban-column-min-width": f"{dims.min_width}px",
            "--kanban-column-max-width": f"{dims.max_width}px",
        }
        for column_id, dims in dimensions.items()
    }
