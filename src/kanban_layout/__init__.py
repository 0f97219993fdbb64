"""Adaptive column-width and responsive-layout engine for kanban boards."""

from .core import (
    DEFAULT_WIDTH_CONFIG,
    BoardLayout,
    Card,
    Column,
    ColumnDimensions,
    ContentMetrics,
    LayoutMode,
    LayoutOptions,
    ResponsiveLayout,
    WidthCalculationConfig,
    analyze_column_content,
    calculate_optimal_width,
    compute_board_layout,
    distribute_width_proportionally,
    get_responsive_layout,
)

__all__ = [
    "BoardLayout",
    "Card",
    "Column",
    "ColumnDimensions",
    "ContentMetrics",
    "DEFAULT_WIDTH_CONFIG",
    "LayoutMode",
    "LayoutOptions",
    "ResponsiveLayout",
    "WidthCalculationConfig",
    "analyze_column_content",
    "calculate_optimal_width",
    "compute_board_layout",
    "distribute_width_proportionally",
    "get_responsive_layout",
]
