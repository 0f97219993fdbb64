from .dimensions import BoardLayout, ColumnDimensions, column_style_properties, compute_board_layout
from .enums import Breakpoint, LayoutMode, Orientation
from .metrics import ANALYZER_WEIGHTS, ContentMetrics, analyze_column_content
from .models import Card, Column
from .responsive import ResponsiveLayout, get_responsive_layout
from .viewport import ViewportInfo, classify_viewport
from .width_config import DEFAULT_WIDTH_CONFIG, LayoutOptions, WidthCalculationConfig
from .widths import calculate_optimal_width, distribute_width_proportionally, round_half_up

__all__ = [
    "ANALYZER_WEIGHTS",
    "BoardLayout",
    "Breakpoint",
    "Card",
    "Column",
    "ColumnDimensions",
    "ContentMetrics",
    "DEFAULT_WIDTH_CONFIG",
    "LayoutMode",
    "LayoutOptions",
    "Orientation",
    "ResponsiveLayout",
    "ViewportInfo",
    "WidthCalculationConfig",
    "analyze_column_content",
    "calculate_optimal_width",
    "classify_viewport",
    "column_style_properties",
    "compute_board_layout",
    "distribute_width_proportionally",
    "get_responsive_layout",
    "round_half_up",
]
