from .board_loader import BoardFormatError, columns_from_data, load_board
from .config import load_layout_options

__all__ = [
    "BoardFormatError",
    "columns_from_data",
    "load_board",
    "load_layout_options",
]
