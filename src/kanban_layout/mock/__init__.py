"""Mock board data for testing and development."""

from .data import MOCK_BOARD, create_mock_columns, create_uniform_column

__all__ = ["MOCK_BOARD", "create_mock_columns", "create_uniform_column"]
