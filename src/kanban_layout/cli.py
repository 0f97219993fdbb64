from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from typing import Any

from kanban_layout.core.dimensions import BoardLayout, column_style_properties, compute_board_layout
from kanban_layout.core.models import Column
from kanban_layout.core.responsive import ResponsiveLayout, get_responsive_layout
from kanban_layout.core.viewport import classify_viewport
from kanban_layout.runtime.board_loader import BoardFormatError, load_board
from kanban_layout.runtime.config import load_layout_options
from kanban_layout.runtime.logging_setup import configure_logging, export_logs

logger = logging.getLogger(__name__)


def register_subcommands(sub: argparse._SubParsersAction) -> None:
    def add_global_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--debug",
            dest="debug",
            action="store_true",
            help="Enable verbose debug logs",
        )

    def add_viewport_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--viewport-width", type=int, required=True, help="Viewport width in px")
        p.add_argument(
            "--viewport-height",
            type=int,
            default=None,
            help="Viewport height in px (derives orientation and device hints)",
        )
        p.add_argument("--mobile", action="store_true", help="Treat the device as mobile")
        p.add_argument("--landscape", action="store_true", help="Treat the device as landscape")

    plan = sub.add_parser("plan", help="Compute column widths for a board snapshot")
    add_global_args(plan)
    plan.add_argument("board", nargs="?", default=None, help="Board JSON snapshot")
    plan.add_argument("--demo", action="store_true", help="Use the built-in demo board")
    add_viewport_args(plan)
    plan.add_argument("--css", action="store_true", help="Include CSS custom properties")

    classify = sub.add_parser("classify", help="Classify a viewport into a layout mode")
    add_global_args(classify)
    add_viewport_args(classify)
    classify.add_argument("--columns", type=int, default=0, help="Number of board columns")

    export = sub.add_parser("export-logs", help="Export application logs for bug reports")
    export.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write logs to file (default: stdout)",
    )


def _hints(args: argparse.Namespace) -> tuple[bool, bool, dict[str, Any] | None]:
    """Return (is_mobile, is_landscape, viewport json) from flags and optional height."""
    if args.viewport_height is None:
        return args.mobile, args.landscape, None
    info = classify_viewport(args.viewport_width, args.viewport_height)
    viewport = {
        "width": info.width,
        "height": info.height,
        "breakpoint": str(info.breakpoint),
        "orientation": str(info.orientation),
    }
    return args.mobile or info.is_mobile, args.landscape or info.is_landscape, viewport


def _responsive_json(responsive: ResponsiveLayout) -> dict[str, Any]:
    return {
        "layout": str(responsive.layout),
        "columns_per_row": responsive.columns_per_row,
        "column_width": responsive.column_width,
    }


def _board_json(board: BoardLayout, include_css: bool) -> dict[str, Any]:
    result: dict[str, Any] = {
        **_responsive_json(board.responsive),
        "total_width": board.total_width(),
        "columns": {column_id: asdict(dims) for column_id, dims in board.dimensions.items()},
    }
    if include_css:
        result["styles"] = column_style_properties(board.dimensions)
    return result


def _load_columns(args: argparse.Namespace) -> list[Column]:
    if args.demo:
        from kanban_layout.mock import create_mock_columns

        return create_mock_columns()
    if args.board is None:
        raise BoardFormatError("a board file or --demo is required")
    return load_board(args.board)


def _run_plan(args: argparse.Namespace) -> int:
    columns = _load_columns(args)
    is_mobile, is_landscape, viewport = _hints(args)
    board = compute_board_layout(
        columns,
        args.viewport_width,
        options=load_layout_options(),
        is_mobile=is_mobile,
        is_landscape=is_landscape,
    )
    result = _board_json(board, args.css)
    if viewport is not None:
        result["viewport"] = viewport
    print(json.dumps(result, indent=2))
    return 0


def _run_classify(args: argparse.Namespace) -> int:
    options = load_layout_options()
    is_mobile, is_landscape, viewport = _hints(args)
    responsive = get_responsive_layout(
        max(0, args.columns),
        args.viewport_width,
        options.min_column_width,
        options.gap,
        options.padding,
        is_mobile,
        is_landscape,
    )
    result = _responsive_json(responsive)
    if viewport is not None:
        result["viewport"] = viewport
    print(json.dumps(result, indent=2))
    return 0


def run_command(args: argparse.Namespace) -> int:
    if args.command == "export-logs":
        export_logs(args.output)
        if args.output:
            print(f"Logs exported to {args.output}")
        return 0

    configure_logging("DEBUG" if args.debug else None)
    logger.debug("running %s", args.command)
    if args.command == "plan":
        return _run_plan(args)
    if args.command == "classify":
        return _run_classify(args)
    raise ValueError(f"unknown command: {args.command}")
