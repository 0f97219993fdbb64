from __future__ import annotations

import argparse
import importlib.metadata
import traceback
from typing import Sequence


def _version() -> str:
    try:
        return importlib.metadata.version("kanban-layout")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="kanban-layout",
        description="Kanban board column-width and responsive-layout engine",
    )
    parser.add_argument("--version", action="version", version=_version())

    sub = parser.add_subparsers(dest="command")

    from kanban_layout.cli import register_subcommands

    register_subcommands(sub)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    from kanban_layout.cli import run_command

    try:
        return run_command(args)
    except Exception as exc:  # noqa: BLE001
        if getattr(args, "debug", False):
            print(f"[debug] error: {exc}")
            traceback.print_exc()
        else:
            print(f"error: {exc}")
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
