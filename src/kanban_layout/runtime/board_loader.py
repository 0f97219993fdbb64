"""Load board snapshots exported by the board data-access layer.

Accepted shapes::

    {"columns": [{"id": "todo", "title": "To Do", "cards": [...]}, ...]}
    [{"id": "todo", "title": "To Do", "cards": [...]}, ...]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from kanban_layout.core.models import Column

logger = logging.getLogger(__name__)


class BoardFormatError(ValueError):
    """Raised when a board snapshot cannot be turned into columns."""


def columns_from_data(data: Any) -> list[Column]:
    if isinstance(data, dict):
        data = data.get("columns")
    if not isinstance(data, list):
        raise BoardFormatError("expected a list of columns or an object with 'columns'")

    columns: list[Column] = []
    seen: set[str] = set()
    for index, raw in enumerate(data):
        if not isinstance(raw, dict):
            raise BoardFormatError(f"column #{index} is not an object")
        column_id = raw.get("id")
        if column_id is None or str(column_id) == "":
            raise BoardFormatError(f"column #{index} has no id")
        if str(column_id) in seen:
            raise BoardFormatError(f"column #{index} repeats id {column_id!r}")
        seen.add(str(column_id))
        cards = raw.get("cards") or []
        if not isinstance(cards, list) or not all(isinstance(c, dict) for c in cards):
            raise BoardFormatError(f"column #{index} has malformed cards")
        columns.append(Column.from_dict(raw))
    return columns


def load_board(path: str | Path) -> list[Column]:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise BoardFormatError(f"{path}: invalid JSON ({exc})") from exc
    columns = columns_from_data(data)
    logger.debug("loaded %s columns from %s", len(columns), path)
    return columns
