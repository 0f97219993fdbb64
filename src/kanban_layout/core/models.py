"""Read-only board snapshot consumed by the layout engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


@dataclass(frozen=True, slots=True)
class Card:
    card_id: str
    title: str
    description: str | None = None
    assignee: str | None = None
    tags: tuple[str, ...] | None = None
    due_date: str | None = None  # ISO date string as stored by the board

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Card":
        tags = data.get("tags")
        return cls(
            card_id=str(data.get("id", "")),
            title=str(data.get("title") or ""),
            description=_str_or_none(data.get("description")),
            assignee=_str_or_none(data.get("assignee")),
            tags=tuple(str(t) for t in tags) if isinstance(tags, list) else None,
            due_date=_str_or_none(data.get("due_date")),
        )


@dataclass(frozen=True, slots=True)
class Column:
    column_id: str
    title: str
    cards: tuple[Card, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Column":
        raw_cards = data.get("cards") or []
        return cls(
            column_id=str(data.get("id", "")),
            title=str(data.get("title") or ""),
            cards=tuple(Card.from_dict(card) for card in raw_cards),
        )
