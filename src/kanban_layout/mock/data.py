"""Mock board data for demos and testing."""

from __future__ import annotations

from kanban_layout.core.models import Card, Column

# (column id, column title, [(card title, description, assignee, tags, due date)])
MockCard = tuple[str, str | None, str | None, list[str], str | None]

MOCK_BOARD: list[tuple[str, str, list[MockCard]]] = [
    (
        "backlog",
        "Backlog",
        [
            ("Audit onboarding emails", None, None, [], None),
            ("Collect feedback from beta users", None, None, ["research"], None),
            ("Draft pricing page copy", None, None, [], None),
        ],
    ),
    (
        "todo",
        "To Do",
        [
            (
                "Calendar sync for shared boards",
                "Shared boards should show due dates from every member's calendar. "
                "Needs a per-board opt-in and a conflict view for overlapping events.",
                "maria",
                ["calendar", "sharing", "backend"],
                "2026-11-02",
            ),
            ("Dark mode polish", None, "sam", ["ui"], "2026-10-30"),
            ("Keyboard shortcuts help overlay", None, None, ["ui", "a11y", "docs"], None),
        ],
    ),
    (
        "in-progress",
        "In Progress",
        [
            (
                "AI assistant summarises notes",
                "Summaries should respect the note language and never exceed a paragraph. "
                "Streaming responses are preferred so the panel does not feel stuck.",
                "li",
                ["ai", "notes", "backend"],
                "2026-10-25",
            ),
            ("Realtime card moves", None, "li", ["realtime"], "2026-10-21"),
        ],
    ),
    ("done", "Done", []),
]


def create_mock_columns() -> list[Column]:
    """Build :class:`Column` snapshots from :data:`MOCK_BOARD`."""
    columns: list[Column] = []
    for column_id, title, cards in MOCK_BOARD:
        columns.append(
            Column(
                column_id=column_id,
                title=title,
                cards=tuple(
                    Card(
                        card_id=f"{column_id}-{index}",
                        title=card_title,
                        description=description,
                        assignee=assignee,
                        tags=tuple(tags) if tags else None,
                        due_date=due_date,
                    )
                    for index, (card_title, description, assignee, tags, due_date) in enumerate(
                        cards, start=1
                    )
                ),
            )
        )
    return columns


def create_uniform_column(
    column_id: str, title: str, card_count: int, card_title_length: int
) -> Column:
    """Column whose cards all have a title of *card_title_length* characters."""
    return Column(
        column_id=column_id,
        title=title,
        cards=tuple(
            Card(card_id=f"{column_id}-{i}", title="x" * card_title_length)
            for i in range(card_count)
        ),
    )
