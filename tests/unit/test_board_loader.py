import json
from pathlib import Path

import pytest

from kanban_layout.core.dimensions import compute_board_layout
from kanban_layout.runtime.board_loader import BoardFormatError, columns_from_data, load_board


def test_load_board_object(tmp_path: Path) -> None:
    path = tmp_path / "board.json"
    path.write_text(
        json.dumps(
            {
                "columns": [
                    {"id": "todo", "title": "To Do", "cards": [{"id": "c1", "title": "One"}]},
                    {"id": "done", "title": "Done"},
                ]
            }
        ),
        encoding="utf-8",
    )

    columns = load_board(path)
    assert [c.column_id for c in columns] == ["todo", "done"]
    assert columns[0].cards[0].title == "One"
    assert columns[1].cards == ()


def test_bare_list_is_accepted() -> None:
    columns = columns_from_data([{"id": "a", "title": "A", "cards": []}])
    assert columns[0].title == "A"


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "board.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(BoardFormatError):
        load_board(path)


@pytest.mark.parametrize(
    "data",
    [
        {"columns": "todo"},
        {"lanes": []},
        ["todo"],
        [{"id": "a", "title": "A", "cards": "none"}],
        [{"id": "a", "title": "A", "cards": ["card"]}],
        [{"title": "A"}],
        [{"id": "", "title": "A"}],
        [{"id": None, "title": "A"}],
        [{"id": "a", "title": "A"}, {"id": "a", "title": "Again"}],
    ],
)
def test_malformed_boards(data) -> None:
    with pytest.raises(BoardFormatError):
        columns_from_data(data)


def test_board_format_error_is_a_value_error() -> None:
    assert issubclass(BoardFormatError, ValueError)


def test_numeric_ids_are_accepted_as_strings() -> None:
    columns = columns_from_data([{"id": 1, "title": "A"}, {"id": 2, "title": "B"}])
    assert [c.column_id for c in columns] == ["1", "2"]


def test_non_string_card_fields_do_not_reach_the_engine() -> None:
    columns = columns_from_data(
        [
            {
                "id": "a",
                "title": "A",
                "cards": [{"id": "c", "title": "t", "description": 5, "assignee": 7}],
            }
        ]
    )
    board = compute_board_layout(columns, 1280)

    assert columns[0].cards[0].description is None
    assert list(board.dimensions) == ["a"]
