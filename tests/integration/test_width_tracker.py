from __future__ import annotations

from gi.repository import GLib

from kanban_layout.core.enums import LayoutMode
from kanban_layout.core.width_config import LayoutOptions
from kanban_layout.mock import create_mock_columns
from kanban_layout.ui_gtk.state import ColumnWidthTracker


def _run_loop(duration_ms: int) -> None:
    loop = GLib.MainLoop()
    GLib.timeout_add(duration_ms, loop.quit)
    loop.run()


def _tracker() -> ColumnWidthTracker:
    return ColumnWidthTracker(LayoutOptions(recalc_delay_ms=10))


def test_changes_are_coalesced_into_one_recompute() -> None:
    tracker = _tracker()
    received: list[bool] = []
    tracker.connect("layout-changed", lambda _tracker: received.append(True))

    tracker.set_viewport(1920, 1080)
    tracker.set_columns(create_mock_columns())
    tracker.set_viewport(1910, 1080)
    assert tracker.pending

    _run_loop(150)

    assert len(received) == 1
    assert tracker.layout is not None
    assert tracker.layout.mode is LayoutMode.DESKTOP
    assert set(tracker.layout.dimensions) == {c.column_id for c in create_mock_columns()}


def test_recalculate_is_synchronous() -> None:
    tracker = _tracker()
    received: list[bool] = []
    tracker.connect("layout-changed", lambda _tracker: received.append(True))

    tracker.set_columns(create_mock_columns())
    tracker.set_viewport(375, 667)
    layout = tracker.recalculate()

    assert received == [True]
    assert not tracker.pending
    assert layout.mode is LayoutMode.MOBILE_SCROLL
    assert tracker.viewport.is_mobile


def test_landscape_viewport_feeds_the_classifier() -> None:
    tracker = _tracker()
    tracker.set_columns(create_mock_columns())
    tracker.set_viewport(1000, 700)

    assert tracker.recalculate().responsive.columns_per_row == 3


def test_unchanged_viewport_does_not_reschedule() -> None:
    tracker = _tracker()
    tracker.set_viewport(1280, 800)
    tracker.recalculate()

    tracker.set_viewport(1280, 800)
    assert not tracker.pending


def test_style_properties() -> None:
    tracker = _tracker()
    assert tracker.style_properties() == {}

    tracker.set_columns(create_mock_columns())
    tracker.set_viewport(375, 667)
    tracker.recalculate()

    styles = tracker.style_properties()
    assert styles["backlog"]["--kanban-column-calculated-width"] == "327px"


def test_cancel_pending() -> None:
    tracker = _tracker()
    tracker.set_columns(create_mock_columns())
    tracker.cancel_pending()
    _run_loop(60)

    assert tracker.layout is None
