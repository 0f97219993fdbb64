"""Coalesce bursts of recalculation requests on the GLib main loop."""

from __future__ import annotations

from typing import Callable

from gi.repository import GLib

DEFAULT_DELAY_MS = 150


class DebouncedTrigger:
    """Callable that runs *callback* once, *delay_ms* after the last call.

    Each call removes the pending GLib timeout (if any) and schedules a new
    one, so only the last call of a burst fires. Owns exactly one timeout
    source; use one trigger per recalculation context.
    """

    def __init__(self, callback: Callable[[], object], delay_ms: int = DEFAULT_DELAY_MS) -> None:
        self._callback = callback
        self._delay_ms = max(0, int(delay_ms))
        self._source_id: int | None = None

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def pending(self) -> bool:
        return self._source_id is not None

    def __call__(self) -> None:
        self.cancel()
        self._source_id = GLib.timeout_add(self._delay_ms, self._fire)

    def cancel(self) -> bool:
        """Drop the pending call. Returns True if one was pending."""
        if self._source_id is None:
            return False
        GLib.source_remove(self._source_id)
        self._source_id = None
        return True

    def flush(self) -> bool:
        """Run the pending call now instead of waiting for the timeout."""
        if not self.cancel():
            return False
        self._callback()
        return True

    def _fire(self) -> bool:
        self._source_id = None
        self._callback()
        return GLib.SOURCE_REMOVE


def create_debounced_width_calculator(
    callback: Callable[[], object], delay_ms: int = DEFAULT_DELAY_MS
) -> DebouncedTrigger:
    return DebouncedTrigger(callback, delay_ms)
