import pytest

from kanban_layout.core.width_config import (
    DEFAULT_WIDTH_CONFIG,
    LayoutOptions,
    WidthCalculationConfig,
)
from kanban_layout.runtime.config import load_layout_options

ENV_VARS = (
    "KANBAN_MIN_COLUMN_WIDTH",
    "KANBAN_MAX_COLUMN_WIDTH",
    "KANBAN_COLUMN_GAP",
    "KANBAN_BOARD_PADDING",
    "KANBAN_RECALC_DELAY_MS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_env() -> None:
    assert load_layout_options() == LayoutOptions()


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("KANBAN_MIN_COLUMN_WIDTH", "240")
    monkeypatch.setenv("KANBAN_MAX_COLUMN_WIDTH", "480")
    monkeypatch.setenv("KANBAN_COLUMN_GAP", "12")
    monkeypatch.setenv("KANBAN_BOARD_PADDING", "32")
    monkeypatch.setenv("KANBAN_RECALC_DELAY_MS", "75")

    options = load_layout_options()
    assert options == LayoutOptions(
        min_column_width=240, max_column_width=480, gap=12, padding=32, recalc_delay_ms=75
    )


def test_bad_values_fall_back(monkeypatch, caplog) -> None:
    monkeypatch.setenv("KANBAN_COLUMN_GAP", "wide")
    monkeypatch.setenv("KANBAN_RECALC_DELAY_MS", "-5")

    options = load_layout_options()
    assert options.gap == 24
    assert options.recalc_delay_ms == 0
    assert "KANBAN_COLUMN_GAP" in caplog.text


def test_inverted_bounds_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("KANBAN_MIN_COLUMN_WIDTH", "500")
    monkeypatch.setenv("KANBAN_MAX_COLUMN_WIDTH", "300")

    options = load_layout_options()
    assert (options.min_column_width, options.max_column_width) == (280, 400)


def test_width_config_follows_options() -> None:
    config = LayoutOptions(min_column_width=250, max_column_width=450).width_config()

    assert (config.min_width, config.max_width) == (250, 450)
    assert config.title_weight == DEFAULT_WIDTH_CONFIG.title_weight


def test_default_width_config_values() -> None:
    config = DEFAULT_WIDTH_CONFIG
    assert (config.min_width, config.max_width) == (280, 400)
    assert config.description_weight == 0.5
    assert config.max_complexity_bonus == 100


def test_invalid_width_config() -> None:
    with pytest.raises(ValueError):
        WidthCalculationConfig(min_width=500, max_width=400)
    with pytest.raises(ValueError):
        WidthCalculationConfig(tag_weight=-1)


def test_width_config_is_immutable() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_WIDTH_CONFIG.min_width = 10  # type: ignore[misc]
