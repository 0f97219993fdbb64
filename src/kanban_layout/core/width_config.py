from __future__ import annotations

from dataclasses import dataclass, fields, replace


@dataclass(frozen=True, slots=True)
class WidthCalculationConfig:
    """Weights and bounds used to turn content metrics into pixel widths."""

    min_width: int = 280
    max_width: int = 400
    base_width_per_char: float = 8
    title_weight: float = 2
    description_weight: float = 0.5
    tag_weight: float = 10
    assignee_weight: float = 20
    due_date_weight: float = 15
    card_count_bonus: float = 5
    max_complexity_bonus: float = 100

    def __post_init__(self) -> None:
        if self.min_width > self.max_width:
            raise ValueError("min_width must be <= max_width")
        for field in fields(self):
            if field.name in ("min_width", "max_width"):
                continue
            if getattr(self, field.name) < 0:
                raise ValueError(f"{field.name} must be >= 0")


DEFAULT_WIDTH_CONFIG = WidthCalculationConfig()


@dataclass(frozen=True, slots=True)
class LayoutOptions:
    min_column_width: int = 280
    max_column_width: int = 400
    gap: int = 24
    padding: int = 48  # 24px on each side
    recalc_delay_ms: int = 150

    def width_config(
        self, base: WidthCalculationConfig = DEFAULT_WIDTH_CONFIG
    ) -> WidthCalculationConfig:
        """Return *base* with its bounds replaced by these options' bounds."""
        return replace(base, min_width=self.min_column_width, max_width=self.max_column_width)
