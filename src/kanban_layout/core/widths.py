"""Optimal column widths and proportional distribution.

Framework agnostic: callers pass snapshots in and get plain numbers back.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from .metrics import ContentMetrics, analyze_column_content
from .models import Column
from .width_config import DEFAULT_WIDTH_CONFIG, WidthCalculationConfig

logger = logging.getLogger(__name__)

# Fixed heuristics, not part of WidthCalculationConfig.
ABSOLUTE_MIN_WIDTH = 200
TITLE_PADDING = 100
CARD_TITLE_CHAR_WIDTH = 6
CARD_PADDING = 120
COMPLEXITY_BONUS_FACTOR = 0.1
CARD_COUNT_BONUS_THRESHOLD = 5
CARD_COUNT_BONUS_CAP = 50

LONG_DESCRIPTIONS_BONUS = 20
MULTIPLE_TAGS_BONUS = 15
ASSIGNEES_BONUS = 10
DUE_DATES_BONUS = 10


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (browser rounding)."""
    return int(math.floor(value + 0.5))


def calculate_optimal_width(
    metrics: ContentMetrics,
    config: WidthCalculationConfig = DEFAULT_WIDTH_CONFIG,
) -> int:
    """Map *metrics* to a pixel width within ``[config.min_width, config.max_width]``."""
    title_width = metrics.title_length * config.base_width_per_char + TITLE_PADDING
    width = max(ABSOLUTE_MIN_WIDTH, title_width)

    if metrics.card_count > 0:
        card_based_width = metrics.avg_card_title_length * CARD_TITLE_CHAR_WIDTH + CARD_PADDING
        width = max(width, card_based_width)

        complexity_bonus = metrics.complexity_score * COMPLEXITY_BONUS_FACTOR
        width += min(complexity_bonus, config.max_complexity_bonus)

        if metrics.card_count > CARD_COUNT_BONUS_THRESHOLD:
            extra_cards = metrics.card_count - CARD_COUNT_BONUS_THRESHOLD
            width += min(extra_cards * config.card_count_bonus, CARD_COUNT_BONUS_CAP)

        if metrics.has_long_descriptions:
            width += LONG_DESCRIPTIONS_BONUS
        if metrics.has_multiple_tags:
            width += MULTIPLE_TAGS_BONUS
        if metrics.has_assignees:
            width += ASSIGNEES_BONUS
        if metrics.has_due_dates:
            width += DUE_DATES_BONUS

    return round_half_up(max(config.min_width, min(config.max_width, width)))


def optimal_widths(
    columns: Iterable[Column],
    config: WidthCalculationConfig = DEFAULT_WIDTH_CONFIG,
) -> dict[str, int]:
    """Per-column optimal width, ignoring neighbours."""
    return {
        column.column_id: calculate_optimal_width(analyze_column_content(column), config)
        for column in columns
    }


def distribute_width_proportionally(
    columns: Iterable[Column],
    available_width: float,
    config: WidthCalculationConfig = DEFAULT_WIDTH_CONFIG,
) -> dict[str, int]:
    """Fit column widths into *available_width*.

    Columns keep their optimal width when everything fits; otherwise each
    one shrinks in proportion to its optimal width, but never below
    ``config.min_width``. The floor means the result may still overflow
    *available_width* when there are many columns.
    """
    optimal = optimal_widths(columns, config)
    if not optimal:
        return {}

    total_optimal = sum(optimal.values())
    if total_optimal <= available_width or total_optimal <= 0:
        return optimal

    logger.debug(
        "distributing %s columns: optimal total %s exceeds %s",
        len(optimal),
        total_optimal,
        available_width,
    )
    return {
        column_id: max(
            config.min_width,
            round_half_up(available_width * (width / total_optimal)),
        )
        for column_id, width in optimal.items()
    }
