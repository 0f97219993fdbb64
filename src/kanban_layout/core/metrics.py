"""Content analysis for a single board column.

The analyzer always scores content with ``ANALYZER_WEIGHTS`` (the default
width configuration) and takes no config argument. Content richness is
board-wide; only the mapping from metrics to pixels is configurable (see :func:`kanban_layout.core.widths.calculate_optimal_width`).
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import Card, Column
from .width_config import DEFAULT_WIDTH_CONFIG, WidthCalculationConfig

ANALYZER_WEIGHTS: WidthCalculationConfig = DEFAULT_WIDTH_CONFIG

LONG_DESCRIPTION_CHARS = 100
MULTIPLE_TAGS_COUNT = 2

# Fraction of cards that must match for a column-level flag to be set.
LONG_DESCRIPTIONS_RATIO = 0.3
MULTIPLE_TAGS_RATIO = 0.2
ASSIGNEES_RATIO = 0.5
DUE_DATES_RATIO = 0.3


@dataclass(frozen=True, slots=True)
class ContentMetrics:
    title_length: int
    card_count: int
    avg_card_title_length: float
    complexity_score: float
    has_long_descriptions: bool = False
    has_multiple_tags: bool = False
    has_assignees: bool = False
    has_due_dates: bool = False


def _description_length(card: Card) -> int:
    return len(card.description) if card.description else 0


def _tag_count(card: Card) -> int:
    return len(card.tags) if card.tags else 0


def analyze_column_content(column: Column) -> ContentMetrics:
    """Reduce *column* to a :class:`ContentMetrics` record."""
    title_length = len(column.title)
    card_count = len(column.cards)

    if card_count == 0:
        return ContentMetrics(
            title_length=title_length,
            card_count=0,
            avg_card_title_length=0,
            complexity_score=0,
        )

    weights = ANALYZER_WEIGHTS
    avg_card_title_length = sum(len(card.title) for card in column.cards) / card_count

    complexity_score = 0.0
    long_descriptions = 0
    multiple_tags = 0
    assignees = 0
    due_dates = 0

    for card in column.cards:
        complexity_score += len(card.title) * weights.title_weight

        desc_length = _description_length(card)
        complexity_score += desc_length * weights.description_weight
        if desc_length > LONG_DESCRIPTION_CHARS:
            long_descriptions += 1

        tag_count = _tag_count(card)
        complexity_score += tag_count * weights.tag_weight
        if tag_count > MULTIPLE_TAGS_COUNT:
            multiple_tags += 1

        if card.assignee:
            complexity_score += weights.assignee_weight
            assignees += 1

        if card.due_date:
            complexity_score += weights.due_date_weight
            due_dates += 1

    return ContentMetrics(
        title_length=title_length,
        card_count=card_count,
        avg_card_title_length=avg_card_title_length,
        complexity_score=complexity_score,
        has_long_descriptions=long_descriptions > card_count * LONG_DESCRIPTIONS_RATIO,
        has_multiple_tags=multiple_tags > card_count * MULTIPLE_TAGS_RATIO,
        has_assignees=assignees > card_count * ASSIGNEES_RATIO,
        has_due_dates=due_dates > card_count * DUE_DATES_RATIO,
    )
