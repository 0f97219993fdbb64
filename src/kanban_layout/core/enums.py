"""Enums for layout modes, breakpoints and orientation."""

from enum import StrEnum


class LayoutMode(StrEnum):
    """Discrete responsive strategies for rendering the board.

    MOBILE_STACK  - one column per row, full available width
    MOBILE_SCROLL - one column per page, horizontal scrolling
    TABLET_WRAP   - a few uniform columns per row, wrapping
    DESKTOP       - per-column widths sized by content
    """

    MOBILE_STACK = "mobile-stack"
    MOBILE_SCROLL = "mobile-scroll"
    TABLET_WRAP = "tablet-wrap"
    DESKTOP = "desktop"

    @property
    def is_uniform(self) -> bool:
        """True when every column is rendered at the same width."""
        return self is not LayoutMode.DESKTOP


class Breakpoint(StrEnum):
    """Viewport width breakpoints, smallest first."""

    XS = "xs"
    SM = "sm"  # >= 640
    MD = "md"  # >= 768
    LG = "lg"  # >= 1024
    XL = "xl"  # >= 1280
    XXL = "2xl"  # >= 1536
    XXXL = "3xl"  # >= 1920
    UHD = "4xl"  # >= 2560
    UHD_PLUS = "5xl"  # >= 3840


class Orientation(StrEnum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"
