"""Viewport classification into breakpoints and orientation."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import Breakpoint, Orientation
from .responsive import MOBILE_BREAKPOINT, TABLET_BREAKPOINT

LARGE_DESKTOP_BREAKPOINT = 1536
ULTRA_WIDE_BREAKPOINT = 2560

# (min width, breakpoint), widest first
BREAKPOINTS: list[tuple[int, Breakpoint]] = [
    (3840, Breakpoint.UHD_PLUS),
    (ULTRA_WIDE_BREAKPOINT, Breakpoint.UHD),
    (1920, Breakpoint.XXXL),
    (LARGE_DESKTOP_BREAKPOINT, Breakpoint.XXL),
    (1280, Breakpoint.XL),
    (TABLET_BREAKPOINT, Breakpoint.LG),
    (MOBILE_BREAKPOINT, Breakpoint.MD),
    (640, Breakpoint.SM),
]


@dataclass(frozen=True, slots=True)
class ViewportInfo:
    width: float
    height: float
    breakpoint: Breakpoint
    orientation: Orientation

    @property
    def is_mobile(self) -> bool:
        return self.width < MOBILE_BREAKPOINT

    @property
    def is_tablet(self) -> bool:
        return MOBILE_BREAKPOINT <= self.width < TABLET_BREAKPOINT

    @property
    def is_desktop(self) -> bool:
        return self.width >= TABLET_BREAKPOINT

    @property
    def is_large_desktop(self) -> bool:
        return LARGE_DESKTOP_BREAKPOINT <= self.width < ULTRA_WIDE_BREAKPOINT

    @property
    def is_ultra_wide(self) -> bool:
        return self.width >= ULTRA_WIDE_BREAKPOINT

    @property
    def is_landscape(self) -> bool:
        return self.orientation is Orientation.LANDSCAPE


def breakpoint_for_width(width: float) -> Breakpoint:
    for min_width, breakpoint in BREAKPOINTS:
        if width >= min_width:
            return breakpoint
    return Breakpoint.XS


def classify_viewport(width: float, height: float) -> ViewportInfo:
    """Describe a viewport. Landscape means strictly wider than tall."""
    orientation = Orientation.LANDSCAPE if width > height else Orientation.PORTRAIT
    return ViewportInfo(
        width=width,
        height=height,
        breakpoint=breakpoint_for_width(width),
        orientation=orientation,
    )
