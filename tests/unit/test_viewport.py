import pytest

from kanban_layout.core.enums import Breakpoint, Orientation
from kanban_layout.core.viewport import breakpoint_for_width, classify_viewport


@pytest.mark.parametrize(
    ("width", "expected"),
    [
        (0, Breakpoint.XS),
        (639, Breakpoint.XS),
        (640, Breakpoint.SM),
        (767, Breakpoint.SM),
        (768, Breakpoint.MD),
        (1023, Breakpoint.MD),
        (1024, Breakpoint.LG),
        (1280, Breakpoint.XL),
        (1536, Breakpoint.XXL),
        (1920, Breakpoint.XXXL),
        (2560, Breakpoint.UHD),
        (3840, Breakpoint.UHD_PLUS),
    ],
)
def test_breakpoint_for_width(width: int, expected: Breakpoint) -> None:
    assert breakpoint_for_width(width) is expected


def test_phone_portrait() -> None:
    info = classify_viewport(375, 667)

    assert info.orientation is Orientation.PORTRAIT
    assert info.is_mobile
    assert not info.is_tablet
    assert not info.is_landscape


def test_tablet_landscape() -> None:
    info = classify_viewport(1000, 700)

    assert info.is_tablet
    assert info.is_landscape
    assert info.breakpoint is Breakpoint.MD


def test_square_viewport_is_portrait() -> None:
    assert classify_viewport(800, 800).orientation is Orientation.PORTRAIT


def test_desktop() -> None:
    info = classify_viewport(1920, 1080)
    assert info.is_desktop
    assert str(info.breakpoint) == "3xl"


@pytest.mark.parametrize(
    ("width", "large_desktop", "ultra_wide"),
    [
        (1280, False, False),
        (1536, True, False),
        (2559, True, False),
        (2560, False, True),
        (3840, False, True),
    ],
)
def test_wide_desktop_flags(width: int, large_desktop: bool, ultra_wide: bool) -> None:
    info = classify_viewport(width, 1080)

    assert info.is_desktop
    assert info.is_large_desktop is large_desktop
    assert info.is_ultra_wide is ultra_wide
