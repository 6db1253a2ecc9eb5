import pytest

from boxborder.border_side import BorderSide, BorderStyle
from boxborder.color import BLACK, Color

RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)


def test_defaults_and_none_constant():
    side = BorderSide()
    assert side.color == BLACK
    assert side.width == 1.0
    assert side.style is BorderStyle.SOLID
    assert BorderSide.NONE.is_none
    assert not side.is_none


def test_negative_width_is_rejected():
    with pytest.raises(ValueError):
        BorderSide(width=-1.0)


def test_can_merge_rules():
    assert BorderSide.can_merge(BorderSide(color=RED), BorderSide.NONE)
    assert BorderSide.can_merge(BorderSide.NONE, BorderSide(color=BLUE))
    assert BorderSide.can_merge(BorderSide(color=RED, width=1), BorderSide(color=RED, width=4))
    assert not BorderSide.can_merge(BorderSide(color=RED), BorderSide(color=BLUE))


def test_merge_adds_widths():
    merged = BorderSide.merge(BorderSide(color=RED, width=1.5), BorderSide(color=RED, width=2.0))
    assert merged == BorderSide(color=RED, width=3.5)


def test_merge_with_none_returns_other_side():
    side = BorderSide(color=RED, width=2.0)
    assert BorderSide.merge(side, BorderSide.NONE) is side
    assert BorderSide.merge(BorderSide.NONE, side) is side
    assert BorderSide.merge(BorderSide.NONE, BorderSide.NONE) == BorderSide.NONE


def test_merge_of_incompatible_sides_is_a_programming_error():
    with pytest.raises(AssertionError):
        BorderSide.merge(BorderSide(color=RED), BorderSide(color=BLUE))


def test_scale():
    side = BorderSide(color=RED, width=2.0)
    assert side.scale(1.0) == side
    assert side.scale(0.5) == BorderSide(color=RED, width=1.0)
    zero = side.scale(0.0)
    assert zero.width == 0.0
    assert zero.style is BorderStyle.NONE
    assert side.scale(-3.0).width == 0.0


def test_lerp_returns_endpoints_exactly():
    a = BorderSide(color=RED, width=1.0)
    b = BorderSide(color=BLUE, width=3.0)
    assert BorderSide.lerp(a, b, 0.0) is a
    assert BorderSide.lerp(a, b, 1.0) is b


def test_lerp_same_style():
    a = BorderSide(color=RED, width=1.0)
    b = BorderSide(color=BLUE, width=3.0)
    mid = BorderSide.lerp(a, b, 0.5)
    assert mid.width == 2.0
    assert mid.style is BorderStyle.SOLID
    assert mid.color == Color(127, 0, 127)


def test_lerp_from_none_fades_in_colour():
    b = BorderSide(color=RED, width=2.0)
    mid = BorderSide.lerp(BorderSide.NONE, b, 0.5)
    assert mid.width == 1.0
    assert mid.style is BorderStyle.SOLID
    assert mid.color == Color(127, 0, 0, 127)


def test_lerp_with_negative_width_collapses_to_none():
    a = BorderSide(color=RED, width=1.0)
    b = BorderSide(color=RED, width=2.0)
    assert BorderSide.lerp(a, b, -2.0) == BorderSide.NONE


def test_copy_with_and_str():
    side = BorderSide(color=RED, width=2.0)
    assert side.copy_with(width=4.0) == BorderSide(color=RED, width=4.0)
    assert side.copy_with(style=BorderStyle.NONE).style is BorderStyle.NONE
    assert str(side) == "BorderSide(#ff0000, 2, solid)"


def test_sides_are_hashable_values():
    assert hash(BorderSide(color=RED)) == hash(BorderSide(color=Color(255, 0, 0)))
    assert len({BorderSide(color=RED), BorderSide(color=RED), BorderSide.NONE}) == 2


def test_nan_width_is_rejected():
    with pytest.raises(ValueError):
        BorderSide(width=float("nan"))
