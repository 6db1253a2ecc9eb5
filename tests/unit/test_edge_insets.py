import pytest

from boxborder.edge_insets import EdgeInsets, EdgeInsetsDirectional


def test_edge_insets_totals():
    insets = EdgeInsets.from_ltrb(1, 2, 3, 4)
    assert insets.horizontal == 4
    assert insets.vertical == 6
    assert EdgeInsets.all(2) == EdgeInsets(2, 2, 2, 2)


def test_edge_insets_arithmetic():
    assert EdgeInsets(1, 1, 1, 1) + EdgeInsets(1, 2, 3, 4) == EdgeInsets(2, 3, 4, 5)
    assert EdgeInsets(1, 2, 3, 4) * 2 == EdgeInsets(2, 4, 6, 8)
    assert EdgeInsets.ZERO == EdgeInsets()


def test_directional_insets_totals_and_arithmetic():
    insets = EdgeInsetsDirectional.from_steb(1, 2, 3, 4)
    assert insets.horizontal == 4
    assert insets.vertical == 6
    assert insets + EdgeInsetsDirectional.ZERO == insets
    assert insets * 0.5 == EdgeInsetsDirectional(0.5, 1, 1.5, 2)


def test_insets_of_different_kinds_do_not_mix():
    assert EdgeInsets(1, 2, 3, 4) != EdgeInsetsDirectional(1, 2, 3, 4)
    with pytest.raises(TypeError):
        EdgeInsets() + EdgeInsetsDirectional()
