import pytest

from cometix_tui.layout import (
    Direction,
    Length,
    Min,
    Percentage,
    Rect,
    centered_rect,
    content_layout,
    main_layout,
    split,
)


def test_inner_removes_border():
    r = Rect(2, 3, 10, 6)
    inner = r.inner()
    assert inner.x == r.x + 1
    assert inner.y == r.y + 1
    assert inner.width == r.width - 2
    assert inner.height == r.height - 2


def test_inner_never_negative():
    inner = Rect(0, 0, 1, 1).inner()
    assert (inner.width, inner.height) == (0, 0)


def test_main_layout_fixed_rows():
    area = Rect(0, 0, 80, 40)
    parts = main_layout(area)
    assert [p.height for p in parts] == [3, 3, 3, area.height - 12, 3]
    assert sum(p.height for p in parts) == area.height


def test_main_layout_contiguous():
    parts = main_layout(Rect(5, 7, 50, 30))
    for before, after in zip(parts, parts[1:]):
        assert after.y == before.y + before.height
    assert all(p.x == 5 and p.width == 50 for p in parts)


def test_content_layout_split():
    parts = content_layout(Rect(0, 0, 100, 10))
    assert [p.width for p in parts] == [30, 70]
    assert parts[1].x == parts[0].x + parts[0].width


def test_content_layout_fills_width():
    area = Rect(0, 0, 77, 10)
    parts = content_layout(area)
    assert sum(p.width for p in parts) == area.width


def test_centered_rect():
    area = Rect(0, 0, 100, 100)
    popup = centered_rect(60, 70, area)
    assert popup.width == 60
    assert popup.height == 70
    assert popup.x * 2 + popup.width == area.width


def test_split_min_takes_excess():
    area = Rect(0, 0, 20, 50)
    parts = split(area, Direction.VERTICAL, [Length(5), Min(1), Length(5)])
    assert parts[1].height == area.height - 10


def test_split_shrinks_when_too_small():
    area = Rect(0, 0, 10, 4)
    parts = split(area, Direction.VERTICAL, [Length(3), Length(3)])
    assert sum(p.height for p in parts) == area.height
    assert parts[0].height == 3


def test_split_empty_constraints():
    assert split(Rect(0, 0, 10, 10), Direction.HORIZONTAL, []) == []


def test_split_rejects_unknown_constraint():
    with pytest.raises(TypeError):
        split(Rect(0, 0, 10, 10), Direction.HORIZONTAL, [object()])


def test_percentage_constraint_alone_fills():
    area = Rect(0, 0, 50, 1)
    parts = split(area, Direction.HORIZONTAL, [Percentage(50)])
    assert parts[0].width == area.width