from __future__ import annotations

from pixel_shooter.core.geometry import Box, boxes_overlap


def test_overlapping_boxes_collide() -> None:
    assert boxes_overlap(Box(0, 0, 10, 10), Box(5, 5, 10, 10))


def test_contained_box_collides() -> None:
    assert boxes_overlap(Box(0, 0, 30, 30), Box(10, 10, 2, 2))


def test_touching_edges_do_not_collide() -> None:
    bullet = Box(0, 0, 10, 12)
    # bullet right edge == enemy left edge
    assert not boxes_overlap(bullet, Box(10, 0, 24, 20))
    # bullet bottom edge == enemy top edge
    assert not boxes_overlap(bullet, Box(0, 12, 24, 20))


def test_separated_boxes_do_not_collide() -> None:
    assert not boxes_overlap(Box(0, 0, 10, 10), Box(50, 50, 10, 10))


def test_overlap_is_symmetric() -> None:
    pairs = [
        (Box(0, 0, 10, 10), Box(9.5, 9.5, 4, 4)),
        (Box(0, 0, 10, 10), Box(10, 0, 4, 4)),
        (Box(3, -5, 2, 20), Box(0, 0, 10, 10)),
    ]
    for a, b in pairs:
        assert boxes_overlap(a, b) == boxes_overlap(b, a)
