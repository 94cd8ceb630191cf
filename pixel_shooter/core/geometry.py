"""
Axis-aligned bounding boxes
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    """Rectangle with its origin at the top-left corner"""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def boxes_overlap(a: Box, b: Box) -> bool:
    """
    Test whether two boxes overlap.

    All four comparisons are strict, so boxes that only share an edge do not
    overlap. The test is symmetric in its arguments.
    """
    return (a.x < b.right and
            a.right > b.x and
            a.y < b.bottom and
            a.bottom > b.y)
