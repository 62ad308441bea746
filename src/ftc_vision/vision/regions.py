"""Regions of interest - fixed rectangles derived from the frame size."""
from typing import NamedTuple

import numpy as np


class Region(NamedTuple):
    """Axis-aligned rectangle in pixel coordinates."""
    x: int
    y: int
    width: int
    height: int

    @property
    def area(self):
        return self.width * self.height

    @property
    def top_left(self):
        return (self.x, self.y)

    @property
    def bottom_right(self):
        """Last pixel inside the region (inclusive), as cv2.rectangle expects."""
        return (self.x + self.width - 1, self.y + self.height - 1)

    def scaled(self, factor):
        """Return the region scaled by factor, e.g. for a display canvas."""
        return Region(int(self.x * factor), int(self.y * factor),
                      int(self.width * factor), int(self.height * factor))


def region_from_corners(width, height, corner1, corner2):
    """Build a region from two opposite corners given as frame fractions.

    The top left of the frame is (0, 0) and the bottom right is (width, height).
    Corner coordinates are truncated to whole pixels.

    Args:
        width: Frame width in pixels
        height: Frame height in pixels
        corner1: (fx, fy) fraction of width/height for one corner
        corner2: (fx, fy) fraction of width/height for the opposite corner

    Returns:
        Region
    """
    x1, y1 = int(corner1[0] * width), int(corner1[1] * height)
    x2, y2 = int(corner2[0] * width), int(corner2[1] * height)
    x, y = min(x1, x2), min(y1, y2)
    return Region(x, y, max(x1, x2) - x, max(y1, y2) - y)


def white_fraction(mask, region: Region):
    """Fraction of white (255) pixels of a binary mask inside a region.

    Returns:
        Value in [0, 1]; 0.0 for an empty region
    """
    if region.area <= 0:
        return 0.0
    sub = mask[region.y:region.y + region.height, region.x:region.x + region.width]
    return float(np.sum(sub, dtype=np.uint64)) / 255 / region.area
