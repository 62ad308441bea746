"""HSV color ranges and threshold masks."""
from typing import NamedTuple, Tuple, Iterable

import numpy as np
import cv2


class HsvRange(NamedTuple):
    """Inclusive HSV bounds on the OpenCV scale (H 0-179, S/V 0-255)."""
    low: Tuple[int, int, int]
    high: Tuple[int, int, int]


def to_hsv(frame_rgb):
    """Convert an RGB frame to HSV."""
    return cv2.cvtColor(frame_rgb, cv2.COLOR_RGB2HSV)


def threshold_mask(hsv, ranges: Iterable[HsvRange]):
    """Create a binary mask of pixels inside any of the given ranges.

    Args:
        hsv: HSV image (H, W, 3)
        ranges: HSV ranges to OR together

    Returns:
        uint8 mask (H, W) with 255 for matching pixels and 0 elsewhere
    """
    mask = np.zeros(hsv.shape[:2], dtype=np.uint8)
    for low, high in ranges:
        in_range = cv2.inRange(hsv, np.array(low, dtype=np.uint8), np.array(high, dtype=np.uint8))
        mask = cv2.bitwise_or(mask, in_range)
    return mask
