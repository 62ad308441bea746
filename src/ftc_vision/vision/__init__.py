"""Vision module - HSV thresholding, regions of interest and the two processors."""

from .color_ranges import HsvRange, threshold_mask, to_hsv
from .regions import Region, region_from_corners, white_fraction
from .processor import VisionProcessor
from .team_prop import TeamPropProcessor, PropLocation
from .pixel_processor import PixelProcessor, PixelColor

__all__ = [
    'HsvRange',
    'threshold_mask',
    'to_hsv',
    'Region',
    'region_from_corners',
    'white_fraction',
    'VisionProcessor',
    'TeamPropProcessor',
    'PropLocation',
    'PixelProcessor',
    'PixelColor',
]
