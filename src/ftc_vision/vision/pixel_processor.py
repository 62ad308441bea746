"""Pixel color classifier - identifies the color of intaked pixels in the top and bottom slots."""
from enum import Enum

from ftc_vision.ui.overlay import (
    BLUE_BORDER, GREEN_BORDER, RED_BORDER, WHITE_BORDER, YELLOW_BORDER,
)
from ftc_vision.vision.color_ranges import HsvRange, threshold_mask
from ftc_vision.vision.processor import VisionProcessor
from ftc_vision.vision.regions import region_from_corners, white_fraction


class PixelColor(Enum):
    """Color of the pixel held in one intake slot; NONE when the slot reads empty."""
    GREEN = 'green'
    BLUE = 'blue'
    YELLOW = 'yellow'
    WHITE = 'white'
    NONE = 'none'


BORDER_COLORS = {
    PixelColor.GREEN: GREEN_BORDER,
    PixelColor.BLUE: BLUE_BORDER,
    PixelColor.YELLOW: YELLOW_BORDER,
    PixelColor.WHITE: WHITE_BORDER,
    PixelColor.NONE: RED_BORDER,
}

# (top left, bottom right) corners as fractions of (width, height)
TOP_REGION_CORNERS = ((0.16, 0.07), (0.85, 0.425))
BOTTOM_REGION_CORNERS = ((0.16, 0.425), (0.85, 0.8))


class PixelProcessor(VisionProcessor):
    """
    Classifies the pixel held in each of the two intake slots.

    Each slot is checked against the configured color ranges in order
    (green, blue, yellow, white by default). The first color whose fraction
    in the slot exceeds the slot's threshold is reported; the remaining
    colors are not checked. A slot with no qualifying color is NONE.
    """

    name = "pixel"

    def __init__(self, config=None, perf_logger=None):
        super().__init__(config, perf_logger)
        self.top_region = None
        self.bottom_region = None
        self.top_color = PixelColor.NONE
        self.bottom_color = PixelColor.NONE

    def _build_regions(self, width, height):
        self.top_region = region_from_corners(width, height, *TOP_REGION_CORNERS)
        self.bottom_region = region_from_corners(width, height, *BOTTOM_REGION_CORNERS)

    def _color_ranges(self):
        """Yield (PixelColor, HsvRange) in check order, skipping unknown color names."""
        for name, (low, high) in self.config.pixel_color_ranges.items():
            try:
                color = PixelColor(name)
            except ValueError:
                print(f"Warning: ignoring unknown pixel color '{name}'")
                continue
            if color is not PixelColor.NONE:
                yield color, HsvRange(low, high)

    def _detect(self, hsv):
        self.top_color = PixelColor.NONE
        self.bottom_color = PixelColor.NONE

        # Each mask is shared by both slots; stop once both are classified
        for color, hsv_range in self._color_ranges():
            mask = threshold_mask(hsv, [hsv_range])
            if (self.top_color is PixelColor.NONE
                    and white_fraction(mask, self.top_region) > self.config.pixel_top_threshold):
                self.top_color = color
            if (self.bottom_color is PixelColor.NONE
                    and white_fraction(mask, self.bottom_region) > self.config.pixel_bottom_threshold):
                self.bottom_color = color
            if self.top_color is not PixelColor.NONE and self.bottom_color is not PixelColor.NONE:
                break

        return self.get_pixel_colors()

    def _region_borders(self):
        return [
            (self.top_region, BORDER_COLORS[self.top_color]),
            (self.bottom_region, BORDER_COLORS[self.bottom_color]),
        ]

    def _label(self, user_context):
        if not user_context:
            return ""
        top, bottom = user_context
        return f"{self.name}: top={top.value} bottom={bottom.value}"

    def get_top_color(self):
        return self.top_color

    def get_bottom_color(self):
        return self.bottom_color

    def get_pixel_colors(self):
        """Return (top, bottom) colors from the most recent frame."""
        return (self.top_color, self.bottom_color)
