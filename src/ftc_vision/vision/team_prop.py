"""Team prop locator - finds the red team prop on the left, middle or right spike mark."""
from enum import Enum

from ftc_vision.ui.overlay import GREEN_BORDER, RED_BORDER
from ftc_vision.vision.color_ranges import HsvRange, threshold_mask
from ftc_vision.vision.processor import VisionProcessor
from ftc_vision.vision.regions import region_from_corners, white_fraction


class PropLocation(Enum):
    """Spike mark the team prop sits on; pos_num is the number used by autonomous."""
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    NOT_FOUND = 0

    @property
    def pos_num(self):
        return self.value


# (top left, bottom right) corners as fractions of (width, height)
PROP_REGION_CORNERS = {
    PropLocation.LEFT: ((0.0, 0.286), (0.33, 0.66)),
    PropLocation.MIDDLE: ((0.33, 0.286), (0.66, 0.66)),
    PropLocation.RIGHT: ((0.66, 0.286), (1.0, 0.66)),
}


class TeamPropProcessor(VisionProcessor):
    """
    Detects the red team prop in one of three side-by-side regions.

    Red pixels from both ends of the hue spectrum are combined into one mask.
    The region with the strictly highest red fraction wins, provided that
    fraction is also above the region's threshold. Ties and weak detections
    report NOT_FOUND.
    """

    name = "prop"

    def __init__(self, config=None, perf_logger=None):
        super().__init__(config, perf_logger)
        self.regions = {}
        self.fractions = {location: 0.0 for location in PROP_REGION_CORNERS}
        self.prop_location = PropLocation.NOT_FOUND

    def _build_regions(self, width, height):
        self.regions = {
            location: region_from_corners(width, height, corner1, corner2)
            for location, (corner1, corner2) in PROP_REGION_CORNERS.items()
        }

    def _thresholds(self):
        return {
            PropLocation.LEFT: self.config.prop_left_threshold,
            PropLocation.MIDDLE: self.config.prop_middle_threshold,
            PropLocation.RIGHT: self.config.prop_right_threshold,
        }

    def _detect(self, hsv):
        mask = threshold_mask(hsv, [HsvRange(low, high) for low, high in self.config.red_ranges])
        self.fractions = {location: white_fraction(mask, region) for location, region in self.regions.items()}

        thresholds = self._thresholds()
        self.prop_location = PropLocation.NOT_FOUND
        for location, fraction in self.fractions.items():
            others = [f for other, f in self.fractions.items() if other != location]
            if all(fraction > f for f in others) and fraction > thresholds[location]:
                self.prop_location = location
                break
        return self.prop_location

    def _region_borders(self):
        return [
            (region, GREEN_BORDER if location == self.prop_location else RED_BORDER)
            for location, region in self.regions.items()
        ]

    def get_prop_location(self):
        """Return the location found in the most recent frame."""
        return self.prop_location

    def get_region_fractions(self):
        """Return the red fraction per region from the most recent frame, keyed by region name."""
        return {location.name.lower(): fraction for location, fraction in self.fractions.items()}
