"""Processor configuration module - centralized storage for thresholds and color ranges."""
import os
import json


# HSV bounds use the OpenCV scale: hue 0-179, saturation and value 0-255.
# Red wraps around hue 0, so it needs a range at each end of the spectrum.
DEFAULT_RED_RANGES = [
    ((0, 100, 20), (10, 255, 255)),
    ((160, 100, 20), (179, 255, 255)),
]

# Checked in this order; the first color over threshold wins
DEFAULT_PIXEL_COLOR_RANGES = {
    'green': ((35, 100, 20), (78, 255, 255)),
    'blue': ((93, 100, 20), (138, 255, 255)),
    'yellow': ((20, 100, 20), (33, 255, 255)),
    'white': ((15, 10, 200), (25, 30, 255)),
}

DEFAULT_REGION_THRESHOLD = 0.01


class ProcessorConfig:
    """
    Centralized configuration for both vision processors.

    Contains the white-pixel fraction thresholds for every region of interest,
    the HSV ranges used for thresholding, and annotation settings.
    """

    def __init__(self, **kwargs):
        """
        Initialize processor configuration with optional custom values.

        Args:
            prop_left_threshold: Minimum red fraction for the left region (default 0.01)
            prop_middle_threshold: Minimum red fraction for the middle region (default 0.01)
            prop_right_threshold: Minimum red fraction for the right region (default 0.01)
            pixel_top_threshold: Minimum color fraction for the top intake region (default 0.01)
            pixel_bottom_threshold: Minimum color fraction for the bottom intake region (default 0.01)
            red_ranges: List of (low, high) HSV tuples OR-ed together for the team prop
            pixel_color_ranges: Ordered dict of color name -> (low, high) HSV tuples
            border_thickness: Line thickness for region borders in pixels (default 1)
            benchmark: If True, log per-stage timings to the performance log (default False)
        """
        # Team prop thresholds
        self.prop_left_threshold = kwargs.get('prop_left_threshold', DEFAULT_REGION_THRESHOLD)
        self.prop_middle_threshold = kwargs.get('prop_middle_threshold', DEFAULT_REGION_THRESHOLD)
        self.prop_right_threshold = kwargs.get('prop_right_threshold', DEFAULT_REGION_THRESHOLD)

        # Pixel thresholds
        self.pixel_top_threshold = kwargs.get('pixel_top_threshold', DEFAULT_REGION_THRESHOLD)
        self.pixel_bottom_threshold = kwargs.get('pixel_bottom_threshold', DEFAULT_REGION_THRESHOLD)

        # Color ranges
        self.red_ranges = _normalize_range_list(kwargs.get('red_ranges', DEFAULT_RED_RANGES))
        self.pixel_color_ranges = _normalize_range_dict(
            kwargs.get('pixel_color_ranges', DEFAULT_PIXEL_COLOR_RANGES))

        # Annotation and diagnostics
        self.border_thickness = kwargs.get('border_thickness', 1)
        self.benchmark = kwargs.get('benchmark', False)

    def to_dict(self):
        """
        Convert configuration to a JSON-friendly dictionary.

        Returns:
            Dictionary of all configuration parameters
        """
        return {
            'prop_left_threshold': self.prop_left_threshold,
            'prop_middle_threshold': self.prop_middle_threshold,
            'prop_right_threshold': self.prop_right_threshold,
            'pixel_top_threshold': self.pixel_top_threshold,
            'pixel_bottom_threshold': self.pixel_bottom_threshold,
            'red_ranges': [[list(low), list(high)] for low, high in self.red_ranges],
            'pixel_color_ranges': {
                name: [list(low), list(high)] for name, (low, high) in self.pixel_color_ranges.items()
            },
            'border_thickness': self.border_thickness,
            'benchmark': self.benchmark,
        }

    @classmethod
    def from_dict(cls, data):
        """Create a config from a dictionary, ignoring unknown keys."""
        known = set(cls().to_dict())
        return cls(**{key: value for key, value in data.items() if key in known})


HSV_MAX = (179, 255, 255)


def _normalize_hsv(bound):
    hsv = tuple(int(c) for c in bound)
    if len(hsv) != 3:
        raise ValueError(f"HSV bound must have 3 components, got {list(bound)}")
    for component, value, limit in zip("HSV", hsv, HSV_MAX):
        if not 0 <= value <= limit:
            raise ValueError(f"{component} component {value} outside 0-{limit} in {list(hsv)}")
    return hsv


def _normalize_range_list(ranges):
    """Convert [[low, high], ...] (lists from JSON) to a list of validated tuple pairs.

    Raises:
        ValueError: If a bound is outside the OpenCV HSV scale or low > high
    """
    normalized = []
    for low, high in ranges:
        low, high = _normalize_hsv(low), _normalize_hsv(high)
        if any(lo > hi for lo, hi in zip(low, high)):
            raise ValueError(f"HSV range low {list(low)} exceeds high {list(high)}")
        normalized.append((low, high))
    return normalized


def _normalize_range_dict(ranges):
    return {name: pair for name, pair in zip(ranges.keys(), _normalize_range_list(ranges.values()))}


def load_processor_config(path):
    """Load a ProcessorConfig from a JSON file.

    Missing or unreadable files fall back to the default configuration.

    Args:
        path: Path to a JSON file written by save_processor_config (or by hand)

    Returns:
        ProcessorConfig instance
    """
    if not path or not os.path.exists(path):
        print(f"No config file at {path}, using defaults")
        return ProcessorConfig()

    try:
        with open(path, 'r') as f:
            data = json.load(f)
        config = ProcessorConfig.from_dict(data)
        print(f"Loaded processor config from {path}")
        return config
    except Exception as e:
        print(f"Error loading config from {path}: {e}")
        return ProcessorConfig()


def save_processor_config(config, path):
    """Save a ProcessorConfig to a JSON file.

    Args:
        config: ProcessorConfig to save
        path: Destination file path (parent directories are created)

    Returns:
        True if the file was written, False otherwise
    """
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(config.to_dict(), f, indent=2)
        print(f"Saved processor config to {path}")
        return True
    except Exception as e:
        print(f"Error saving config: {e}")
        return False
