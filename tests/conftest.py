"""Pytest configuration and shared fixtures."""
import pytest
import numpy as np
import os
import sys

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


# Pure colors in RGB, the order processors expect
RED = (255, 0, 0)
UPPER_RED = (255, 0, 40)  # hue ~175, the top end of the spectrum
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)
WARM_WHITE = (255, 250, 235)  # intake pixels read slightly yellow, hue ~22
GRAY = (128, 128, 128)


@pytest.fixture
def frame_size():
    """Default camera stream size (width, height)."""
    return (640, 480)


@pytest.fixture
def black_frame(frame_size):
    """Create a black RGB frame."""
    width, height = frame_size
    return np.zeros((height, width, 3), dtype=np.uint8)


@pytest.fixture
def make_frame(frame_size):
    """Factory for RGB frames with solid colored patches.

    Usage:
        make_frame((slice(150, 300), slice(20, 180), RED), background=GRAY)
    """
    def _make(*patches, background=(0, 0, 0)):
        width, height = frame_size
        frame = np.zeros((height, width, 3), dtype=np.uint8)
        frame[:, :] = background
        for rows, cols, color in patches:
            frame[rows, cols] = color
        return frame
    return _make


@pytest.fixture
def sample_config_data():
    """Create sample processor config JSON data."""
    return {
        'prop_left_threshold': 0.05,
        'prop_middle_threshold': 0.05,
        'prop_right_threshold': 0.05,
        'pixel_top_threshold': 0.02,
        'pixel_bottom_threshold': 0.02,
        'red_ranges': [[[0, 120, 40], [8, 255, 255]], [[165, 120, 40], [179, 255, 255]]],
        'pixel_color_ranges': {
            'blue': [[93, 100, 20], [138, 255, 255]],
            'green': [[35, 100, 20], [78, 255, 255]],
        },
        'border_thickness': 2,
        'benchmark': False,
    }
