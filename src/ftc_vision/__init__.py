"""
FTC Vision - HSV threshold vision processors for FTC Center Stage.

This package provides the team prop locator (left / middle / right spike mark)
and the intake pixel color classifier, plus a small runner that feeds them
images or a live camera.
"""

__version__ = "1.0.0"

from ftc_vision.vision.team_prop import TeamPropProcessor, PropLocation
from ftc_vision.vision.pixel_processor import PixelProcessor, PixelColor

__all__ = ["TeamPropProcessor", "PropLocation", "PixelProcessor", "PixelColor"]
