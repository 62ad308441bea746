"""Base class for vision processors driven by the camera host."""
import time
from abc import ABC, abstractmethod

import numpy as np

from ftc_vision.config.processor_config import ProcessorConfig
from ftc_vision.ui.overlay import draw_region_borders, draw_canvas_overlay
from ftc_vision.vision.color_ranges import to_hsv


class VisionProcessor(ABC):
    """
    A per-frame processor with the three hooks the camera host calls.

    The host calls init() once when the stream starts, process_frame() for
    every RGB frame, and on_draw_frame() when the frame is displayed.
    Subclasses supply the regions, the detection step and the border colors.

    Attributes:
        config: ProcessorConfig with thresholds and color ranges
        width: Frame width given to init(), or None
        height: Frame height given to init(), or None
        perf_logger: PerformanceLogger used when config.benchmark is set
    """

    name = "processor"

    def __init__(self, config=None, perf_logger=None):
        self.config = config or ProcessorConfig()
        self.perf_logger = perf_logger
        self.width = None
        self.height = None

    @property
    def initialized(self):
        return self.width is not None

    def init(self, width, height, calibration=None):
        """Compute the regions of interest for the stream size.

        Args:
            width: Width of the camera stream in pixels
            height: Height of the camera stream in pixels
            calibration: Camera calibration from the host (unused)
        """
        if not isinstance(width, (int, np.integer)) or not isinstance(height, (int, np.integer)):
            raise ValueError(f"Frame size must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise ValueError(f"Frame size must be positive, got {width}x{height}")

        self.width = int(width)
        self.height = int(height)
        self._build_regions(self.width, self.height)

    def process_frame(self, frame, capture_time_nanos=0):
        """Process one RGB frame, draw region borders on it and return the result.

        Args:
            frame: RGB image (height, width, 3) uint8, annotated in place
            capture_time_nanos: Capture timestamp from the host (unused)

        Returns:
            The detection result, passed back to on_draw_frame() as user context
        """
        if not self.initialized:
            raise RuntimeError(f"{type(self).__name__}.init() must be called before process_frame()")
        if frame.ndim != 3 or frame.shape[:2] != (self.height, self.width):
            raise ValueError(
                f"Expected frame of {self.width}x{self.height}, got shape {frame.shape}")

        if not self.config.benchmark:
            return self._run_stages(frame)[0]

        logger = self._get_perf_logger()
        with logger.frame(self.name):
            result, timings = self._run_stages(frame)
            for stage, duration_ms in timings:
                logger.log_timing(f"{self.name}.{stage}", duration_ms)
        return result

    def _run_stages(self, frame):
        """Convert, detect and annotate; returns (result, [(stage, ms), ...])."""
        t0 = time.perf_counter()
        hsv = to_hsv(frame)
        t1 = time.perf_counter()
        result = self._detect(hsv)
        t2 = time.perf_counter()
        draw_region_borders(frame, self._region_borders(), self.config.border_thickness)
        t3 = time.perf_counter()

        timings = [
            ("hsv", (t1 - t0) * 1000),
            ("detect", (t2 - t1) * 1000),
            ("annotate", (t3 - t2) * 1000),
        ]
        return result, timings

    def on_draw_frame(self, canvas, onscreen_width, onscreen_height,
                      scale_bmp_px_to_canvas_px, scale_canvas_density, user_context):
        """Draw region borders and the result label onto the display canvas.

        A None canvas means the host has nothing to draw on; nothing happens.
        """
        if canvas is None or not self.initialized:
            return
        label = self._label(user_context)
        draw_canvas_overlay(canvas, self._region_borders(), label,
                            scale=scale_bmp_px_to_canvas_px,
                            thickness=max(1, int(round(2 * scale_canvas_density))))

    def _get_perf_logger(self):
        if self.perf_logger is None:
            from ftc_vision.diagnostics.performance_logger import get_logger
            self.perf_logger = get_logger()
        return self.perf_logger

    def _label(self, user_context):
        if user_context is None:
            return ""
        return f"{self.name}: {getattr(user_context, 'name', user_context)}"

    @abstractmethod
    def _build_regions(self, width, height):
        """Create the processor's regions for the given frame size."""

    @abstractmethod
    def _detect(self, hsv):
        """Update and return the result for one HSV frame."""

    @abstractmethod
    def _region_borders(self):
        """Return (Region, color) pairs reflecting the current result."""
