"""Tests for the intake pixel color classifier."""
import pytest
import numpy as np

from conftest import RED, GREEN, BLUE, YELLOW, WARM_WHITE, GRAY
from ftc_vision.config.processor_config import ProcessorConfig
from ftc_vision.ui.overlay import GREEN_BORDER, RED_BORDER, WHITE_BORDER, YELLOW_BORDER
from ftc_vision.vision.pixel_processor import PixelProcessor, PixelColor


# Patches well inside the top and bottom intake slots of a 640x480 frame
TOP_ROWS = slice(60, 180)
BOTTOM_ROWS = slice(230, 360)
SLOT_COLS = slice(150, 500)


@pytest.fixture
def processor(frame_size):
    processor = PixelProcessor()
    processor.init(*frame_size)
    return processor


class TestPixelInit:

    def test_none_before_any_frame(self):
        processor = PixelProcessor()
        assert processor.get_pixel_colors() == (PixelColor.NONE, PixelColor.NONE)

    def test_regions_are_stacked(self, processor):
        top, bottom = processor.top_region, processor.bottom_region
        assert (top.x, top.y) == (102, 33)
        assert top.x == bottom.x and top.width == bottom.width
        assert top.y + top.height == bottom.y

    def test_process_before_init_raises(self, black_frame):
        with pytest.raises(RuntimeError):
            PixelProcessor().process_frame(black_frame)


class TestPixelDetection:

    @pytest.mark.parametrize("color, expected", [
        (GREEN, PixelColor.GREEN),
        (BLUE, PixelColor.BLUE),
        (YELLOW, PixelColor.YELLOW),
        (WARM_WHITE, PixelColor.WHITE),
    ])
    def test_top_slot_colors(self, processor, make_frame, color, expected):
        frame = make_frame((TOP_ROWS, SLOT_COLS, color))
        assert processor.process_frame(frame) == (expected, PixelColor.NONE)
        assert processor.get_top_color() == expected
        assert processor.get_bottom_color() == PixelColor.NONE

    def test_slots_are_independent(self, processor, make_frame):
        frame = make_frame((TOP_ROWS, SLOT_COLS, YELLOW), (BOTTOM_ROWS, SLOT_COLS, GREEN))
        assert processor.process_frame(frame) == (PixelColor.YELLOW, PixelColor.GREEN)

    def test_empty_intake(self, processor, black_frame):
        assert processor.process_frame(black_frame) == (PixelColor.NONE, PixelColor.NONE)

    def test_unknown_colors_are_none(self, processor, make_frame):
        frame = make_frame((TOP_ROWS, SLOT_COLS, RED), background=GRAY)
        assert processor.process_frame(frame) == (PixelColor.NONE, PixelColor.NONE)

    def test_first_color_in_order_wins(self, processor, make_frame):
        """Green is checked before blue, so a slot with both reads green."""
        frame = make_frame(
            (TOP_ROWS, slice(150, 300), BLUE),
            (TOP_ROWS, slice(350, 500), GREEN),
        )
        assert processor.get_top_color() == PixelColor.NONE
        assert processor.process_frame(frame)[0] == PixelColor.GREEN

    def test_custom_color_order(self, frame_size, make_frame):
        config = ProcessorConfig(pixel_color_ranges={
            'blue': ((93, 100, 20), (138, 255, 255)),
            'green': ((35, 100, 20), (78, 255, 255)),
        })
        processor = PixelProcessor(config)
        processor.init(*frame_size)
        frame = make_frame(
            (TOP_ROWS, slice(150, 300), BLUE),
            (TOP_ROWS, slice(350, 500), GREEN),
        )
        assert processor.process_frame(frame)[0] == PixelColor.BLUE

    def test_unknown_color_name_is_skipped(self, frame_size, make_frame, capsys):
        config = ProcessorConfig(pixel_color_ranges={
            'purple': ((130, 100, 20), (160, 255, 255)),
            'green': ((35, 100, 20), (78, 255, 255)),
        })
        processor = PixelProcessor(config)
        processor.init(*frame_size)
        frame = make_frame((BOTTOM_ROWS, SLOT_COLS, GREEN))
        assert processor.process_frame(frame) == (PixelColor.NONE, PixelColor.GREEN)
        assert "purple" in capsys.readouterr().out

    def test_small_patch_below_threshold(self, processor, make_frame):
        frame = make_frame((slice(100, 105), slice(200, 205), GREEN))
        assert processor.process_frame(frame)[0] == PixelColor.NONE

    def test_no_history_between_frames(self, processor, make_frame, black_frame):
        processor.process_frame(make_frame((TOP_ROWS, SLOT_COLS, GREEN)))
        assert processor.process_frame(black_frame) == (PixelColor.NONE, PixelColor.NONE)


class TestPixelAnnotation:

    def test_borders_match_detected_colors(self, processor, make_frame):
        frame = make_frame((TOP_ROWS, SLOT_COLS, GREEN))
        processor.process_frame(frame)
        top, bottom = processor.top_region, processor.bottom_region
        assert tuple(frame[top.y, top.x]) == GREEN_BORDER
        assert tuple(frame[bottom.y, bottom.x]) == RED_BORDER

    def test_yellow_and_white_borders(self, processor, make_frame):
        frame = make_frame((TOP_ROWS, SLOT_COLS, YELLOW), (BOTTOM_ROWS, SLOT_COLS, WARM_WHITE))
        processor.process_frame(frame)
        top, bottom = processor.top_region, processor.bottom_region
        assert tuple(frame[top.y, top.x]) == YELLOW_BORDER
        assert tuple(frame[bottom.bottom_right[1], bottom.bottom_right[0]]) == WHITE_BORDER

    def test_draw_frame_label(self, processor, make_frame):
        result = processor.process_frame(make_frame((TOP_ROWS, SLOT_COLS, BLUE)))
        assert processor._label(result) == "pixel: top=blue bottom=none"

        canvas = np.zeros((240, 320, 3), dtype=np.uint8)
        processor.on_draw_frame(canvas, 320, 240, 0.5, 1.0, result)
        top = processor.top_region.scaled(0.5)
        assert tuple(canvas[top.y + 40, top.x]) == (0, 0, 255)
