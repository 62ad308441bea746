"""Overlay drawing - region borders and result labels."""
import cv2

# Border colors in RGB, matching the frames handed over by the camera
RED_BORDER = (255, 0, 0)
GREEN_BORDER = (0, 255, 0)
BLUE_BORDER = (0, 0, 255)
YELLOW_BORDER = (255, 255, 0)
WHITE_BORDER = (255, 255, 255)

LABEL_COLOR = (255, 255, 255)


def draw_region_borders(frame, regions_with_colors, thickness=1):
    """Draw a border around each region in place.

    Args:
        frame: Image (H, W, 3) to draw on
        regions_with_colors: Iterable of (Region, color) pairs
        thickness: Border thickness in pixels
    """
    for region, color in regions_with_colors:
        if region.area <= 0:
            continue
        cv2.rectangle(frame, region.top_left, region.bottom_right, color, thickness)


def draw_canvas_overlay(canvas, regions_with_colors, label, scale=1.0, thickness=2):
    """Draw scaled region borders and a result label onto a display canvas.

    Args:
        canvas: Display image (H, W, 3), or None to skip drawing
        regions_with_colors: Iterable of (Region, color) pairs in frame coordinates
        label: Text drawn in the top left corner; skipped when empty
        scale: Frame pixel to canvas pixel scale factor
        thickness: Border thickness in canvas pixels
    """
    if canvas is None:
        return

    scaled = [(region.scaled(scale), color) for region, color in regions_with_colors]
    draw_region_borders(canvas, scaled, thickness)

    if label:
        label_size = cv2.getTextSize(label, cv2.FONT_HERSHEY_SIMPLEX, 0.5, 1)[0]
        cv2.putText(canvas, label, (5, label_size[1] + 5),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.5, LABEL_COLOR, 1)
