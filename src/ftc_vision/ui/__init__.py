"""UI module - annotation of processed frames."""

from .overlay import draw_region_borders, draw_canvas_overlay

__all__ = ['draw_region_borders', 'draw_canvas_overlay']
