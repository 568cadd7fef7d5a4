"""
Gnomon Renderers - Body and shadow shapes for each gnomon style
"""
from typing import Callable, Dict, Optional

from ..core.geometry import bow_control_point, distance
from ..core.hour_angle import DEGREES_PER_HOUR, MERIDIAN_HOUR
from ..core.models import ORIGIN, GnomonStyle, Point, ShadowProjection
from ..core.projection import gnomon_base_point, project
from ..ui.surface import RenderSurface
from ..ui.theme import Theme


WEDGE_BASE_WIDTH = 18
RIGHT_TRIANGLE_OFFSET = 8
CURVED_WALL_OFFSET = 10

CURVED_WALL_MAX_BOW = 14
CURVED_WALL_BOW_FACTOR = 1.2
CURVED_SHADOW_MAX_BOW = 18
CURVED_SHADOW_BOW_FACTOR = 0.15


def draw_line(surface: RenderSurface, base: Point, projection: Optional[ShadowProjection]) -> None:
    """Thin rod from the center along the noon line."""
    surface.line(ORIGIN, Point(0.0, base.y), Theme.INK, width=Theme.GNOMON_LINE_WIDTH)
    if projection is None:
        return
    surface.line(ORIGIN, projection.shadow_tip, Theme.SHADOW_LINE, width=Theme.SHADOW_LINE_WIDTH)


def draw_wedge(surface: RenderSurface, base: Point, projection: Optional[ShadowProjection]) -> None:
    """Isosceles wedge standing on the center with a triangular shadow."""
    base_left = Point(-WEDGE_BASE_WIDTH / 2, 0.0)
    base_right = Point(WEDGE_BASE_WIDTH / 2, 0.0)
    surface.polygon([base_left, base_right, Point(0.0, base.y)], fill=Theme.INK,
                    outline=Theme.INK, width=Theme.GNOMON_OUTLINE_WIDTH)
    if projection is None:
        return
    surface.polygon([base_left, base_right, projection.shadow_tip], fill=Theme.SHADOW_FILL)


def draw_right_triangle(surface: RenderSurface, base: Point, projection: Optional[ShadowProjection]) -> None:
    """
    Thin right triangle: one edge on the dial (center -> base), one vertical
    wall at the base. The wall is drawn with a small sideways offset since
    the view is flat.
    """
    vertical_top = Point(base.x + RIGHT_TRIANGLE_OFFSET, base.y)
    surface.polygon([ORIGIN, base, vertical_top], fill=Theme.INK,
                    outline=Theme.INK, width=Theme.GNOMON_OUTLINE_WIDTH)
    if projection is None:
        return
    surface.polygon([ORIGIN, base, projection.shadow_tip], fill=Theme.SHADOW_FILL)


def draw_curved_wall(surface: RenderSurface, base: Point, projection: Optional[ShadowProjection]) -> None:
    """
    Right triangle whose wall edge is a concave curve; the shadow edge is
    bowed the same way.
    """
    vertical_top = Point(base.x + CURVED_WALL_OFFSET, base.y)
    strength = min(CURVED_WALL_MAX_BOW, distance(base, vertical_top) * CURVED_WALL_BOW_FACTOR)
    control = bow_control_point(base, vertical_top, strength)
    surface.curved_polygon([ORIGIN, base], control, vertical_top, fill=Theme.INK,
                           outline=Theme.INK, width=Theme.GNOMON_OUTLINE_WIDTH)
    if projection is None:
        return

    tip = projection.shadow_tip
    shadow_strength = min(CURVED_SHADOW_MAX_BOW, distance(base, tip) * CURVED_SHADOW_BOW_FACTOR)
    shadow_control = bow_control_point(base, tip, shadow_strength)
    surface.curved_polygon([ORIGIN, base], shadow_control, tip, fill=Theme.SHADOW_FILL)


GnomonRenderer = Callable[[RenderSurface, Point, Optional[ShadowProjection]], None]

RENDERERS: Dict[GnomonStyle, GnomonRenderer] = {
    GnomonStyle.LINE: draw_line,
    GnomonStyle.WEDGE: draw_wedge,
    GnomonStyle.RIGHT_TRIANGLE: draw_right_triangle,
    GnomonStyle.CURVED_WALL: draw_curved_wall,
}

_missing = set(GnomonStyle) - set(RENDERERS)
if _missing:
    raise RuntimeError(f"No gnomon renderer for: {sorted(s.value for s in _missing)}")


def render_gnomon(
    surface: RenderSurface,
    style: GnomonStyle,
    latitude_degrees: float,
    hour: float,
    gnomon_length: float,
    meridian_hour: float = MERIDIAN_HOUR,
    degrees_per_hour: float = DEGREES_PER_HOUR
) -> Optional[ShadowProjection]:
    """
    Draw the selected gnomon and its shadow.

    Args:
        surface: Target surface, origin at the dial center
        style: Which gnomon shape to draw
        latitude_degrees: Observer latitude
        hour: Fractional clock hour
        gnomon_length: Gnomon length in dial units

    Returns:
        The projection used, or None when no shadow was drawn
    """
    projection = project(hour, latitude_degrees, gnomon_length, meridian_hour, degrees_per_hour)
    base = gnomon_base_point(gnomon_length, latitude_degrees)
    RENDERERS[style](surface, base, projection)
    return projection
