"""
Theme - Colors, fonts and stroke widths for the dial
"""
import os
from typing import Optional, Tuple

Color = Tuple[int, int, int, int]


class Theme:
    """
    Sundial palette. Colors are RGBA with alpha in 0-255.
    """

    BACKGROUND: Color = (244, 238, 224, 255)
    FACE_FILL: Color = (255, 215, 0, 255)       # Gold dial plate
    INK: Color = (0, 0, 0, 255)

    RING: Color = (0, 0, 0, 128)
    TICK: Color = (0, 0, 0, 128)
    COMPASS_RING: Color = (0, 0, 0, 26)
    COMPASS_STROKE: Color = (0, 0, 0, 77)
    COMPASS_RAY: Color = (0, 0, 0, 51)

    SHADOW_LINE: Color = (0, 0, 0, 128)
    SHADOW_FILL: Color = (0, 0, 0, 64)

    FACE_OUTLINE_WIDTH = 2
    RING_WIDTH = 1.5
    TICK_WIDTH = 1.5
    GNOMON_LINE_WIDTH = 4
    GNOMON_OUTLINE_WIDTH = 2
    SHADOW_LINE_WIDTH = 2

    FONT_FAMILY = 'Gideon Roman'
    FONT_FAMILY_FALLBACK = 'Times'
    FONT_SIZE_TIME = 48
    FONT_SIZE_NUMERAL = 28
    FONT_SIZE_COMPASS = 22

    # Searched in order for raster rendering
    FONT_PATHS = (
        '/usr/share/fonts/truetype/gideon-roman/GideonRoman-Regular.ttf',
        '/usr/share/fonts/truetype/dejavu/DejaVuSerif.ttf',
        '/usr/share/fonts/truetype/liberation/LiberationSerif-Regular.ttf',
        '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf',
    )

    @staticmethod
    def find_font_file() -> Optional[str]:
        """First installed font from FONT_PATHS, or None"""
        for path in Theme.FONT_PATHS:
            if os.path.exists(path):
                return path
        return None

    @staticmethod
    def blend(color: Color, backdrop: Color) -> Tuple[int, int, int]:
        """
        Composite a translucent color over an opaque backdrop.

        Returns:
            Opaque RGB tuple
        """
        alpha = color[3] / 255
        return tuple(
            round(c * alpha + b * (1 - alpha)) for c, b in zip(color[:3], backdrop[:3])
        )

    @staticmethod
    def to_hex(color: Color, backdrop: Optional[Color] = None) -> str:
        """Hex string for toolkits without alpha support."""
        rgb = Theme.blend(color, backdrop or Theme.FACE_FILL)
        return '#{:02x}{:02x}{:02x}'.format(*rgb)
