"""
Layout - Positions of the time label and dial on the surface
"""
from typing import Dict, Tuple

from ..core.models import DIAL_RADIUS
from .theme import Theme


class Layout:
    """
    Places the HH:MM:SS label in a strip along the top and centers the dial
    in the remaining space. Shadows may run past the dial plate, so the
    dial is not clipped to its region.
    """

    def __init__(self, width: int, height: int):
        """
        Args:
            width: Surface width in pixels
            height: Surface height in pixels
        """
        self._width = width
        self._height = height

        # Fractions of the surface
        self._regions = {
            'time': {'x': 0.0, 'y': 0.0, 'width': 1.0, 'height': 0.12},
            'dial': {'x': 0.0, 'y': 0.12, 'width': 1.0, 'height': 0.88},
        }

    def get_region(self, name: str) -> Dict[str, int]:
        """
        Pixel rectangle for a named region.

        Raises:
            ValueError: For an unknown region name
        """
        if name not in self._regions:
            raise ValueError(f"Unknown region: {name}")

        region = self._regions[name]
        return {
            'x': int(region['x'] * self._width),
            'y': int(region['y'] * self._height),
            'width': int(region['width'] * self._width),
            'height': int(region['height'] * self._height),
        }

    def get_center_position(self, region: str) -> Tuple[int, int]:
        r = self.get_region(region)
        return (r['x'] + r['width'] // 2, r['y'] + r['height'] // 2)

    @property
    def dial_center(self) -> Tuple[int, int]:
        """Device position of the dial origin"""
        return self.get_center_position('dial')

    def time_label_offset(self) -> Tuple[float, float]:
        """Time label center relative to the dial origin"""
        tx, ty = self.get_center_position('time')
        cx, cy = self.dial_center
        return (tx - cx, ty - cy)

    def time_font_size(self) -> int:
        """Shrink the time font to fit the strip height"""
        strip = self.get_region('time')['height']
        return max(12, min(Theme.FONT_SIZE_TIME, int(strip * 0.7)))

    def fits_dial(self) -> bool:
        """True when the whole plate is visible"""
        r = self.get_region('dial')
        return min(r['width'], r['height']) >= 2 * DIAL_RADIUS

    def update_dimensions(self, width: int, height: int) -> None:
        self._width = width
        self._height = height

    @property
    def dimensions(self) -> Tuple[int, int]:
        return (self._width, self._height)
