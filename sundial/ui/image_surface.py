"""
Image Surface - Renders dial frames into a Pillow image
"""
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

from PIL import Image, ImageDraw, ImageFont

from ..core.models import Point
from .surface import RenderSurface
from .theme import Color, Theme


class ImageSurface(RenderSurface):
    """
    RenderSurface backed by an RGB Pillow image; translucent colors are
    blended over what is already drawn.

    Used for headless snapshots. present() writes the frame to `output_path`
    when one is set.
    """

    def __init__(self, width: int, height: int, background: Color = Theme.BACKGROUND,
                 output_path: Optional[Union[str, Path]] = None, scale: int = 1):
        """
        Args:
            width: Image width in dial units
            height: Image height in dial units
            background: Fill used by clear()
            output_path: PNG written on present()
            scale: Supersampling factor; the saved image is downsampled
        """
        super().__init__(width, height)
        self._background = background
        self._output_path = Path(output_path) if output_path else None
        self._scale = max(1, int(scale))
        self._font_file = Theme.find_font_file()
        self._fonts: Dict[int, ImageFont.ImageFont] = {}
        # Pillow blends RGBA ink only when the target image is RGB
        self.image = Image.new('RGB', (width * self._scale, height * self._scale), background[:3])
        self._draw = ImageDraw.Draw(self.image, 'RGBA')

    def _xy(self, p: Point):
        x, y = self.to_device(p)
        return (x * self._scale, y * self._scale)

    def _w(self, width: float) -> int:
        return max(1, round(width * self._scale))

    def _font(self, size: int):
        px = size * self._scale
        if px not in self._fonts:
            if self._font_file:
                self._fonts[px] = ImageFont.truetype(self._font_file, px)
            else:
                self._fonts[px] = ImageFont.load_default(px)
        return self._fonts[px]

    def clear(self) -> None:
        self.image.paste(self._background[:3], (0, 0, self.image.width, self.image.height))

    def circle(self, center, radius, fill=None, outline=None, width=1) -> None:
        cx, cy = self._xy(center)
        r = radius * self._scale
        self._draw.ellipse([cx - r, cy - r, cx + r, cy + r],
                           fill=fill, outline=outline, width=self._w(width))

    def line(self, start, end, color, width=1) -> None:
        self._draw.line([self._xy(start), self._xy(end)], fill=color, width=self._w(width))

    def rectangle(self, top_left, width, height, fill) -> None:
        x, y = self._xy(top_left)
        self._draw.rectangle([x, y, x + width * self._scale, y + height * self._scale], fill=fill)

    def polygon(self, points: Sequence[Point], fill=None, outline=None, width=1) -> None:
        self._draw.polygon([self._xy(p) for p in points], fill=fill, outline=outline,
                           width=self._w(width))

    def text(self, position, text, size, color, rotation_degrees=0) -> None:
        font = self._font(size)
        left, top, right, bottom = self._draw.textbbox((0, 0), text, font=font)
        label = Image.new('RGBA', (right - left + 2, bottom - top + 2), (0, 0, 0, 0))
        ImageDraw.Draw(label).text((1 - left, 1 - top), text, font=font, fill=color)
        if rotation_degrees:
            # Pillow rotates counter-clockwise
            label = label.rotate(-rotation_degrees, resample=Image.Resampling.BICUBIC, expand=True)
        x, y = self._xy(position)
        # paste() accepts offsets past the image edge, alpha_composite() does not
        self.image.paste(label, (round(x - label.width / 2), round(y - label.height / 2)), label)

    def render_image(self) -> Image.Image:
        """Frame at output resolution."""
        if self._scale == 1:
            return self.image.copy()
        return self.image.resize((self._width, self._height), Image.Resampling.LANCZOS)

    def present(self) -> None:
        if self._output_path is None:
            return
        self._output_path.parent.mkdir(parents=True, exist_ok=True)
        self.render_image().save(self._output_path)
