"""Tests for the Pillow surface and headless snapshots."""

from __future__ import annotations

import logging

import pytest
import requests
from PIL import Image

from sundial.core import location_service as location_module
from sundial.core.config_service import ConfigService
from sundial.core.models import GnomonStyle, Point
from sundial.main import Application
from sundial.ui.image_surface import ImageSurface
from sundial.ui.theme import Theme
from sundial.update_cycle import UpdateCycle

WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)


def test_circle_respects_origin() -> None:
    surface = ImageSurface(100, 100, background=WHITE)
    surface.set_origin(50, 50)
    surface.circle(Point(0, 0), 20, fill=RED)

    assert surface.image.getpixel((50, 50)) == RED[:3]
    assert surface.image.getpixel((5, 5)) == WHITE[:3]


def test_clear_restores_background() -> None:
    surface = ImageSurface(40, 40, background=WHITE)
    surface.rectangle(Point(0, 0), 40, 40, RED)
    surface.clear()
    assert surface.image.getpixel((20, 20)) == WHITE[:3]


def test_translucent_fill_blends() -> None:
    surface = ImageSurface(40, 40, background=WHITE)
    surface.rectangle(Point(0, 0), 40, 40, (0, 0, 0, 128))
    r, g, b = surface.image.getpixel((20, 20))
    assert 100 < r < 160
    assert r == g == b


def test_shadow_darkens_face_instead_of_punching_through() -> None:
    """A translucent shadow over the gold plate leaves an opaque, darker gold."""
    surface = ImageSurface(100, 100)
    surface.set_origin(50, 50)
    surface.circle(Point(0, 0), 40, fill=Theme.FACE_FILL)
    surface.polygon([Point(-10, -10), Point(10, -10), Point(0, 20)], fill=Theme.SHADOW_FILL)

    assert surface.image.mode == 'RGB'
    pixel = surface.image.getpixel((50, 50))
    expected = Theme.blend(Theme.SHADOW_FILL, Theme.FACE_FILL)
    assert pixel == pytest.approx(expected, abs=2)
    assert pixel[0] < Theme.FACE_FILL[0]


def test_rotated_text_draws_and_clips_at_edges() -> None:
    surface = ImageSurface(120, 120, background=WHITE)
    before = surface.image.tobytes()
    surface.set_origin(60, 60)
    surface.text(Point(0, 0), 'XII', 28, (0, 0, 0, 255), rotation_degrees=45)
    assert surface.image.tobytes() != before

    # partially off-canvas labels are clipped, not rejected
    surface.text(Point(-60, -60), 'N', 22, (0, 0, 0, 255))


def test_curved_polygon_fills_region() -> None:
    surface = ImageSurface(100, 100, background=WHITE)
    surface.curved_polygon([Point(10, 90), Point(10, 10)], Point(50, 50), Point(90, 90), fill=RED)
    assert surface.image.getpixel((20, 80)) == RED[:3]
    assert surface.image.getpixel((90, 10)) == WHITE[:3]


def test_present_writes_downsampled_png(tmp_path) -> None:
    path = tmp_path / 'frames' / 'dial.png'
    surface = ImageSurface(80, 60, output_path=path, scale=2)
    assert surface.image.size == (160, 120)

    surface.present()

    with Image.open(path) as image:
        assert image.size == (80, 60)


def test_present_without_path_is_noop(tmp_path) -> None:
    ImageSurface(10, 10).present()
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize('style', list(GnomonStyle))
def test_full_frame_for_each_style(tmp_path, clock, settings, location, style) -> None:
    path = tmp_path / f'{style.value}.png'
    settings.set_gnomon_style(style)
    settings.set_show_compass_rose(True)
    cycle = UpdateCycle(ImageSurface(900, 760, output_path=path), clock, settings, location)

    frame = cycle.render()

    assert frame.has_shadow
    assert path.exists()


def test_application_snapshot(tmp_path) -> None:
    path = tmp_path / 'snapshot.png'
    config = ConfigService(config_paths=[], environ={
        'SNAPSHOT_PATH': str(path),
        'DISPLAY_WIDTH': '640',
        'DISPLAY_HEIGHT': '600',
        'GNOMON_STYLE': 'wedge',
    })

    Application(config).run()

    with Image.open(path) as image:
        assert image.size == (640, 600)


def test_application_warns_when_dial_does_not_fit(tmp_path, caplog) -> None:
    path = tmp_path / 'small.png'
    config = ConfigService(config_paths=[], environ={
        'SNAPSHOT_PATH': str(path),
        'DISPLAY_WIDTH': '320',
        'DISPLAY_HEIGHT': '240',
    })

    with caplog.at_level(logging.WARNING):
        Application(config).run()

    assert 'too small' in caplog.text
    assert path.exists()


def test_application_keeps_default_location_when_lookup_fails(tmp_path, monkeypatch, caplog) -> None:
    def unreachable(url, timeout):
        raise requests.exceptions.ConnectionError('network down')

    monkeypatch.setattr(location_module.requests, 'get', unreachable)
    path = tmp_path / 'offline.png'
    config = ConfigService(config_paths=[], environ={
        'SNAPSHOT_PATH': str(path),
        'AUTO_LOCATE': 'true',
    })

    with caplog.at_level(logging.WARNING):
        Application(config).run()

    assert 'Location lookup failed (network down)' in caplog.text
    assert 'lat=32.7455' in caplog.text
    assert path.exists()
