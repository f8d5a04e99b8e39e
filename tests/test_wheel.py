import numpy as np
import pytest

from color_harmony.colorspace import hsb_to_rgb
from color_harmony.wheel import WheelGeometry


@pytest.fixture
def wheel():
    return WheelGeometry(size=200)


def test_geometry(wheel):
    assert wheel.center == (100.0, 100.0)
    assert wheel.radius == 100.0


@pytest.mark.parametrize(
    "point,hue",
    [((200, 100), 0), ((100, 200), 90), ((0, 100), 180), ((100, 0), 270)],
)
def test_point_to_hsb_axes(wheel, point, hue):
    # canvas y grows downward, so 90° is straight down
    h, s, b = wheel.point_to_hsb(*point, brightness=40)
    assert h == pytest.approx(hue)
    assert s == pytest.approx(100.0)
    assert b == 40


def test_point_to_hsb_center_and_outside(wheel):
    assert wheel.point_to_hsb(100, 100, 100) == (0.0, 0.0, 100)
    h, s, _ = wheel.point_to_hsb(100, 400, 100)
    assert h == pytest.approx(90)
    assert s == 100.0


def test_hue_is_in_range(wheel):
    for x, y in [(199, 99.9), (150, 50), (10, 190), (60, 20)]:
        h, _, _ = wheel.point_to_hsb(x, y, 100)
        assert 0 <= h < 360


@pytest.mark.parametrize("hsb", [(0, 100, 100), (45, 50, 80), (200, 10, 100), (315, 73.5, 5)])
def test_point_round_trip(wheel, hsb):
    x, y = wheel.hsb_to_point(hsb)
    h, s, b = wheel.point_to_hsb(x, y, hsb[2])
    assert (h, s, b) == pytest.approx(hsb)


def test_render_shape_and_mask(wheel):
    img = wheel.render()
    assert img.shape == (200, 200, 4)
    assert img.dtype == np.uint8
    # corners lie outside the disc
    for r, c in [(0, 0), (0, 199), (199, 0), (199, 199)]:
        assert img[r, c, 3] == 0
        assert np.all(img[r, c, :3] == 0)
    assert img[100, 100, 3] == 255
    # near the centre: almost no saturation, full brightness
    assert np.all(img[100, 100, :3] >= 250)


def test_render_matches_scalar_conversion(wheel):
    img = wheel.render(brightness=100)
    # pixel (row 100, col 150) is sampled at (150.5, 100.5): hue 0°, saturation 50 %
    assert tuple(int(v) for v in img[100, 150, :3]) == hsb_to_rgb((0, 50, 100))
    # pixel (row 150, col 100) is sampled at (100.5, 150.5): hue 89°, saturation 50 %
    assert tuple(int(v) for v in img[150, 100, :3]) == hsb_to_rgb((89, 50, 100))


def test_render_brightness_zero_is_black(wheel):
    img = wheel.render(brightness=0)
    inside = img[..., 3] == 255
    assert inside.any()
    assert np.all(img[inside][:, :3] == 0)


def test_render_small_canvas():
    img = WheelGeometry(size=16).render(brightness=60)
    assert img.shape == (16, 16, 4)
    assert (img[..., 3] == 255).sum() > 0
