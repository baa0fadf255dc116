import pytest

from rasterkit.visual import TrueColorVisual


@pytest.fixture
def rgb565():
    return TrueColorVisual(16, 0xF800, 0x07E0, 0x001F)


@pytest.mark.parametrize("color", [0, 0xFF99FF, 0x00FFFF, 0xFFFFFF, 0x123456])
def test_deep_visual_passes_colour_through(color):
    assert TrueColorVisual().color_value(color) == color


def test_layout_of_565_masks(rgb565):
    assert (rgb565.red_shift, rgb565.red_bits) == (11, 5)
    assert (rgb565.green_shift, rgb565.green_bits) == (5, 6)
    assert (rgb565.blue_shift, rgb565.blue_bits) == (0, 5)


def test_white_fills_all_masks(rgb565):
    expected = rgb565.red_mask | rgb565.green_mask | rgb565.blue_mask
    assert rgb565.color_value(0xFFFFFF) == expected


def test_black_is_zero(rgb565):
    assert rgb565.color_value(0) == 0


@pytest.mark.parametrize(
    "color, mask_name",
    [(0xFF0000, "red_mask"), (0x00FF00, "green_mask"), (0x0000FF, "blue_mask")],
)
def test_pure_channel_fills_its_mask(rgb565, color, mask_name):
    assert rgb565.color_value(color) == getattr(rgb565, mask_name)


def test_result_stays_within_masks(rgb565):
    allowed = rgb565.red_mask | rgb565.green_mask | rgb565.blue_mask
    for color in (0x123456, 0xABCDEF, 0x808080, 0x7F0001):
        assert rgb565.color_value(color) & ~allowed == 0


def test_zero_mask_is_rejected():
    with pytest.raises(ValueError):
        TrueColorVisual(16, 0, 0x07E0, 0x001F)


def test_bad_depth_is_rejected():
    with pytest.raises(ValueError):
        TrueColorVisual(0)