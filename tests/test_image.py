import pytest

from rasterkit.image import Image


def test_new_image_is_zero_filled():
    img = Image(42, 42)
    assert len(img.data) == img.size_line * img.height
    assert all(byte == 0 for byte in img.data)
    assert img.row(0) == [0] * 42


def test_size_line_holds_a_row_of_32_bit_pixels():
    img = Image(42, 42, 32)
    assert img.size_line == 42 * 4
    assert img.bytes_per_pixel == 4


def test_size_line_is_padded_to_32_bits():
    img = Image(3, 2, 8)
    assert img.size_line == 4
    assert img.size_line % 4 == 0


@pytest.mark.parametrize("byte_order", [0, 1])
@pytest.mark.parametrize("color", [0, 0x11223344, 0xFFFFFFFF, 0x00FF99FF])
def test_put_get_round_trip(byte_order, color):
    img = Image(5, 4, 32, byte_order)
    img.put_pixel(3, 2, color)
    assert img.get_pixel(3, 2) == color
    assert img.get_pixel(2, 2) == 0


def test_little_endian_layout():
    img = Image(2, 2, 32, 0)
    img.put_pixel(0, 0, 0x11223344)
    assert bytes(img.data[:4]) == bytes([0x44, 0x33, 0x22, 0x11])


def test_big_endian_layout():
    img = Image(2, 2, 32, 1)
    img.put_pixel(0, 0, 0x11223344)
    assert bytes(img.data[:4]) == bytes([0x11, 0x22, 0x33, 0x44])


def test_pixel_lands_on_its_scanline():
    img = Image(3, 3, 32, 1)
    img.put_pixel(1, 2, 0x01020304)
    offset = 2 * img.size_line + 1 * 4
    assert bytes(img.data[offset : offset + 4]) == bytes([1, 2, 3, 4])
    assert img.row(2) == [0, 0x01020304, 0]


def test_put_pixel_keeps_only_pixel_bits():
    img = Image(2, 1, 16)
    img.put_pixel(0, 0, 0x123456)
    assert img.get_pixel(0, 0) == 0x3456


def test_negative_color_is_masked():
    img = Image(1, 1)
    img.put_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_range_pixel(x, y):
    img = Image(4, 3)
    with pytest.raises(IndexError):
        img.put_pixel(x, y, 1)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)


def test_row_out_of_range():
    with pytest.raises(IndexError):
        Image(2, 2).row(2)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0, "height": 1},
        {"width": 1, "height": -1},
        {"width": 1, "height": 1, "bits_per_pixel": 12},
        {"width": 1, "height": 1, "bits_per_pixel": 0},
        {"width": 1, "height": 1, "byte_order": 2},
    ],
)
def test_invalid_parameters(kwargs):
    with pytest.raises(ValueError):
        Image(**kwargs)