import numpy as np
import pytest

from asciitile.image import Image
from asciitile.tiling import next_power_of_two, pad, padding, tile


def make_image(width, height, colour=(0, 0, 0)):
    return Image.filled(width, height, colour)


def test_next_power_of_two():
    assert [next_power_of_two(n) for n in (0, 1, 2, 3, 5, 64, 65)] == [1, 1, 2, 4, 8, 64, 128]


@pytest.mark.parametrize("width,height", [(1, 1), (3, 5), (100, 37), (128, 64), (129, 7)])
def test_pad_dimensions_are_powers_of_two(width, height):
    padded = pad(make_image(width, height))
    for original, new in ((width, padded.width), (height, padded.height)):
        assert new >= original
        assert new & (new - 1) == 0


def test_pad_rounds_each_axis_independently():
    padded = pad(make_image(100, 10))
    assert padded.size == (128, 16)


def test_pad_centers_with_residue_on_bottom_right():
    padded = pad(make_image(5, 3))  # -> 8 x 4
    assert padded.size == (8, 4)
    top, left = padding(5, 3)
    assert (top, left) == (0, 1)
    black = (padded.pixels == 0).all(axis=2)
    rows, cols = np.nonzero(black)
    assert (rows.min(), rows.max()) == (0, 2)
    assert (cols.min(), cols.max()) == (1, 5)
    # trailing edges carry the extra white column/row
    assert padded.pixel(3, 0) == (255, 255, 255)
    assert padded.pixel(0, 7) == (255, 255, 255)
    assert padded.pixel(0, 6) == (255, 255, 255)


def test_pad_fills_white():
    padded = pad(make_image(3, 3))  # -> 4 x 4, no leading padding
    assert padded.pixel(0, 0) == (0, 0, 0)
    assert padded.pixel(3, 0) == (255, 255, 255)
    assert padded.pixel(0, 3) == (255, 255, 255)
    assert padded.pixel(3, 3) == (255, 255, 255)


def test_pad_power_of_two_is_unchanged():
    image = make_image(16, 8)
    assert pad(image) is image


def test_tile_grid_shape():
    tiles = tile(pad(make_image(64, 32)), 8)  # side 8
    assert len(tiles) == 4
    assert all(len(row) == 8 for row in tiles)
    assert tiles[0][0].size == (8, 8)


def test_tile_non_dividing_resolution_drops_remainder():
    tiles = tile(make_image(16, 16), 3)  # side 5, 3x3 grid, 1px dropped
    assert len(tiles) == 3
    assert all(len(row) == 3 for row in tiles)
    assert tiles[2][2].size == (5, 5)


def test_tile_contents_come_from_position():
    pixels = np.zeros((4, 4, 3), dtype=np.uint8)
    pixels[2:, 2:] = 200
    tiles = tile(Image(pixels), 2)
    assert tiles[1][1].pixel(0, 0) == (200, 200, 200)
    assert tiles[0][1].pixel(0, 0) == (0, 0, 0)


def test_tile_rejects_resolution_wider_than_image():
    with pytest.raises(ValueError):
        tile(make_image(4, 4), 8)
    with pytest.raises(ValueError):
        tile(make_image(4, 4), 0)


def test_image_is_read_only():
    image = make_image(2, 2)
    with pytest.raises(ValueError):
        image.pixels[0, 0] = 1


def test_image_rejects_bad_shape():
    with pytest.raises(ValueError):
        Image(np.zeros((2, 2), dtype=np.uint8))
