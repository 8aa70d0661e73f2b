import pytest

from ohmimetro.drawings import COLS, DRAWINGS, ROWS, drawing


def test_ten_drawings_of_correct_shape():
    assert len(DRAWINGS) == 10
    for index in range(10):
        frame = drawing(index)
        assert len(frame) == ROWS
        assert all(len(row) == COLS for row in frame)
        assert all(len(pixel) == 3 for row in frame for pixel in row)


def test_pinned_pixels():
    assert drawing(0)[0][0] == (254, 0, 0)
    assert drawing(0)[1][1] == (0, 0, 0)
    assert drawing(8)[1][0] == (211, 120, 8)


@pytest.mark.parametrize("index", range(10))
def test_each_drawing_uses_one_colour_and_off(index):
    colours = {pixel for row in drawing(index) for pixel in row}
    assert (0, 0, 0) in colours
    assert len(colours) == 2


def test_eight_is_mirror_symmetric():
    frame = drawing(8)
    assert all(row == row[::-1] for row in frame)


@pytest.mark.parametrize("index", range(10))
def test_components_in_byte_range(index):
    components = [c for row in drawing(index) for pixel in row for c in pixel]
    assert len(components) == ROWS * COLS * 3
    assert min(components) >= 0
    assert max(components) <= 255


@pytest.mark.parametrize("index", [-1, 10, 100])
def test_out_of_range(index):
    with pytest.raises(IndexError):
        drawing(index)