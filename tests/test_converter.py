import pytest

from ohmimetro.converter import argb_to_rgb, format_frames, frames_to_rgb, main


def test_argb_example_from_listing():
    assert argb_to_rgb(0xFFFF0200) == (0, 2, 255)


@pytest.mark.parametrize("low, mid, high", [(0, 0, 0), (1, 2, 3), (255, 128, 7), (9, 255, 255)])
def test_argb_round_trip(low, mid, high):
    packed = (high << 16) | (mid << 8) | low
    assert argb_to_rgb(packed) == (low, mid, high)


def test_alpha_is_ignored():
    assert argb_to_rgb(0xAB123456) == argb_to_rgb(0x00123456)


def test_frames_shape_and_order():
    values = list(range(25))
    frames = frames_to_rgb([values])
    assert len(frames) == 1
    assert len(frames[0]) == 5
    assert all(len(row) == 5 for row in frames[0])
    assert [pixel[0] for row in frames[0] for pixel in row] == values


def test_short_frame_is_padded():
    frames = frames_to_rgb([[0x00FFFFFF]], rows=2, cols=2)
    assert frames[0][0][0] == (255, 255, 255)
    assert [frames[0][0][1], frames[0][1][0], frames[0][1][1]] == [(0, 0, 0)] * 3


def test_too_long_frame_rejected():
    with pytest.raises(ValueError):
        frames_to_rgb([[0] * 26])


def test_format_single_pixel():
    assert format_frames([[[(1, 2, 3)]]]) == "\n{\n    {{1, 2, 3}}\n},\n\n"


def test_format_structure():
    text = format_frames(frames_to_rgb([[0] * 25, [0] * 25]))
    assert text.count("\n{\n") == 2
    assert text.endswith("},\n\n")
    assert text.count("    {") == 10
    assert text.count("{0, 0, 0}") == 50


def test_main_reads_file(tmp_path, capsys):
    values = [0xFF0000FF, 0xFF00FF00] + [0] * 23 + [0xFFFF0000]
    source = tmp_path / "frames.c"
    source.write_text(
        "uint32_t frames[] = {" + ", ".join(hex(v) for v in values) + "};\n",
        encoding="utf-8",
    )
    assert main([str(source)]) == 0
    out = capsys.readouterr().out
    assert out == format_frames(frames_to_rgb([values[:25], values[25:]]))


def test_main_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "absent.c")])