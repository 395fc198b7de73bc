import pytest
from PIL import Image

from pendulumviz.colorgen import generate_color_value, generate_image, main


def test_origin_values():
    assert generate_color_value(0, 0, 0) == 128
    assert generate_color_value(0, 0, 1) == 0
    assert generate_color_value(0, 0, 2) == 0


@pytest.mark.parametrize("channel", [0, 1, 2])
def test_values_in_byte_range(channel):
    for x in range(0, 1040, 97):
        for y in range(0, 1040, 89):
            value = generate_color_value(x, y, channel)
            assert 0 <= value <= 255


def test_deterministic():
    first = generate_image(6, 5)
    second = generate_image(6, 5)
    assert first.tobytes() == second.tobytes()
    assert first.getpixel((0, 0))[0] == 128


def test_unknown_channel_is_zero():
    assert generate_color_value(10, 20, 3) == 0
    assert generate_color_value(500, 7, 9) == 0


def test_channels_differ_somewhere():
    samples = [
        (generate_color_value(x, y, 0), generate_color_value(x, y, 1))
        for x in range(0, 200, 13)
        for y in range(0, 200, 17)
    ]
    assert any(a != b for a, b in samples)


def test_generate_image_size_and_pixels():
    image = generate_image(5, 4)
    assert image.size == (5, 4)
    assert image.mode == "RGB"
    r, g, b = image.getpixel((2, 3))
    assert r == generate_color_value(2, 3, 0)
    assert g == generate_color_value(2 + 3, 3 + 11, 1)
    assert b == generate_color_value(2 + 17, 3 + 7, 2)


def test_generate_image_rejects_empty():
    with pytest.raises(ValueError):
        generate_image(0, 10)


def test_main_writes_file(tmp_path):
    out = tmp_path / "img.png"
    assert main(["--output", str(out), "--width", "4", "--height", "3"]) == 0
    with Image.open(out) as loaded:
        assert loaded.size == (4, 3)
        assert loaded.getpixel((0, 0)) == generate_image(4, 3).getpixel((0, 0))