import pytest

from multivideo.app import scale_to_fit


def test_same_ratio_fills_box():
    assert scale_to_fit((640, 480), (320, 240)) == (320, 240)


def test_wide_image_limited_by_width():
    assert scale_to_fit((1920, 1080), (320, 240)) == (320, 180)


def test_empty_image_returns_box():
    assert scale_to_fit((0, 10), (320, 240)) == (320, 240)


@pytest.mark.parametrize(
    "image_size, box_size",
    [((100, 300), (320, 240)), ((50, 50), (200, 90)), ((7, 3), (1000, 1000))],
)
def test_result_fits_and_touches_box(image_size, box_size):
    width, height = scale_to_fit(image_size, box_size)
    assert width <= box_size[0]
    assert height <= box_size[1]
    assert width == box_size[0] or height == box_size[1]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        scale_to_fit((-1, 10), (320, 240))