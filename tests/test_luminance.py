import pytest

from asciimage.errors import EmptyRampError
from asciimage.luminance import luminance, ramp_index, scale
from asciimage.model import ColorSample


def test_luminance_is_midpoint_of_extremes():
    assert luminance(ColorSample(255, 0, 0)) == 127
    assert luminance(ColorSample(10, 20, 31)) == 20
    assert luminance(ColorSample(255, 255, 255)) == 255
    assert luminance(ColorSample(0, 0, 0)) == 0


def test_luminance_between_min_and_max():
    for r, g, b in [(0, 128, 255), (3, 3, 4), (200, 17, 90), (1, 0, 0)]:
        sample = ColorSample(r, g, b)
        assert sample.min_value <= luminance(sample) <= sample.max_value


def test_scale_is_linear():
    assert scale(0, 0, 255, 0, 6) == 0
    assert scale(255, 0, 255, 0, 6) == pytest.approx(6)
    assert scale(5, 0, 10, 100, 200) == pytest.approx(150)


def test_single_entry_ramp_never_divides_by_zero():
    for v in range(256):
        assert scale(v, 0, 255, 0, 0) == 0
        assert ramp_index(v, 1) == 0


def test_ramp_index_truncates():
    assert [ramp_index(v, 2) for v in (0, 64, 128, 254, 255)] == [0, 0, 0, 0, 1]
    assert ramp_index(255, 7) == 6
    assert ramp_index(127, 7) == 2  # 2.988...


def test_ramp_index_covers_every_entry():
    indices = {ramp_index(v, 10) for v in range(256)}
    assert indices == set(range(10))


def test_empty_ramp():
    with pytest.raises(EmptyRampError):
        ramp_index(10, 0)
