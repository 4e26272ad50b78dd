from asciimage.errors import EmptyRampError
from asciimage.model import ColorSample


def luminance(sample: ColorSample) -> int:
    """HSL lightness of a sample: midpoint of its largest and smallest channel."""
    return (sample.max_value + sample.min_value) // 2


def scale(value: float, value_lo: float, value_hi: float, target_lo: float, target_hi: float) -> float:
    """Map ``value`` linearly from [value_lo, value_hi] onto [target_lo, target_hi].

    No clamping is done; callers keep ``value`` inside the input range.
    """
    return target_lo + (value - value_lo) * (target_hi - target_lo) / (value_hi - value_lo)


def ramp_index(value: int, ramp_length: int) -> int:
    """Index into a ramp of ``ramp_length`` entries for a 0-255 value."""
    if ramp_length < 1:
        raise EmptyRampError("Ramp is empty")
    return int(scale(value, 0, 255, 0, ramp_length - 1))
