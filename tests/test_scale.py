from tracktime.core.config import TrackConfig
from tracktime.core.scale import ScaleModel


def _scale(**kw):
    return ScaleModel(TrackConfig(width=800, height=300, **kw))


def test_width_in_pixels():
    scale = _scale(unit1=2, gap=10)
    assert scale.width_in_pixels(50) == 250
    assert scale.width_in_pixels(0) == 0
    assert scale.width_in_pixels(-4) == -20


def test_width_is_monotonic():
    scale = _scale(unit1=0.5, gap=7)
    widths = [scale.width_in_pixels(d) for d in (0, 0.25, 1, 3, 10, 99.5)]
    assert widths == sorted(widths)
    assert len(set(widths)) == len(widths)


def test_pixel_offset_and_inverse():
    scale = _scale(left=10, gap=40)
    assert scale.pixel_offset(0) == 30
    assert scale.pixel_offset(3) == 150
    assert scale.time_at(150) == 3.0
    assert _scale(left=10, gap=40, unit1=5).time_at(150) == 15.0


def test_total_ticks_and_ruler_length():
    scale = _scale(duration=100, unit1=4, gap=10)
    assert scale.total_ticks == 25
    assert scale.ruler_length == 250


def test_fractional_ticks_are_truncated():
    scale = _scale(duration=10.5, unit1=1, gap=10, left=0)
    ticks = list(scale.ticks())
    assert scale.total_ticks == 10.5
    assert [t.index for t in ticks] == list(range(11))
    assert [t.index for t in ticks if t.major] == [0, 5, 10]
    assert ticks[2].x == 20 + 20


def test_empty_ruler():
    assert list(_scale(duration=0).ticks()) == []
