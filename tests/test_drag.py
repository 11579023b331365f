from tracktime.core.drag import (
    OffsetBound,
    PanState,
    Position,
    constrain_surface,
    constrain_to_offset,
    surface_bound,
)


def test_constrain_to_offset_never_below_offset():
    for offset in (0.0, -5.0, -20.0, -1000.0):
        for x in (-2000.0, -30.0, -20.0, -1.0, 0.0, 5.0, 400.0):
            pos = constrain_to_offset(Position(x, 99.0), 12.0, offset)
            assert pos.x == max(x, offset)
            assert pos.x >= offset
            assert pos.y == 12.0


def test_constrain_surface_never_above_zero():
    for x in (-500.0, -0.5, 0.0, 0.5, 300.0):
        pos = constrain_surface(Position(x, -40.0), 3.0)
        assert pos.x == min(x, 0.0)
        assert pos == surface_bound(Position(x, -40.0), 3.0)
        assert pos.y == 3.0


def test_offset_bound_reads_pan_state_fresh():
    pan = PanState()
    bound = OffsetBound(pan)
    assert bound(Position(-30, 0), 0) == Position(0, 0)
    pan.offset = -20
    assert bound(Position(-30, 0), 0) == Position(-20, 0)
    assert bound(Position(5, 0), 0) == Position(5, 0)
