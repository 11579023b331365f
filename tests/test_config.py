import dataclasses

import pytest

from tracktime.core.config import SCALE_INSET, TrackConfig
from tracktime.core.errors import InvalidConfigurationError


def test_defaults_and_fallback_size():
    cfg = TrackConfig.from_options({"container": "c"}, fallback_size=(640, 480))
    assert (cfg.width, cfg.height) == (640, 480)
    assert cfg.unit1 == 1
    assert cfg.duration == 3600
    assert cfg.top == 0
    assert cfg.left == 10
    assert cfg.gap == 40
    assert cfg.item_height == 20
    assert cfg.scale_left == 10 + SCALE_INSET


def test_explicit_options_and_item_height_alias():
    cfg = TrackConfig.from_options(
        {"width": 300, "height": None, "itemHeight": 12, "left": 0}, (640, 480)
    )
    assert cfg.width == 300
    assert cfg.height == 480  # None falls back too
    assert cfg.item_height == 12
    assert cfg.scale_left == SCALE_INSET
    assert TrackConfig.from_options({"item_height": 8}, (1, 1)).item_height == 8


def test_config_is_frozen():
    cfg = TrackConfig(width=100, height=100)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.gap = 5  # type: ignore[misc]


@pytest.mark.parametrize(
    "options",
    [
        {"unit1": 0},
        {"unit1": -2},
        {"gap": 0},
        {"item_height": 0},
        {"duration": -1},
        {"gap": "wide"},
        {"width": True},
    ],
)
def test_invalid_configuration(options):
    with pytest.raises(InvalidConfigurationError):
        TrackConfig.from_options(options, (100, 100))


def test_zero_duration_is_allowed():
    assert TrackConfig.from_options({"duration": 0}, (100, 100)).duration == 0
