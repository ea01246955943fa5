import pytest

from annotation_canvas.config import CanvasConfig
from annotation_canvas.exceptions import ConfigError


def test_default_config():
    config = CanvasConfig()

    assert config.default_color == "#000000"
    assert config.default_width == 2.0
    assert config.device_pixel_ratio == 1.0
    assert config.min_point_distance == 0.0


def test_from_dict_ignores_unknown_keys():
    config = CanvasConfig.from_dict({"device_pixel_ratio": 2, "theme": "dark"})

    assert config.device_pixel_ratio == 2


@pytest.mark.parametrize(
    "data",
    [
        {"device_pixel_ratio": 0},
        {"device_pixel_ratio": -1.5},
        {"default_width": -1},
        {"min_point_distance": -0.1},
        {"default_color": "not-a-color"},
        {"device_pixel_ratio": "two"},
    ],
)
def test_invalid_config(data):
    with pytest.raises(ConfigError):
        CanvasConfig.from_dict(data)
