import pytest

from src.config.api import ConfigError, ConversionConfig, default_config


def test_defaults():
    cfg = default_config()
    assert cfg.dpi == 150
    assert cfg.points_per_inch == 72.0
    assert cfg.output_filename == "images.pdf"
    assert cfg.extensions == ("jpg", "jpeg", "png", "tif", "tiff", "bmp", "webp")


def test_extensions_are_normalised():
    cfg = ConversionConfig(extensions=(".PNG", "Jpg", " tif "))
    assert cfg.extensions == ("png", "jpg", "tif")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"dpi": 0},
        {"points_per_inch": -1},
        {"output_filename": ""},
        {"output_filename": "sub/images.pdf"},
        {"extensions": ()},
    ],
)
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ConfigError):
        ConversionConfig(**kwargs)


def test_extensions_as_bare_string_rejected():
    with pytest.raises(ConfigError):
        ConversionConfig(extensions="png")
