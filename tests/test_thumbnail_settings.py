import pytest

from autothumbs.models.thumbnail import DEFAULT_IMAGE_SIZE, ProductOrder, ThumbnailSettings


def test_defaults():
    settings = ThumbnailSettings()

    assert settings.recurse is True
    assert settings.shuffle is True
    assert settings.image_size == DEFAULT_IMAGE_SIZE == "shop_thumbnail"


@pytest.mark.parametrize("value", [True, "yes", "YES", "true", " True "])
def test_enabled_values(value):
    assert ThumbnailSettings.from_values(recurse=value).recurse is True


@pytest.mark.parametrize("value", [None, False, "no", "", 1, "on", {"x": 1}])
def test_unset_or_unexpected_values_read_as_disabled(value):
    assert ThumbnailSettings.from_values(shuffle=value).shuffle is False


def test_flags_are_read_independently():
    settings = ThumbnailSettings.from_values(recurse="yes", shuffle=None, image_size="large")

    assert settings.recurse is True
    assert settings.shuffle is False
    assert settings.image_size == "large"


def test_unknown_size_is_kept_as_is():
    assert ThumbnailSettings.from_values(image_size="giant").image_size == "giant"


def test_unset_size_uses_default_preset():
    assert ThumbnailSettings.from_values().image_size == DEFAULT_IMAGE_SIZE


def test_order_follows_shuffle():
    assert ThumbnailSettings(shuffle=True).order is ProductOrder.RANDOM
    assert ThumbnailSettings(shuffle=False).order is ProductOrder.NATURAL
