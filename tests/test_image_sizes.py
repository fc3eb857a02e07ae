from autothumbs.models.thumbnail import ImageSizePreset
from autothumbs.utils.formatters import format_image_size_label
from autothumbs.utils.image_sizes import (
    BUILTIN_IMAGE_SIZES,
    list_available_image_size_presets,
    parse_image_sizes,
    sized_image_url,
)


def test_builtin_presets_include_the_default_size():
    presets = list_available_image_size_presets(extra="")

    assert "shop_thumbnail" in presets
    assert presets == BUILTIN_IMAGE_SIZES


def test_extra_sizes_are_merged_and_override_builtins():
    presets = list_available_image_size_presets(extra="banner:1200x400:crop, thumbnail:100x100")

    assert presets["banner"] == ImageSizePreset(name="banner", width=1200, height=400, crop=True)
    assert presets["thumbnail"] == ImageSizePreset(name="thumbnail", width=100, height=100)
    assert "large" in presets


def test_malformed_entries_are_skipped():
    presets = parse_image_sizes("wide:800, :10x10, huge:axb, ok:0x200")

    assert list(presets) == ["ok"]


def test_labels():
    assert format_image_size_label(BUILTIN_IMAGE_SIZES["shop_thumbnail"]) == "shop_thumbnail (300 x 300, cropped)"
    assert format_image_size_label(BUILTIN_IMAGE_SIZES["shop_single"]) == "shop_single (600 x auto)"
    assert format_image_size_label(ImageSizePreset(name="raw")) == "raw (auto x auto)"


def test_sized_url_adds_dimensions():
    url = sized_image_url("https://cdn.example.com/p.png", BUILTIN_IMAGE_SIZES["thumbnail"])

    assert url == "https://cdn.example.com/p.png?w=150&h=150&crop=1"


def test_sized_url_replaces_existing_dimensions():
    url = sized_image_url("https://cdn.example.com/p.png?v=2&w=50", BUILTIN_IMAGE_SIZES["shop_single"])

    assert url == "https://cdn.example.com/p.png?v=2&w=600"


def test_unknown_or_auto_size_keeps_the_url():
    assert sized_image_url("https://cdn.example.com/p.png", None) == "https://cdn.example.com/p.png"
    assert sized_image_url("https://cdn.example.com/p.png", ImageSizePreset(name="raw")) == "https://cdn.example.com/p.png"
