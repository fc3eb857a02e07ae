# autothumbs/utils/image_sizes.py
import logging
from typing import Dict, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit
from ..config import Config
from ..models.thumbnail import ImageSizePreset

logger = logging.getLogger(__name__)

BUILTIN_IMAGE_SIZES: Dict[str, ImageSizePreset] = {
    preset.name: preset for preset in (
        ImageSizePreset(name="thumbnail", width=150, height=150, crop=True),
        ImageSizePreset(name="shop_thumbnail", width=300, height=300, crop=True),
        ImageSizePreset(name="medium", width=300, height=300),
        ImageSizePreset(name="shop_single", width=600, height=0),
        ImageSizePreset(name="large", width=1024, height=1024),
    )
}

def parse_image_sizes(spec: str) -> Dict[str, ImageSizePreset]:
    """Parse ``name:WxH[:crop]`` entries separated by commas"""
    presets = {}
    for entry in spec.split(","):
        entry = entry.strip()
        if not entry:
            continue

        parts = entry.split(":")
        try:
            name, dimensions = parts[0].strip(), parts[1]
            width, height = (int(value) for value in dimensions.lower().split("x"))
        except (IndexError, ValueError):
            logger.warning(f"Ignoring malformed image size {entry!r}")
            continue

        if not name or width < 0 or height < 0:
            logger.warning(f"Ignoring malformed image size {entry!r}")
            continue

        crop = len(parts) > 2 and parts[2].strip().lower() == "crop"
        presets[name] = ImageSizePreset(name=name, width=width, height=height, crop=crop)
    return presets

def list_available_image_size_presets(extra: Optional[str] = None) -> Dict[str, ImageSizePreset]:
    """Built-in presets merged with the ones declared in EXTRA_IMAGE_SIZES"""
    presets = dict(BUILTIN_IMAGE_SIZES)
    presets.update(parse_image_sizes(Config.EXTRA_IMAGE_SIZES if extra is None else extra))
    return presets

def sized_image_url(image_url: str, preset: Optional[ImageSizePreset]) -> str:
    """Ask the image host for the preset's size via query parameters"""
    if preset is None:
        return image_url

    params = {}
    if preset.width:
        params["w"] = preset.width
    if preset.height:
        params["h"] = preset.height
    if preset.crop:
        params["crop"] = 1
    if not params:
        return image_url

    scheme, netloc, path, query, fragment = urlsplit(image_url)
    query_items = [
        (key, value) for key, value in parse_qsl(query, keep_blank_values=True)
        if key not in ("w", "h", "crop")
    ]
    query_items.extend(params.items())
    return urlunsplit((scheme, netloc, path, urlencode(query_items), fragment))
