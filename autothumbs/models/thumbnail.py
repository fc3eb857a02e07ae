# autothumbs/models/thumbnail.py
from enum import Enum
from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict

DEFAULT_IMAGE_SIZE = "shop_thumbnail"

_TRUTHY_VALUES = ("yes", "true")

class ProductOrder(str, Enum):
    """Ordering requested from the product query"""
    NATURAL = "natural"  # newest first
    RANDOM = "random"

def _is_enabled(value: Any) -> bool:
    if value is True:
        return True
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY_VALUES
    return False

class ThumbnailSettings(BaseModel):
    """Options read by the thumbnail selector, built fresh for every call"""
    recurse: bool = True
    shuffle: bool = True
    image_size: str = DEFAULT_IMAGE_SIZE

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_values(
        cls,
        recurse: Any = None,
        shuffle: Any = None,
        image_size: Optional[str] = None
    ) -> "ThumbnailSettings":
        """Build settings from raw stored values.

        Flags are only enabled by ``True`` or a "yes"/"true" string, so an unset
        or unexpected value reads as disabled. The size name is kept as-is and
        only an unset size falls back to the default preset.
        """
        return cls(
            recurse=_is_enabled(recurse),
            shuffle=_is_enabled(shuffle),
            image_size=DEFAULT_IMAGE_SIZE if image_size is None else str(image_size),
        )

    @property
    def order(self) -> ProductOrder:
        return ProductOrder.RANDOM if self.shuffle else ProductOrder.NATURAL

class UseProductImage(BaseModel):
    """Render this product's image at the given size"""
    product_id: int
    size: str

    model_config = ConfigDict(frozen=True)

class UseDefaultRendering(BaseModel):
    """Leave the category to the default placeholder rendering"""

    model_config = ConfigDict(frozen=True)

ResolutionResult = Union[UseProductImage, UseDefaultRendering]

class ImageSizePreset(BaseModel):
    """Named rendering size; a zero dimension means auto"""
    name: str
    width: int = 0
    height: int = 0
    crop: bool = False

class RenderedThumbnail(BaseModel):
    """Photo and caption sent for one subcategory"""
    category_id: int
    photo: str
    caption: str
