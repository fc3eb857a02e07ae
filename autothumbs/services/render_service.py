# autothumbs/services/render_service.py
import logging
from typing import Dict, Optional
from ..config import Config
from ..models.category import Category
from ..models.thumbnail import (
    ImageSizePreset,
    RenderedThumbnail,
    ResolutionResult,
    UseProductImage,
)
from ..utils.image_sizes import list_available_image_size_presets, sized_image_url

class RenderService:
    """سرویس ساخت تصویر نمایشی دسته‌بندی‌ها"""

    def __init__(
        self,
        product_service,
        presets: Optional[Dict[str, ImageSizePreset]] = None,
        placeholder_url: Optional[str] = None
    ):
        self.product_service = product_service
        self.presets = presets if presets is not None else list_available_image_size_presets()
        self.placeholder_url = placeholder_url or Config.PLACEHOLDER_IMAGE_URL
        self.logger = logging.getLogger(__name__)

    async def render(self, category: Category, result: ResolutionResult) -> RenderedThumbnail:
        """ساخت خروجی بر اساس نتیجه انتخاب"""
        if isinstance(result, UseProductImage):
            rendered = await self.render_image(result.product_id, result.size, category)
            if rendered:
                return rendered
        return self.render_default_category_placeholder(category)

    async def render_image(
        self,
        product_id: int,
        size_name: str,
        category: Category
    ) -> Optional[RenderedThumbnail]:
        """تصویر محصول در اندازه خواسته شده"""
        product = await self.product_service.get_product(product_id)
        if not product or not product.has_image:
            self.logger.warning(f"Product {product_id} has no image to render")
            return None

        # An unknown size name leaves the image as stored
        preset = self.presets.get(size_name)
        return RenderedThumbnail(
            category_id=category.category_id,
            photo=sized_image_url(product.image_url, preset),
            caption=category.name
        )

    def render_default_category_placeholder(self, category: Category) -> RenderedThumbnail:
        """تصویر اختصاصی دسته‌بندی یا تصویر پیش‌فرض"""
        return RenderedThumbnail(
            category_id=category.category_id,
            photo=category.thumbnail_url or self.placeholder_url,
            caption=category.name
        )
