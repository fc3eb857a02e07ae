# autothumbs/services/thumbnail_service.py
import logging
from ..models.category import Category
from ..models.thumbnail import (
    ResolutionResult,
    ThumbnailSettings,
    UseDefaultRendering,
    UseProductImage,
)
from .category_tree import resolve_subtree_ids

class ThumbnailSelector:
    """Pick a product image to stand in for a category without a thumbnail"""

    def __init__(self, catalog):
        self.catalog = catalog
        self.logger = logging.getLogger(__name__)

    async def select(self, category: Category, settings: ThumbnailSettings) -> ResolutionResult:
        # An explicit category image always wins
        if await self.catalog.has_explicit_thumbnail(category):
            return UseDefaultRendering()

        if settings.recurse:
            category_ids = await resolve_subtree_ids(category, self.catalog)
        else:
            category_ids = {category.category_id}

        products = await self.catalog.query_products(
            category_ids,
            has_image=True,
            limit=1,
            order=settings.order
        )
        if not products:
            self.logger.debug(f"No product image found for category {category.category_id}")
            return UseDefaultRendering()

        product = products[0]
        return UseProductImage(product_id=product.product_id, size=settings.image_size)
