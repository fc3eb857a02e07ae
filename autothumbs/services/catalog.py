# autothumbs/services/catalog.py
from typing import Iterable, List, Protocol
from ..models.category import Category
from ..models.product import Product
from ..models.thumbnail import ProductOrder
from .category_service import CategoryService
from .product_service import ProductService

class CatalogPort(Protocol):
    """Read-only catalog capabilities the thumbnail selector depends on"""

    async def get_children(self, parent_id: int) -> List[Category]:
        ...

    async def has_explicit_thumbnail(self, category: Category) -> bool:
        ...

    async def query_products(
        self,
        category_ids: Iterable[int],
        has_image: bool = True,
        limit: int = 1,
        order: ProductOrder = ProductOrder.NATURAL
    ) -> List[Product]:
        ...

class DatabaseCatalog:
    """Catalog port backed by the shop database"""

    def __init__(self, db):
        self.category_service = CategoryService(db)
        self.product_service = ProductService(db)

    async def get_children(self, parent_id: int) -> List[Category]:
        return await self.category_service.get_subcategories(parent_id)

    async def has_explicit_thumbnail(self, category: Category) -> bool:
        return await self.category_service.has_explicit_thumbnail(category.category_id)

    async def query_products(
        self,
        category_ids: Iterable[int],
        has_image: bool = True,
        limit: int = 1,
        order: ProductOrder = ProductOrder.NATURAL
    ) -> List[Product]:
        return await self.product_service.query_products(
            category_ids,
            has_image=has_image,
            limit=limit,
            order=order
        )
