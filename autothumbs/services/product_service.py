# autothumbs/services/product_service.py
from typing import Iterable, List, Optional
from ..models.product import Product
from ..models.thumbnail import ProductOrder

# Only these clauses are ever interpolated into the query
ORDER_CLAUSES = {
    ProductOrder.NATURAL: "p.created_at DESC NULLS LAST, p.product_id DESC",
    ProductOrder.RANDOM: "random()",
}

class ProductService:
    def __init__(self, db):
        self.db = db

    async def get_product(self, product_id: int) -> Optional[Product]:
        """دریافت اطلاعات محصول"""
        async with self.db.pool.acquire() as conn:
            product = await conn.fetchrow("""
                SELECT p.*
                FROM products p
                WHERE p.product_id = $1 AND p.is_active = true
            """, product_id)
            return Product.model_validate(dict(product)) if product else None

    async def query_products(
        self,
        category_ids: Iterable[int],
        has_image: bool = True,
        limit: int = 1,
        order: ProductOrder = ProductOrder.NATURAL
    ) -> List[Product]:
        """جستجوی محصولات منتشر شده در مجموعه‌ای از دسته‌بندی‌ها"""
        conditions = ["p.is_active = true", "p.category_id = ANY($1::int[])"]
        if has_image:
            conditions.append("p.image_url IS NOT NULL AND p.image_url <> ''")

        query = f"""
            SELECT p.*
            FROM products p
            WHERE {' AND '.join(conditions)}
            ORDER BY {ORDER_CLAUSES[ProductOrder(order)]}
            LIMIT $2
        """

        async with self.db.pool.acquire() as conn:
            products = await conn.fetch(query, sorted(category_ids), limit)
            return [Product.model_validate(dict(p)) for p in products]
