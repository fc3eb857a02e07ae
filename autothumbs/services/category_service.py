# autothumbs/services/category_service.py
from typing import List, Optional
from ..models.category import Category

class CategoryService:
    """سرویس خواندن دسته‌بندی‌ها"""

    def __init__(self, db):
        self.db = db

    async def get_category(self, category_id: int) -> Optional[Category]:
        """دریافت اطلاعات دسته‌بندی"""
        async with self.db.pool.acquire() as conn:
            category = await conn.fetchrow("""
                SELECT *
                FROM categories
                WHERE category_id = $1
            """, category_id)
            return Category.model_validate(dict(category)) if category else None

    async def get_root_categories(self) -> List[Category]:
        """دریافت دسته‌بندی‌های اصلی"""
        async with self.db.pool.acquire() as conn:
            categories = await conn.fetch("""
                SELECT *
                FROM categories
                WHERE parent_id IS NULL AND is_active = true
                ORDER BY name
            """)
            return [Category.model_validate(dict(category)) for category in categories]

    async def get_subcategories(self, parent_id: int, active_only: bool = False) -> List[Category]:
        """دریافت زیردسته‌های یک دسته‌بندی (حتی دسته‌های بدون محصول)"""
        active_filter = " AND is_active = true" if active_only else ""
        async with self.db.pool.acquire() as conn:
            subcategories = await conn.fetch(f"""
                SELECT *
                FROM categories
                WHERE parent_id = $1{active_filter}
                ORDER BY name
            """, parent_id)
            return [Category.model_validate(dict(category)) for category in subcategories]

    async def has_explicit_thumbnail(self, category_id: int) -> bool:
        """بررسی تنظیم بودن تصویر اختصاصی برای دسته‌بندی"""
        async with self.db.pool.acquire() as conn:
            thumbnail_url = await conn.fetchval("""
                SELECT thumbnail_url
                FROM categories
                WHERE category_id = $1
            """, category_id)
            return bool(thumbnail_url)
