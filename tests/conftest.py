from contextlib import asynccontextmanager
from typing import Dict, List, Optional

import pytest

from autothumbs.models.category import Category
from autothumbs.models.product import Product
from autothumbs.models.thumbnail import ProductOrder, ThumbnailSettings


def make_category(category_id: int, parent_id: Optional[int] = None, **kwargs) -> Category:
    return Category(
        category_id=category_id,
        name=kwargs.pop("name", f"Category {category_id}"),
        parent_id=parent_id,
        **kwargs
    )


def make_product(product_id: int, category_id: int, image_url: Optional[str] = "https://cdn.example.com/p.png", **kwargs) -> Product:
    return Product(
        product_id=product_id,
        category_id=category_id,
        name=kwargs.pop("name", f"Product {product_id}"),
        image_url=image_url,
        **kwargs
    )


class FakeCatalog:
    """In-memory catalog recording every call made through the catalog port"""

    def __init__(self, categories: List[Category] = (), products: List[Product] = ()):
        self.categories = {c.category_id: c for c in categories}
        self.products = list(products)
        self.failing_parents = set()
        self.malformed_parents = {}
        self.children_calls: List[int] = []
        self.product_queries: List[dict] = []

    async def get_children(self, parent_id: int):
        self.children_calls.append(parent_id)
        if parent_id in self.failing_parents:
            raise ConnectionError("catalog unavailable")
        if parent_id in self.malformed_parents:
            return self.malformed_parents[parent_id]
        return [c for c in self.categories.values() if c.parent_id == parent_id]

    async def has_explicit_thumbnail(self, category: Category) -> bool:
        return bool(self.categories.get(category.category_id, category).thumbnail_url)

    async def query_products(self, category_ids, has_image=True, limit=1, order=ProductOrder.NATURAL):
        self.product_queries.append({
            "category_ids": set(category_ids),
            "has_image": has_image,
            "limit": limit,
            "order": order,
        })
        matches = [
            p for p in self.products
            if p.is_active and p.category_id in set(category_ids) and (p.has_image or not has_image)
        ]
        return matches[:limit]

    async def get_product(self, product_id: int) -> Optional[Product]:
        for product in self.products:
            if product.product_id == product_id and product.is_active:
                return product
        return None


class FakeSettingsService:
    def __init__(self, settings: ThumbnailSettings = None):
        self.settings = settings or ThumbnailSettings()
        self.reads = 0
        self.updates = []

    async def get_thumbnail_settings(self) -> ThumbnailSettings:
        self.reads += 1
        return self.settings

    async def update_setting(self, key, value):
        self.updates.append((key, value))
        field = key.rsplit("_", 1)[-1]
        field = "image_size" if field == "size" else field
        self.settings = self.settings.model_copy(update={field: value})
        return True


class FakeConnection:
    """Just enough of an asyncpg connection for the settings table"""

    def __init__(self, rows: Dict[str, dict]):
        self.rows = rows

    async def fetchrow(self, query, key):
        return self.rows.get(key)

    async def execute(self, query, key, value, type_):
        if "DO NOTHING" in query and key in self.rows:
            return "INSERT 0 0"
        self.rows[key] = {"value": value, "type": type_}
        return "INSERT 0 1"


class FakePool:
    def __init__(self):
        self.rows: Dict[str, dict] = {}

    @asynccontextmanager
    async def acquire(self):
        yield FakeConnection(self.rows)


class FakeDatabase:
    def __init__(self):
        self.pool = FakePool()


class RecordingConnection:
    """Captures the SQL and arguments sent to asyncpg and replays canned results"""

    def __init__(self, results=None):
        self.results = results or {}
        self.calls: List[tuple] = []

    async def _call(self, method, query, args):
        self.calls.append((method, " ".join(query.split()), args))
        return self.results.get(method)

    async def fetch(self, query, *args):
        return await self._call("fetch", query, args) or []

    async def fetchrow(self, query, *args):
        return await self._call("fetchrow", query, args)

    async def fetchval(self, query, *args):
        return await self._call("fetchval", query, args)


class RecordingDatabase:
    def __init__(self, **results):
        self.conn = RecordingConnection(results)
        self.pool = self

    @asynccontextmanager
    async def acquire(self):
        yield self.conn


@pytest.fixture
def shoes_catalog():
    """Shoes (5) with children 6 and 7, a sibling (4) and a parent (1)"""
    return FakeCatalog(
        categories=[
            make_category(1, name="Apparel"),
            make_category(4, parent_id=1, name="Hats"),
            make_category(5, parent_id=1, name="Shoes"),
            make_category(6, parent_id=5, name="Boots"),
            make_category(7, parent_id=5, name="Sandals"),
            make_category(8, parent_id=7, name="Flip-flops"),
        ],
        products=[
            make_product(10, 4, image_url="https://cdn.example.com/hat.png"),
            make_product(11, 6, image_url=None),
            make_product(99, 7, image_url="https://cdn.example.com/sandal.png"),
        ],
    )


@pytest.fixture
def fake_db():
    return FakeDatabase()
