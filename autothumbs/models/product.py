# autothumbs/models/product.py
from decimal import Decimal
from typing import Optional
from .base import TimeStampedModel

class Product(TimeStampedModel):
    """Product model for digital goods"""
    product_id: int
    category_id: int
    name: str
    description: Optional[str] = None
    price: Decimal = Decimal(0)
    stock: int = 0
    is_active: bool = True
    image_url: Optional[str] = None

    @property
    def has_image(self) -> bool:
        return bool(self.image_url)
