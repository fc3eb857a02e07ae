# autothumbs/models/category.py
from typing import Optional
from .base import TimeStampedModel

class Category(TimeStampedModel):
    """Category model for product categorization"""
    category_id: int
    name: str
    parent_id: Optional[int] = None
    description: Optional[str] = None
    is_active: bool = True

    # Explicit thumbnail chosen by an admin, never overridden
    thumbnail_url: Optional[str] = None
