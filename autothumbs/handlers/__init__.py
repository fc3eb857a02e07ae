"""ماژول هندلرها"""
from .user_handlers import UserHandler
from .admin_handlers import AdminHandler
from .thumbnail_handler import CategoryThumbnailHandler
from .thumbnail_settings_handler import ThumbnailSettingsHandler

__all__ = [
    'UserHandler',
    'AdminHandler',
    'CategoryThumbnailHandler',
    'ThumbnailSettingsHandler',
]
