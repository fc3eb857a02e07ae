# autothumbs/handlers/thumbnail_handler.py
import logging
from telegram.ext import ContextTypes
from .base_handler import BaseHandler
from ..models.category import Category
from ..models.thumbnail import RenderedThumbnail
from ..services.catalog import DatabaseCatalog
from ..services.product_service import ProductService
from ..services.render_service import RenderService
from ..services.settings_service import SettingsService
from ..services.thumbnail_service import ThumbnailSelector

class CategoryThumbnailHandler(BaseHandler):
    """نمایش تصویر هر زیردسته، با تصویر یکی از محصولاتش در صورت نبود تصویر اختصاصی"""

    def __init__(
        self,
        db,
        catalog=None,
        settings_service=None,
        render_service=None
    ):
        super().__init__(db)
        self.catalog = catalog or DatabaseCatalog(db)
        self.selector = ThumbnailSelector(self.catalog)
        self.settings_service = settings_service or SettingsService(db)
        self.render_service = render_service or RenderService(ProductService(db))
        self.logger = logging.getLogger(__name__)

    async def thumbnail_for(self, category: Category) -> RenderedThumbnail:
        """انتخاب و ساخت تصویر یک دسته‌بندی"""
        settings = await self.settings_service.get_thumbnail_settings()
        result = await self.selector.select(category, settings)
        return await self.render_service.render(category, result)

    async def send_subcategory_thumbnail(
        self,
        context: ContextTypes.DEFAULT_TYPE,
        chat_id: int,
        category: Category
    ):
        """ارسال تصویر یک زیردسته در گفتگو"""
        thumbnail = await self.thumbnail_for(category)
        await context.bot.send_photo(
            chat_id=chat_id,
            photo=thumbnail.photo,
            caption=thumbnail.caption,
            reply_markup=self.keyboards.category_button(category)
        )
