# autothumbs/handlers/thumbnail_settings_handler.py
import logging
from telegram import Update
from telegram.ext import ContextTypes
from .base_handler import BaseHandler
from ..constants import CB_THUMB_SIZE, CB_THUMB_TOGGLE, SETTING_IMAGE_SIZE, TOGGLE_SETTINGS
from ..services.settings_service import SettingsService
from ..utils.image_sizes import list_available_image_size_presets

class ThumbnailSettingsHandler(BaseHandler):
    """بخش تنظیمات تصویر خودکار دسته‌بندی در پنل ادمین"""

    def __init__(self, db, settings_service=None):
        super().__init__(db)
        self.settings_service = settings_service or SettingsService(db)
        self.logger = logging.getLogger(__name__)

    async def show_settings(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """نمایش تنظیمات فعلی"""
        query = update.callback_query
        await query.answer()

        if not await self.is_admin(query.from_user.id):
            await query.edit_message_text(self.messages.ACCESS_DENIED)
            return

        await self._render_settings(query)

    async def handle_size(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """ذخیره اندازه تصویر انتخاب شده"""
        query = update.callback_query
        size_name = query.data[len(CB_THUMB_SIZE):]
        if size_name not in list_available_image_size_presets():
            await query.answer("⚠️ اندازه نامعتبر", show_alert=True)
            return
        await query.answer()

        if not await self.is_admin(query.from_user.id):
            await query.edit_message_text(self.messages.ACCESS_DENIED)
            return

        # Redrawing an unchanged panel is rejected by Telegram
        settings = await self.settings_service.get_thumbnail_settings()
        if size_name == settings.image_size:
            return

        await self.settings_service.update_setting(SETTING_IMAGE_SIZE, size_name)
        self.logger.info(f"Admin {query.from_user.id} set thumbnail size to {size_name}")
        await self._render_settings(query)

    async def handle_toggle(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """روشن/خاموش کردن جستجو در زیردسته‌ها یا انتخاب تصادفی"""
        query = update.callback_query
        option = query.data[len(CB_THUMB_TOGGLE):]
        key = TOGGLE_SETTINGS.get(option)
        if key is None:
            await query.answer("⚠️ دستور نامعتبر", show_alert=True)
            return
        await query.answer()

        if not await self.is_admin(query.from_user.id):
            await query.edit_message_text(self.messages.ACCESS_DENIED)
            return

        settings = await self.settings_service.get_thumbnail_settings()
        enabled = not getattr(settings, option)
        await self.settings_service.update_setting(key, enabled)
        self.logger.info(f"Admin {query.from_user.id} set {key} to {enabled}")
        await self._render_settings(query)

    async def _render_settings(self, query):
        settings = await self.settings_service.get_thumbnail_settings()
        presets = list_available_image_size_presets()
        await query.edit_message_text(
            self.messages.thumbnail_settings(settings, presets),
            reply_markup=self.keyboards.thumbnail_settings_menu(settings, presets)
        )
