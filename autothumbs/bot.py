# autothumbs/bot.py
import asyncio
import logging
from telegram.ext import (
    Application,
    CommandHandler,
    CallbackQueryHandler,
)
from .config import Config
from .constants import (
    CB_ADMIN_PANEL,
    CB_CATEGORY,
    CB_MAIN_MENU,
    CB_SHOW_CATEGORIES,
    CB_THUMB_SETTINGS,
    CB_THUMB_SIZE,
    CB_THUMB_TOGGLE,
)
from .database.database import Database
from .handlers import (
    UserHandler,
    AdminHandler,
    CategoryThumbnailHandler,
    ThumbnailSettingsHandler,
)
from .services.settings_service import SettingsService

class DigitalShopBot:
    def __init__(self):
        """راه‌اندازی ربات"""
        Config.validate()
        self.logger = logging.getLogger(__name__)
        self.db = Database()
        self.settings_service = SettingsService(self.db)
        self.application = Application.builder().token(Config.TELEGRAM_TOKEN).build()
        self.setup_handlers()

    def setup_handlers(self):
        """تنظیم هندلرهای ربات"""
        thumbnail_handler = CategoryThumbnailHandler(self.db, settings_service=self.settings_service)
        user_handler = UserHandler(self.db, thumbnail_handler)
        admin_handler = AdminHandler(self.db)
        settings_handler = ThumbnailSettingsHandler(self.db, settings_service=self.settings_service)

        # هندلرهای پایه
        self.application.add_handler(CommandHandler("start", user_handler.start))
        self.application.add_handler(CommandHandler("categories", user_handler.show_categories))
        self.application.add_handler(CommandHandler("admin", admin_handler.admin_panel))

        # مرور دسته‌بندی‌ها
        self.application.add_handler(CallbackQueryHandler(user_handler.show_main_menu, pattern=f'^{CB_MAIN_MENU}$'))
        self.application.add_handler(CallbackQueryHandler(user_handler.show_categories, pattern=f'^{CB_SHOW_CATEGORIES}$'))
        self.application.add_handler(CallbackQueryHandler(user_handler.show_category, pattern=rf'^{CB_CATEGORY}\d+$'))

        # تنظیمات تصویر خودکار دسته‌بندی
        self.application.add_handler(CallbackQueryHandler(admin_handler.admin_panel, pattern=f'^{CB_ADMIN_PANEL}$'))
        self.application.add_handler(CallbackQueryHandler(settings_handler.show_settings, pattern=f'^{CB_THUMB_SETTINGS}$'))
        self.application.add_handler(CallbackQueryHandler(settings_handler.handle_size, pattern=f'^{CB_THUMB_SIZE}'))
        self.application.add_handler(CallbackQueryHandler(settings_handler.handle_toggle, pattern=f'^{CB_THUMB_TOGGLE}'))

    async def start(self):
        """اتصال به دیتابیس و شروع دریافت پیام‌ها"""
        await self.db.connect()
        try:
            await self.settings_service.install_defaults()

            async with self.application:
                await self.application.start()
                await self.application.updater.start_polling()
                self.logger.info("Bot is polling")
                try:
                    await asyncio.Event().wait()
                finally:
                    if self.application.updater.running:
                        await self.application.updater.stop()
                    if self.application.running:
                        await self.application.stop()
        finally:
            await self.db.close()
