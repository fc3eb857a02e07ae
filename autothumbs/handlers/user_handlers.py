# autothumbs/handlers/user_handlers.py
from typing import List
from telegram import Update
from telegram.ext import ContextTypes
from .base_handler import BaseHandler
from ..models.category import Category
from ..services.category_service import CategoryService

class UserHandler(BaseHandler):
    """هندلر دستورات کاربر عادی"""
    def __init__(self, db, thumbnail_handler):
        super().__init__(db)
        self.category_service = CategoryService(db)
        self.thumbnail_handler = thumbnail_handler

    async def start(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """هندلر دستور /start"""
        user = update.effective_user

        welcome_text = (
            f"سلام {user.first_name} عزیز! 👋\n\n"
            "به فروشگاه دیجیتال ما خوش آمدید.\n"
            "برای مشاهده محصولات از منوی زیر استفاده کنید."
        )

        await update.message.reply_text(
            welcome_text,
            reply_markup=self.keyboards.main_menu()
        )

    async def show_main_menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """بازگشت به منوی اصلی"""
        query = update.callback_query
        await query.answer()
        await query.edit_message_text(
            "🏠 منوی اصلی:",
            reply_markup=self.keyboards.main_menu()
        )

    async def show_categories(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """نمایش دسته‌بندی‌های اصلی"""
        query = update.callback_query
        if query:
            await query.answer()

        categories = await self.category_service.get_root_categories()

        if not categories:
            await context.bot.send_message(
                chat_id=update.effective_chat.id,
                text=self.messages.NO_CATEGORIES,
                reply_markup=self.keyboards.main_menu()
            )
            return

        await self._send_category_level(update, context, categories)
        await context.bot.send_message(
            chat_id=update.effective_chat.id,
            text="🗂 دسته‌بندی‌های محصولات",
            reply_markup=self.keyboards.categories_navigation()
        )

    async def show_category(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """نمایش زیردسته‌های یک دسته‌بندی"""
        query = update.callback_query
        await query.answer()

        # دریافت شناسه دسته‌بندی از callback_data
        category_id = int(query.data.split('_')[1])
        category = await self.category_service.get_category(category_id)

        if not category:
            await query.edit_message_text(
                "❌ دسته‌بندی مورد نظر یافت نشد.",
                reply_markup=self.keyboards.main_menu()
            )
            return

        subcategories = await self.category_service.get_subcategories(category_id, active_only=True)
        await self._send_category_level(update, context, subcategories)
        await context.bot.send_message(
            chat_id=update.effective_chat.id,
            text=self.messages.category_level(category.name, len(subcategories)),
            reply_markup=self.keyboards.categories_navigation(category.parent_id)
        )

    async def _send_category_level(
        self,
        update: Update,
        context: ContextTypes.DEFAULT_TYPE,
        categories: List[Category]
    ):
        chat_id = update.effective_chat.id
        for category in categories:
            await self.thumbnail_handler.send_subcategory_thumbnail(context, chat_id, category)
