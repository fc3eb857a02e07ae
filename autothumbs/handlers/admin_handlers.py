# autothumbs/handlers/admin_handlers.py
from telegram import Update
from telegram.ext import ContextTypes
from .base_handler import BaseHandler

class AdminHandler(BaseHandler):
    """هندلر دستورات ادمین"""

    async def admin_panel(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """نمایش پنل ادمین"""
        query = update.callback_query
        if query:
            await query.answer()

        if not await self.is_admin(update.effective_user.id):
            if query:
                await query.edit_message_text(self.messages.ACCESS_DENIED)
            else:
                await update.message.reply_text(self.messages.ACCESS_DENIED)
            return

        text = (
            "🔧 پنل مدیریت:\n\n"
            "از منوی زیر بخش مورد نظر را انتخاب کنید:"
        )
        if query:
            await query.edit_message_text(text, reply_markup=self.keyboards.admin_menu())
        else:
            await update.message.reply_text(text, reply_markup=self.keyboards.admin_menu())
