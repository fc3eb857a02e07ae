# autothumbs/utils/keyboards.py
from typing import Dict, Optional
from telegram import InlineKeyboardButton, InlineKeyboardMarkup
from ..constants import (
    CB_ADMIN_PANEL,
    CB_CATEGORY,
    CB_MAIN_MENU,
    CB_SHOW_CATEGORIES,
    CB_THUMB_SETTINGS,
    CB_THUMB_SIZE,
    CB_THUMB_TOGGLE,
)
from ..models.category import Category
from ..models.thumbnail import ImageSizePreset, ThumbnailSettings
from .formatters import format_image_size_label, format_toggle

class Keyboards:
    @staticmethod
    def main_menu() -> InlineKeyboardMarkup:
        """کیبورد منوی اصلی"""
        keyboard = [
            [InlineKeyboardButton("🛍 مشاهده محصولات", callback_data=CB_SHOW_CATEGORIES)],
        ]
        return InlineKeyboardMarkup(keyboard)

    @staticmethod
    def admin_menu() -> InlineKeyboardMarkup:
        """کیبورد منوی ادمین"""
        keyboard = [
            [InlineKeyboardButton("🖼 تصویر خودکار دسته‌بندی‌ها", callback_data=CB_THUMB_SETTINGS)],
            [InlineKeyboardButton("🏠 منوی اصلی", callback_data=CB_MAIN_MENU)]
        ]
        return InlineKeyboardMarkup(keyboard)

    @staticmethod
    def category_button(category: Category) -> InlineKeyboardMarkup:
        """دکمه زیر تصویر هر دسته‌بندی"""
        return InlineKeyboardMarkup([[InlineKeyboardButton(
            f"📁 {category.name}",
            callback_data=f"{CB_CATEGORY}{category.category_id}"
        )]])

    @staticmethod
    def categories_navigation(parent_id: Optional[int] = None) -> InlineKeyboardMarkup:
        """کیبورد بازگشت در مرور دسته‌بندی‌ها"""
        nav_buttons = []
        if parent_id:
            nav_buttons.append(InlineKeyboardButton("⬅️ بازگشت", callback_data=f"{CB_CATEGORY}{parent_id}"))
        else:
            nav_buttons.append(InlineKeyboardButton("⬅️ بازگشت", callback_data=CB_SHOW_CATEGORIES))
        nav_buttons.append(InlineKeyboardButton("🏠 منوی اصلی", callback_data=CB_MAIN_MENU))
        return InlineKeyboardMarkup([nav_buttons])

    @staticmethod
    def thumbnail_settings_menu(
        settings: ThumbnailSettings,
        presets: Dict[str, ImageSizePreset]
    ) -> InlineKeyboardMarkup:
        """کیبورد تنظیمات تصویر خودکار دسته‌بندی"""
        keyboard = []
        for name, preset in presets.items():
            marker = "🔘" if name == settings.image_size else "⚪️"
            keyboard.append([InlineKeyboardButton(
                f"{marker} {format_image_size_label(preset)}",
                callback_data=f"{CB_THUMB_SIZE}{name}"
            )])

        keyboard.append([InlineKeyboardButton(
            f"📂 زیردسته‌ها: {format_toggle(settings.recurse)}",
            callback_data=f"{CB_THUMB_TOGGLE}recurse"
        )])
        keyboard.append([InlineKeyboardButton(
            f"🎲 تصویر تصادفی: {format_toggle(settings.shuffle)}",
            callback_data=f"{CB_THUMB_TOGGLE}shuffle"
        )])
        keyboard.append([InlineKeyboardButton("🔙 بازگشت", callback_data=CB_ADMIN_PANEL)])
        return InlineKeyboardMarkup(keyboard)
