# autothumbs/utils/messages.py
from typing import Dict
from ..models.thumbnail import ImageSizePreset, ThumbnailSettings
from .formatters import format_image_size_label, format_toggle

SETTINGS_TITLE = "Auto Category Thumbnails Settings"

class Messages:
    ACCESS_DENIED = "⛔️ شما به این بخش دسترسی ندارید."
    NO_CATEGORIES = "در حال حاضر دسته‌بندی‌ای موجود نیست."

    @staticmethod
    def thumbnail_settings(
        settings: ThumbnailSettings,
        presets: Dict[str, ImageSizePreset]
    ) -> str:
        """متن بخش تنظیمات تصویر خودکار دسته‌بندی"""
        preset = presets.get(settings.image_size)
        size_label = format_image_size_label(preset) if preset else settings.image_size
        return (
            f"🖼 {SETTINGS_TITLE}\n\n"
            f"📐 اندازه تصویر: {size_label}\n"
            "اندازه تصویری که برای دسته‌بندی‌ها استفاده می‌شود.\n\n"
            f"📂 جستجو در زیردسته‌ها: {format_toggle(settings.recurse)}\n"
            "اگر فعال باشد، تصویر محصولات زیردسته‌ها هم بررسی می‌شود. "
            "در غیر این صورت فقط همان دسته‌بندی.\n\n"
            f"🎲 تصویر تصادفی: {format_toggle(settings.shuffle)}\n"
            "اگر فعال باشد، یکی از تصاویر موجود به صورت تصادفی انتخاب می‌شود. "
            "در غیر این صورت همیشه اولین تصویر."
        )

    @staticmethod
    def category_level(category_name: str, count: int) -> str:
        """عنوان فهرست زیردسته‌ها"""
        if count:
            return f"🗂 زیردسته‌های {category_name}: {count}"
        return f"📁 دسته {category_name} زیردسته‌ای ندارد."
