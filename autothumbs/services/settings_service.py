# autothumbs/services/settings_service.py
import logging
from typing import Dict, Any, Optional
from ..constants import SETTING_IMAGE_SIZE, SETTING_RECURSE, SETTING_SHUFFLE
from ..models.thumbnail import DEFAULT_IMAGE_SIZE, ThumbnailSettings

THUMBNAIL_DEFAULTS: Dict[str, Any] = {
    SETTING_RECURSE: True,
    SETTING_SHUFFLE: True,
    SETTING_IMAGE_SIZE: DEFAULT_IMAGE_SIZE,
}

class SettingsService:
    """سرویس مدیریت تنظیمات"""

    def __init__(self, db):
        self.db = db
        self.logger = logging.getLogger(__name__)

    async def get_setting(self, key: str) -> Optional[Any]:
        """دریافت یک تنظیم خاص"""
        async with self.db.pool.acquire() as conn:
            setting = await conn.fetchrow("""
                SELECT value, type
                FROM settings
                WHERE key = $1
            """, key)

            if setting:
                return self._convert_value(setting['value'], setting['type'])
            return None

    async def update_setting(self, key: str, value: Any) -> bool:
        """بروزرسانی تنظیمات"""
        value_type = self._get_value_type(value)
        value_str = self._serialize_value(value, value_type)

        async with self.db.pool.acquire() as conn:
            result = await conn.execute("""
                INSERT INTO settings (key, value, type)
                VALUES ($1, $2, $3)
                ON CONFLICT (key)
                DO UPDATE SET value = $2, type = $3
            """, key, value_str, value_type)

            return result != "INSERT 0 0"

    async def get_thumbnail_settings(self) -> ThumbnailSettings:
        """دریافت تنظیمات تصویر خودکار دسته‌بندی (بدون کش)"""
        return ThumbnailSettings.from_values(
            recurse=await self.get_setting(SETTING_RECURSE),
            shuffle=await self.get_setting(SETTING_SHUFFLE),
            image_size=await self.get_setting(SETTING_IMAGE_SIZE),
        )

    async def install_defaults(self) -> None:
        """مقداردهی اولیه تنظیمات در اولین نصب"""
        async with self.db.pool.acquire() as conn:
            for key, value in THUMBNAIL_DEFAULTS.items():
                value_type = self._get_value_type(value)
                result = await conn.execute("""
                    INSERT INTO settings (key, value, type)
                    VALUES ($1, $2, $3)
                    ON CONFLICT (key) DO NOTHING
                """, key, self._serialize_value(value, value_type), value_type)

                if result == "INSERT 0 1":
                    self.logger.info(f"Setting {key} initialized to {value!r}")

    @staticmethod
    def _get_value_type(value: Any) -> str:
        """تشخیص نوع مقدار"""
        if isinstance(value, bool):
            return 'boolean'
        return 'string'

    @staticmethod
    def _serialize_value(value: Any, type_: str) -> str:
        """تبدیل مقدار به رشته برای ذخیره"""
        if type_ == 'boolean':
            return 'true' if value else 'false'
        return str(value)

    @staticmethod
    def _convert_value(value: str, type_: str) -> Any:
        """تبدیل مقدار ذخیره شده به نوع مناسب"""
        if type_ == 'boolean':
            return value.lower() == 'true'
        return value
