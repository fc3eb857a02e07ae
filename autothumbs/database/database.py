# autothumbs/database/database.py
import asyncpg
import logging
from pathlib import Path
from typing import Optional
from ..config import Config

# Columns of the shop catalog read by the thumbnail lookup
REQUIRED_COLUMNS = {
    "categories": ("category_id", "name", "parent_id", "thumbnail_url", "is_active"),
    "products": ("product_id", "category_id", "image_url", "is_active", "created_at"),
}

class Database:
    """کلاس مدیریت ارتباط با دیتابیس"""

    def __init__(self, database_url: Optional[str] = None):
        self.database_url = database_url or Config.DATABASE_URL
        self.pool: Optional[asyncpg.Pool] = None
        self.logger = logging.getLogger(__name__)

    async def connect(self):
        """برقراری ارتباط با دیتابیس"""
        try:
            self.pool = await asyncpg.create_pool(
                self.database_url,
                min_size=2,
                max_size=10
            )

            # کاتالوگ متعلق به فروشگاه است و باید از قبل وجود داشته باشد
            await self.check_catalog_schema()

            # اجرای migrations
            await self._run_migrations()

            self.logger.info("اتصال به دیتابیس برقرار شد")
        except Exception as e:
            self.logger.error(f"خطا در اتصال به دیتابیس: {e}")
            raise

    async def close(self):
        """قطع ارتباط با دیتابیس"""
        if self.pool:
            await self.pool.close()
            self.logger.info("اتصال به دیتابیس قطع شد")

    async def check_catalog_schema(self):
        """بررسی وجود جداول و ستون‌های کاتالوگ فروشگاه؛ بدون آن‌ها ربات اجرا نمی‌شود"""
        async with self.pool.acquire() as conn:
            rows = await conn.fetch("""
                SELECT table_name, column_name
                FROM information_schema.columns
                WHERE table_schema = current_schema()
                  AND table_name = ANY($1::text[])
            """, list(REQUIRED_COLUMNS))

        existing = {(row['table_name'], row['column_name']) for row in rows}
        missing = [
            f"{table}.{column}"
            for table, columns in REQUIRED_COLUMNS.items()
            for column in columns
            if (table, column) not in existing
        ]
        if missing:
            self.logger.error(f"ستون‌های کاتالوگ یافت نشد: {', '.join(missing)}")
            raise RuntimeError(
                f"Auto category thumbnails requires the shop catalog columns: {', '.join(missing)}"
            )

    async def _run_migrations(self):
        """اجرای migrations"""
        try:
            migrations_path = Path(__file__).parent / "migrations"

            async with self.pool.acquire() as conn:
                # ایجاد جدول migrations
                await conn.execute("""
                    CREATE TABLE IF NOT EXISTS migrations (
                        id SERIAL PRIMARY KEY,
                        name VARCHAR(255) NOT NULL,
                        applied_at TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP
                    )
                """)

                # خواندن و اجرای فایل‌های migration
                for migration_file in sorted(migrations_path.glob("*.sql")):
                    migration_name = migration_file.name

                    # بررسی اجرا نشدن قبلی
                    is_applied = await conn.fetchval(
                        "SELECT COUNT(*) FROM migrations WHERE name = $1",
                        migration_name
                    )

                    if not is_applied:
                        async with conn.transaction():
                            await conn.execute(migration_file.read_text())

                            # ثبت اجرای migration
                            await conn.execute(
                                "INSERT INTO migrations (name) VALUES ($1)",
                                migration_name
                            )

                        self.logger.info(f"Migration {migration_name} اجرا شد")

        except Exception as e:
            self.logger.error(f"خطا در اجرای migrations: {e}")
            raise
