# autothumbs/handlers/base_handler.py
from ..config import Config
from ..utils.keyboards import Keyboards
from ..utils.messages import Messages

class BaseHandler:
    """کلاس پایه برای هندلرها"""
    def __init__(self, db):
        self.db = db
        self.keyboards = Keyboards()
        self.messages = Messages()

    async def is_admin(self, user_id: int) -> bool:
        """بررسی دسترسی ادمین"""
        return user_id in Config.ADMIN_IDS
