# autothumbs/constants.py
"""Setting keys and callback data shared by the handlers"""

SETTINGS_PREFIX = "auto_category_thumbnails"

# Setting keys
SETTING_RECURSE = f"{SETTINGS_PREFIX}_recurse"
SETTING_SHUFFLE = f"{SETTINGS_PREFIX}_shuffle"
SETTING_IMAGE_SIZE = f"{SETTINGS_PREFIX}_category_size"

# Callback data
CB_MAIN_MENU = "main_menu"
CB_SHOW_CATEGORIES = "show_categories"
CB_CATEGORY = "category_"
CB_ADMIN_PANEL = "admin_panel"
CB_THUMB_SETTINGS = "thumb_settings"
CB_THUMB_SIZE = "thumb_size_"
CB_THUMB_TOGGLE = "thumb_toggle_"

TOGGLE_SETTINGS = {
    "recurse": SETTING_RECURSE,
    "shuffle": SETTING_SHUFFLE,
}
