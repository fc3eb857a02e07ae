# autothumbs/utils/formatters.py
from ..models.thumbnail import ImageSizePreset

AUTO_LABEL = "auto"
CROPPED_LABEL = "cropped"

def format_dimension(value: int) -> str:
    """قالب‌بندی یک بعد تصویر"""
    return str(value) if value > 0 else AUTO_LABEL

def format_image_size_label(preset: ImageSizePreset) -> str:
    """برچسب اندازه تصویر، مثل shop_thumbnail (300 x 300, cropped)"""
    spec = f"{format_dimension(preset.width)} x {format_dimension(preset.height)}"
    if preset.crop:
        spec += f", {CROPPED_LABEL}"
    return f"{preset.name} ({spec})"

def format_toggle(enabled: bool) -> str:
    """نمایش وضعیت یک گزینه روشن/خاموش"""
    return "✅ فعال" if enabled else "❌ غیرفعال"
