from app.schemas.menu import (
    DailyMenuResponse,
    ErrorDetail,
    MenuItemResponse,
    MenuResponse,
)

__all__ = ["DailyMenuResponse", "ErrorDetail", "MenuItemResponse", "MenuResponse"]
