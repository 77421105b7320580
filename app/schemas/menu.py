from pydantic import BaseModel, ConfigDict, Field


class MenuItemResponse(BaseModel):
    """Response schema for a single food of a day."""

    model_config = ConfigDict(from_attributes=True)

    description: str
    price: str = Field(..., description="Display price; may be empty")


class MenuResponse(BaseModel):
    """Response schema for one day's menu."""

    model_config = ConfigDict(from_attributes=True)

    date: str = Field(..., description="Date label as shown on the page")
    items: list[MenuItemResponse]


class DailyMenuResponse(BaseModel):
    """Response schema for the daily-menu endpoint."""

    city: str
    restaurant: str
    url: str = Field(..., description="Page the menu was read from")
    menus: list[MenuResponse] = Field(
        default_factory=list, description="One entry per day, in page order"
    )


class ErrorDetail(BaseModel):
    """Body of a failed extraction."""

    kind: str = Field(..., description="Failure kind, e.g. not_found or transport")
    message: str
