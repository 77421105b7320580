"""Menu model and the narrowed schema of the site's preloaded state."""

from pydantic import BaseModel, ConfigDict, Field


class MenuItem(BaseModel):
    """A single food offered on a given day.

    ``price`` is display text straight from the page and is sometimes
    empty; do not expect it to parse as a number.
    """

    model_config = ConfigDict(frozen=True)

    description: str
    price: str


class Menu(BaseModel):
    """Daily menu of a restaurant for one day."""

    model_config = ConfigDict(frozen=True)

    date: str
    items: tuple[MenuItem, ...] = ()


# --- Preloaded state ----------------------------------------------------------
#
# Only the keys below are read; anything else in the state is ignored.
# Missing keys or wrong value types fail validation.


class _StateModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class DishRecord(_StateModel):
    name: str
    display_price: str = Field(alias="displayPrice")


class DayBlock(_StateModel):
    """One calendar day of the menu before normalization."""

    time_heading: str = Field(alias="timeHeading")
    dishes: tuple[DishRecord, ...]


class Sections(_StateModel):
    daily_menu: tuple[DayBlock, ...] = Field(alias="SECTION_DAILY_MENU")


class RestaurantState(_StateModel):
    sections: Sections


class Pages(_StateModel):
    # Keyed by an opaque restaurant id; insertion order follows the source.
    restaurant: dict[str, RestaurantState]


class PreloadedState(_StateModel):
    """Root of ``window.__PRELOADED_STATE__``."""

    pages: Pages
