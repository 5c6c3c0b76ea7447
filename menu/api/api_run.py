from fastapi import (
    FastAPI,
    Request,
    Query,
    HTTPException,
)
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from datetime import datetime
from typing import Optional
import logging

from menu.domain.Ingredient import PriceUnit
from menu.domain.PriceConfig import PriceConfig
from menu.infra.Catalog_Repository import load_catalog, find_ingredient
from menu.infra.Draft_Repository import DraftRepository
from menu.logic.catalog.filtering import filter_ingredients, list_categories
from menu.logic.pricing.calculator import calculate_total_price, calculate_total_nutrition
from menu.utilities.config import STATIC_DIR, TEMPLATES_DIR
from menu.utilities.constants import (
    ALL_CATEGORIES, QUANTITY_MIN, QUANTITY_MAX,
    WEIGHT_STEP, PRICE_STEP, SAVE_LOG_MESSAGE
)
from menu.utilities.validators import MenuItemDetailsInput, PriceConfigChangeInput, NutritionQuery
from menu.events.event_helpers import publish_menu_item_saved, publish_selection_changed
from menu.events.console_observers import start as start_event_observers, get_events

# Routers
from menu.api.routes import ingredients

# Logging
logger = logging.getLogger("menu_app")

# Initialize FastAPI app
app = FastAPI(title="Menu Item Builder")

# Include routers
app.include_router(ingredients.router)

# Static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@app.on_event("startup")
def _startup_event_observers():
    """Register event bus subscribers when the app starts."""
    start_event_observers()
    logger.info("Event observers for menu items started")


def _ts() -> int:
    """Cache-busting timestamp for static assets."""
    return int(datetime.now().timestamp())


# -------------------- UI PAGE --------------------
@app.get("/", response_class=HTMLResponse)
def main_page(request: Request,
              category: str = Query(default=ALL_CATEGORIES),
              search: str = Query(default="")):
    catalog = load_catalog()
    filtered = filter_ingredients(catalog, category, search)
    repo = DraftRepository()
    with repo.edit() as draft:
        summary = draft.summary()
        selected = {ing.name for ing in catalog if draft.is_selected(ing)}
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "ingredients": filtered,
            "selected": selected,
            "categories": [ALL_CATEGORIES] + list_categories(catalog),
            "filter": category,
            "search": search,
            "summary": summary,
            "price_units": list(PriceUnit),
            "quantity_min": QUANTITY_MIN,
            "quantity_max": QUANTITY_MAX,
            "weight_step": WEIGHT_STEP,
            "price_step": PRICE_STEP,
            "time": _ts(),
        }
    )


# -------------------- API: Menu item draft --------------------
@app.get('/api/menu-item')
def api_menu_item():
    """Return the draft with its derived total price and nutrition."""
    return DraftRepository().get_summary()


@app.put('/api/menu-item/details')
def api_update_details(payload: MenuItemDetailsInput):
    with DraftRepository().edit() as draft:
        draft.set_details(payload.name, payload.description, payload.category)
        return draft.summary()


@app.post('/api/menu-item/ingredients/{name}/toggle')
def api_toggle_ingredient(name: str):
    ingredient = find_ingredient(name)
    if ingredient is None:
        raise HTTPException(status_code=404, detail="Ingredient not found")
    with DraftRepository().edit() as draft:
        selected = draft.toggle_ingredient(ingredient)
        summary = draft.summary()
    publish_selection_changed(ingredient, selected, len(summary["ingredients"]))
    return {"ingredient": ingredient.name, "selected": selected, "item": summary}


@app.put('/api/menu-item/price-config')
def api_change_price_config(payload: PriceConfigChangeInput):
    """Apply one price form change; unknown keys and units are ignored."""
    with DraftRepository().edit() as draft:
        applied = draft.apply_price_change(payload.key, payload.value)
        return {"applied": applied, "item": draft.summary()}


@app.post('/api/menu-item/save')
def api_save_menu_item():
    """Log the menu item. Nothing is persisted."""
    summary = DraftRepository().get_summary()
    logger.info(SAVE_LOG_MESSAGE)
    notified = publish_menu_item_saved(summary)
    return {"saved": True, "notified": notified, "item": summary}


@app.post('/api/menu-item/reset')
def api_reset_menu_item():
    return DraftRepository().reset()


# -------------------- API: Stateless calculators --------------------
@app.get('/api/price/total')
def api_price_total(unit: str = Query(default=PriceUnit.POUND.value),
                    adjusted_price: str = Query(default="0"),
                    quantity: str = Query(default=str(QUANTITY_MIN)),
                    weight: str = Query(default="0")):
    """Total price for an ad-hoc configuration; non-numeric values count as zero."""
    config = PriceConfig.from_dict({
        "price_unit": unit,
        "base_price": adjusted_price,
        "adjusted_price": adjusted_price,
        "quantity": quantity,
        "weight": weight,
    })
    return {"config": config.to_dict(), "total_price": calculate_total_price(config)}


@app.post('/api/nutrition')
def api_nutrition(payload: NutritionQuery):
    """Nutrition total for the named ingredients; names not in the catalog are ignored."""
    config = PriceConfig.from_dict({"price_unit": payload.unit, "weight": payload.weight})
    found = [ing for ing in (find_ingredient(n) for n in dict.fromkeys(payload.names)) if ing is not None]
    nutrition = calculate_total_nutrition(config, found)
    return {
        "ingredients": [ing.name for ing in found],
        "nutrition": nutrition.to_dict(),
        "nutrition_display": nutrition.display(),
    }


# -------------------- API: Events (polled by frontend) --------------------
@app.get('/api/events')
def api_events(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value")
):
    """
    Return recent menu item events (saves, selection changes).

    Client polling strategy:
        1. First call without 'since' to load current backlog.
        2. Store 'next_cursor' from response.
        3. Subsequent polls: /api/events?since=<next_cursor>
    """
    return get_events(since)
