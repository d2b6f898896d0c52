from fastapi import (
    FastAPI,
    Request,
    Depends,
    HTTPException,
    Response,
)
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from functools import lru_cache
from threading import Lock
import logging

from mealgrid.domain.Recipe import Recipe
from mealgrid.domain.errors import MealPlannerError
from mealgrid.events import calendar_observer
from mealgrid.infra.Grid_Store import GridStore, JsonGridStore
from mealgrid.infra.Plan_Repository import PlanRepository
from mealgrid.infra.paths import GRID_FILE, TEMPLATES_DIR
from mealgrid.infra.pdf_utils import generate_pdf_for_calendar
from mealgrid.logic.calendar.layout import build_calendar
from mealgrid.logic.planning.pipeline import generate_meal_plan, project_store, update_meal, update_side
from mealgrid.logic.sides.picker import list_sides
from mealgrid.utilities.config import DEBUG
from mealgrid.utilities.constants import CATEGORIES, DAYS, MEAL_TYPE_COLORS, MEAL_TYPES, WEEKS
from mealgrid.utilities.validators import MealUpdateInput, RecipeInput, SideUpdateInput

# Logging
logger = logging.getLogger("mealgrid_app")

# Every request that reads or writes the grid holds this lock
_grid_lock = Lock()

# Initialize FastAPI app
app = FastAPI(title="Four Week Meal Planner", debug=DEBUG)

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@lru_cache(maxsize=1)
def get_store() -> GridStore:
    """Grid store backing the app (overridden in tests)."""
    return JsonGridStore(GRID_FILE)


@app.on_event("startup")
def _startup_calendar_observer():
    """Keep the Calendar sheet derived from the meal sheets while the app runs."""
    calendar_observer.start()
    logger.info("Calendar observer started")


@app.exception_handler(MealPlannerError)
async def _meal_planner_error(request: Request, exc: MealPlannerError):
    return JSONResponse(status_code=400, content={"error": exc.message})


def _calendar(store: GridStore):
    with _grid_lock:
        entries = project_store(store)
    return entries, build_calendar(entries)


# -------------------- Command --------------------
@app.post("/generate")
def generate(store: GridStore = Depends(get_store)):
    """Generate Meal Plan: catalog -> assignments -> meal sheets -> calendar."""
    with _grid_lock:
        try:
            result = generate_meal_plan(store)
        except MealPlannerError as e:
            logger.warning(f"Meal plan not generated: {e.message}")
            raise
    return {
        "status": "success",
        "message": "Weekly meal plans generated successfully!",
        "plan": result.plan.to_dict(),
        "sides": result.sides,
        "skipped_rows": [issue.message for issue in result.catalog.rejected],
        "calendar": [week.to_dict() for week in result.calendar],
    }


# -------------------- API: Recipes --------------------
@app.get("/api/recipes")
def api_recipes(store: GridStore = Depends(get_store)):
    with _grid_lock:
        catalog = PlanRepository(store).recipes.load_catalog()
    return {
        "count": len(catalog),
        "categories": CATEGORIES,
        "recipes": [r.to_dict() for r in catalog],
        "rejected": [issue.message for issue in catalog.rejected],
    }


@app.post("/api/recipes")
def api_add_recipe(payload: RecipeInput, store: GridStore = Depends(get_store)):
    recipe = Recipe(**payload.model_dump())
    with _grid_lock:
        row = PlanRepository(store).recipes.add_recipe(recipe)
    return {"status": "success", "row": row, "recipe": recipe.to_dict()}


@app.get("/api/sides")
def api_sides(store: GridStore = Depends(get_store)):
    with _grid_lock:
        catalog = PlanRepository(store).recipes.load_catalog()
    sides = list_sides(catalog)
    return {"enabled": bool(sides), "sides": sides}


# -------------------- API: Plan --------------------
@app.get("/api/plan/{meal_type}")
def api_plan(meal_type: str, store: GridStore = Depends(get_store)):
    if meal_type not in MEAL_TYPES:
        raise HTTPException(status_code=404, detail="Unknown meal type")
    plans = PlanRepository(store)
    with _grid_lock:
        meals = plans.read_assignments([meal_type]).get(meal_type, [[""] * len(DAYS) for _ in range(WEEKS)])
        sides = plans.read_side_selections([meal_type])
    return {
        "meal_type": meal_type,
        "color": MEAL_TYPE_COLORS[meal_type],
        "days": list(DAYS),
        "weeks": [
            {
                "week": w,
                "meals": meals[w],
                "sides": [sides.get((w, d, meal_type), "") for d in range(len(DAYS))],
            }
            for w in range(WEEKS)
        ],
    }


@app.post("/api/plan/meal")
def api_update_meal(payload: MealUpdateInput, store: GridStore = Depends(get_store)):
    with _grid_lock:
        update_meal(store, payload.meal_type, payload.week, payload.day, payload.recipe_name)
    return {"success": True}


@app.post("/api/plan/side")
def api_update_side(payload: SideUpdateInput, store: GridStore = Depends(get_store)):
    with _grid_lock:
        update_side(store, payload.meal_type, payload.week, payload.day, payload.side_name)
    return {"success": True}


# -------------------- Calendar --------------------
@app.get("/api/calendar")
def api_calendar(store: GridStore = Depends(get_store)):
    entries, weeks = _calendar(store)
    return {
        "count": len(entries),
        "entries": [e.to_dict() for e in entries],
        "weeks": [w.to_dict() for w in weeks],
    }


@app.get("/calendar", response_class=HTMLResponse)
def calendar_page(request: Request, store: GridStore = Depends(get_store)):
    _, weeks = _calendar(store)
    return templates.TemplateResponse(
        request,
        "calendar.html",
        {"request": request, "weeks": weeks, "meal_types": MEAL_TYPES},
    )


@app.get("/export_pdf")
def export_pdf(store: GridStore = Depends(get_store)):
    _, weeks = _calendar(store)
    pdf_bytes = generate_pdf_for_calendar(weeks)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="meal_plan_calendar.pdf"'},
    )
