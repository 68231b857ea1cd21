import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from settings import get_settings
from trailmix.activities.models import (
    ActivityResponse,
    CategoryResponse,
    CreateActivityRequest,
    activity_to_response,
    category_to_response,
)
from trailmix.data.activities_repo import (
    VALID_BUDGET_LEVELS,
    create_activity,
    get_activity,
    init_app_db,
    list_activities,
    list_categories,
)
from trailmix.data.geo import GeoPoint
from trailmix.middleware import OptionalAPIKeyMiddleware, RequestLoggingMiddleware, get_valid_api_keys
from trailmix.monitoring import get_metrics, record_nearby_query
from trailmix.nearby.filters import BudgetMode, FilterSet, matches_budget, matches_category
from trailmix.nearby.service import find_nearby, paginate

settings = get_settings()
BACKEND_ROOT = Path(__file__).resolve().parent
APP_DB = BACKEND_ROOT / settings.app_db_path

# Structured logging: include module and level; handlers can add JSON later
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])

# Input validation bounds (public robustness)
LAT_MIN, LAT_MAX = -90.0, 90.0
LNG_MIN, LNG_MAX = -180.0, 180.0
NEARBY_LIMIT_MAX = 100


def _validate_lat_lng(lat: float, lng: float) -> None:
    if not (LAT_MIN <= lat <= LAT_MAX):
        raise HTTPException(status_code=400, detail=f"lat must be between {LAT_MIN} and {LAT_MAX}")
    if not (LNG_MIN <= lng <= LNG_MAX):
        raise HTTPException(status_code=400, detail=f"lng must be between {LNG_MIN} and {LNG_MAX}")


def _validate_budget_level(level: int) -> None:
    if level not in VALID_BUDGET_LEVELS:
        raise HTTPException(status_code=400, detail="Invalid budget level. Must be 1, 2, or 3.")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_app_db(APP_DB, seed=settings.seed_on_startup)
    logger.info("telemetry startup db=%s activities=%s", APP_DB, len(list_activities(APP_DB)))
    yield


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
def unhandled_exception_handler(request: Request, exc: Exception):
    """Return consistent JSON error for unhandled exceptions (500). Skip validation/HTTP errors."""
    from fastapi.exceptions import RequestValidationError
    if isinstance(exc, (HTTPException, RequestValidationError)):
        raise exc
    logger.exception("telemetry unhandled_exception path=%s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected error occurred. Please try again later."},
    )


# Order: last added = outermost. RequestLogging runs first, then rate limiting, then auth, then CORS.
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(
    OptionalAPIKeyMiddleware,
    api_key_required=settings.api_key_required,
    api_keys=get_valid_api_keys(settings.api_keys),
)
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(RequestLoggingMiddleware)


@app.get("/favicon.ico", include_in_schema=False)
@limiter.exempt
def favicon(request: Request):
    """Return 204 so browser favicon requests don't log 404."""
    return Response(status_code=204)


@app.get("/health")
@limiter.exempt
def health(request: Request):
    logger.info("telemetry route=health")
    return {"status": "ok"}


@app.get("/metrics")
@limiter.exempt
def metrics(request: Request):
    """Request counts by status class, nearby query counts, uptime."""
    return get_metrics()


# --- Categories ---


@app.get("/categories", response_model=list[CategoryResponse])
def get_categories(request: Request):
    return [category_to_response(c) for c in list_categories(APP_DB)]


# --- Activities ---


@app.get("/activities", response_model=list[ActivityResponse])
def get_activities(request: Request):
    """Full catalog in id order."""
    return [activity_to_response(a) for a in list_activities(APP_DB)]


@app.get("/activities/nearby", response_model=list[ActivityResponse])
def activities_nearby(
    request: Request,
    lat: float | None = None,
    lng: float | None = None,
    radius_miles: float | None = None,
    budget_level: int | None = None,
    budget_mode: BudgetMode | None = None,
    category: str = "",
    q: str = "",
    offset: int = 0,
    limit: int | None = None,
):
    """
    Activities within radius_miles of (lat, lng), nearest first, each with distanceInMiles.
    budget_level is a ceiling unless budget_mode=exact (default from BUDGET_FILTER_MODE).
    offset/limit select a page of the ordered result; limit is capped at 100.
    """
    if lat is None or lng is None:
        raise HTTPException(status_code=400, detail="lat and lng are required")
    _validate_lat_lng(lat, lng)
    radius = settings.default_nearby_radius_miles if radius_miles is None else radius_miles
    # NaN fails this comparison too
    if not radius >= 0:
        raise HTTPException(status_code=400, detail="radius_miles must be a non-negative number")
    max_radius = settings.max_nearby_radius_miles
    if max_radius is not None and radius > max_radius:
        raise HTTPException(status_code=400, detail=f"radius_miles must be at most {max_radius}")
    if budget_level is not None:
        _validate_budget_level(budget_level)
    if offset < 0:
        raise HTTPException(status_code=400, detail="offset must not be negative")
    if limit is not None:
        if limit < 1:
            raise HTTPException(status_code=400, detail="limit must be at least 1")
        limit = min(limit, NEARBY_LIMIT_MAX)

    filters = FilterSet(
        budget_level=budget_level,
        category=category.strip() or None,
        query=q.strip() or None,
        budget_mode=budget_mode or settings.budget_filter_mode,
    )
    logger.info(
        "telemetry route=activities_nearby radius_miles=%s budget_level=%s budget_mode=%s category=%s q=%s",
        radius,
        budget_level,
        filters.budget_mode.value,
        filters.category or "-",
        (filters.query or "-")[:50],
    )
    results = find_nearby(list_activities(APP_DB), GeoPoint(lat=lat, lng=lng), radius, filters)
    record_nearby_query(len(results))
    return [activity_to_response(n.activity, n.distance_miles) for n in paginate(results, offset, limit)]


@app.get("/activities/category/{category}", response_model=list[ActivityResponse])
def get_activities_by_category(request: Request, category: str):
    """Case-insensitive category match."""
    return [activity_to_response(a) for a in list_activities(APP_DB) if matches_category(a, category)]


@app.get("/activities/budget/{level}", response_model=list[ActivityResponse])
def get_activities_by_budget(request: Request, level: int):
    """Exact budget tier match (1 low, 2 medium, 3 high)."""
    _validate_budget_level(level)
    return [
        activity_to_response(a)
        for a in list_activities(APP_DB)
        if matches_budget(a, level, BudgetMode.EXACT)
    ]


@app.get("/activities/{activity_id}", response_model=ActivityResponse)
def get_activity_by_id(request: Request, activity_id: int):
    activity = get_activity(APP_DB, activity_id)
    if activity is None:
        raise HTTPException(status_code=404, detail="Activity not found")
    return activity_to_response(activity)


@app.post("/activities", response_model=ActivityResponse, status_code=201)
def post_activity(request: Request, body: CreateActivityRequest):
    """Add an activity to the catalog."""
    try:
        activity = create_activity(
            APP_DB,
            title=body.title,
            description=body.description,
            location=body.location,
            lat=body.latitude,
            lng=body.longitude,
            start_date=body.start_date,
            end_date=body.end_date,
            budget_level=body.budget_level,
            category=body.category,
            tags=body.tags,
            image_url=body.image_url,
            price=body.price,
            host_name=body.host_name,
            host_title=body.host_title,
            host_image_url=body.host_image_url,
            requirements=body.requirements,
            is_featured=body.is_featured,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    logger.info("telemetry route=create_activity activity_id=%s category=%s", activity.activity_id, activity.category)
    return activity_to_response(activity)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
