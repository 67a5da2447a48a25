import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import CORS_ALLOWED_ORIGINS, DASHBOARD_LIVE_FEED, LOG_LEVEL, SEED_ON_STARTUP
from .domain.bookings.feed import BookingFeed
from .domain.bookings.router import router as bookings_router
from .domain.calendar.router import router as calendar_router
from .domain.categories.router import router as categories_router
from .domain.scheduling.router import router as schedule_router
from .domain.service_catalog.router import router as services_router
from .domain.settings.router import router as settings_router
from .domain.staff.router import router as staff_router
from .i18n import get_language, translate
from .routes.dashboard import router as dashboard_router
from .seed import seed_collections
from .store import DocumentNotFound, DocumentStore, StoreError

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("google.auth").setLevel(logging.WARNING)
logging.getLogger("urllib3").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    owns_store = getattr(app.state, "store", None) is None
    if owns_store:
        app.state.store = DocumentStore.from_firebase()
    store = app.state.store

    if SEED_ON_STARTUP:
        try:
            seed_collections(store)
        except StoreError as e:
            logger.error(f"❌ Startup seed failed, continuing without sample data: {e}")

    feed = BookingFeed(store)
    if DASHBOARD_LIVE_FEED:
        try:
            feed.start()
        except StoreError as e:
            logger.warning(f"⚠️ Live booking feed unavailable, dashboard will read directly: {e}")
    app.state.booking_feed = feed

    yield

    logger.info("Application shutting down...")
    feed.stop()
    if owns_store:
        store.close()
        app.state.store = None


app = FastAPI(title="Booking Admin API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    detail = [{"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]} for e in exc.errors()]
    return JSONResponse(status_code=422, content={"detail": detail})


@app.exception_handler(DocumentNotFound)
async def document_not_found_handler(request: Request, exc: DocumentNotFound):
    return JSONResponse(
        status_code=404,
        content={"detail": translate("errors.notFound", get_language(request)), "severity": "error"},
    )


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error(f"{request.method} {request.url.path} - Store error: {exc}")
    return JSONResponse(
        status_code=503,
        content={"detail": translate("errors.storeUnavailable", get_language(request)), "severity": "error"},
    )


# Log CORS configuration for debugging
logger.info(f"CORS allowed origins: {CORS_ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

# Routes
app.include_router(dashboard_router)
app.include_router(categories_router)
app.include_router(services_router)
app.include_router(staff_router)
app.include_router(schedule_router)
app.include_router(bookings_router)
app.include_router(settings_router)
app.include_router(calendar_router)

PAGES = [
    ("dashboard", "/dashboard"),
    ("categories", "/categories"),
    ("services", "/services"),
    ("professionals", "/staff"),
    ("bookings", "/bookings"),
    ("schedule", "/staff/{employee_id}/schedule"),
    ("calendar", "/calendar"),
    ("settings", "/settings/widget"),
]


@app.get("/")
def root(lang: str = Depends(get_language)):
    """Named pages of the admin; ``schedule`` has no list of its own and lives under each employee"""
    return {
        "message": "Booking Admin API is running",
        "pages": [
            {
                "name": name,
                "path": path,
                "label": translate(f"navigation.{name}", lang),
                "placeholder": name == "schedule",
            }
            for name, path in PAGES
        ],
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
