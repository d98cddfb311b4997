import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import models  # noqa: F401 - register tables with Base
from .config import ALLOWED_ORIGINS, SECURITY_HEADERS_ENABLED
from .database import Base, SessionLocal, engine
from .domain.admin.router import router as admin_router
from .domain.bookings.router import router as bookings_router
from .domain.scheduling.router import router as scheduling_router
from .domain.settings.router import router as settings_router
from .security_headers import SecurityHeadersMiddleware
from .seed import seed_defaults

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Keep client libraries quiet unless something goes wrong
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("passlib").setLevel(logging.ERROR)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("💈 Booking API starting")
    Base.metadata.create_all(bind=engine, checkfirst=True)

    db = SessionLocal()
    try:
        seed_defaults(db)
    finally:
        db.close()

    yield
    engine.dispose()
    logger.info("💈 Booking API stopped")


app = FastAPI(title="BarberShop Booking API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report invalid or missing booking/admin fields as 400 Bad Request"""
    logger.warning(f"Rejected payload on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"❌ {request.method} {request.url.path} failed: {e}")
        raise
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.0f}ms)")
    return response


if SECURITY_HEADERS_ENABLED:
    app.add_middleware(SecurityHeadersMiddleware, exclude_paths=["/health", "/docs", "/openapi.json"])
else:
    logger.warning("Security headers DISABLED - only use in development!")

logger.info(f"CORS origins: {', '.join(ALLOWED_ORIGINS)}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

# Routes
app.include_router(admin_router)
app.include_router(settings_router)
app.include_router(scheduling_router)
app.include_router(bookings_router)


@app.get("/")
def root():
    return {"message": "BarberShop Booking API is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}
