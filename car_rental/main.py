from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time
import logging
from car_rental.api.api_router import api_router
from car_rental.core.config import settings
from car_rental.core.exceptions import VehicleServiceError
from car_rental.core.redis_client import redis_client

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events"""
    # Startup
    logger.info(f"Starting {settings.PROJECT_NAME}...")

    if settings.CACHE_ENABLED:
        try:
            await redis_client.initialize()
        except Exception as e:
            logger.error(f"Failed to initialize Redis, continuing without cache: {e}")
            # Continue without cache - graceful degradation

    logger.info(f"{settings.PROJECT_NAME} started successfully")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}...")

    if redis_client.is_ready():
        try:
            await redis_client.close()
        except Exception as e:
            logger.error(f"Error closing Redis: {e}")

    logger.info(f"{settings.PROJECT_NAME} shutdown complete")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Backend API for vendor vehicle management and vehicle browsing.",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure this properly for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.4f}s")
    return response

# Rejected vehicle operations carry their own status code
@app.exception_handler(VehicleServiceError)
async def vehicle_service_exception_handler(request: Request, exc: VehicleServiceError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message}
    )

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )

app.include_router(api_router, prefix="/api/v1")

@app.get("/", tags=["Root"])
async def read_root():
    """A simple health check endpoint."""
    return {"status": "ok", "message": f"Welcome to {settings.PROJECT_NAME}!", "version": API_VERSION}

@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "service": settings.PROJECT_NAME,
        "version": API_VERSION,
        "cache": redis_client.is_ready(),
    }
