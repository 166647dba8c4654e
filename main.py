"""
FastAPI Application Entry Point

Integrates:
  - Solve endpoint (provider fallback chain)
  - Health checks
  - Middleware for logging & error handling

Run: uvicorn main:app --reload --host 0.0.0.0 --port 3000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware

from api.routes import router as solve_router
from config import Config
from infra import bootstrap_infrastructure, InfraBootstrap

# Setup logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
# httpx logs every request URL at INFO; Wolfram's appid rides in the query
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

APP_NAME = "Math Solver API"
APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    # Startup
    logger.info("=" * 60)
    logger.info(f"{APP_NAME} starting up...")
    logger.info(f"Environment: {Config.ENVIRONMENT}")
    bootstrap = bootstrap_infrastructure()
    logger.info(f"Providers: {bootstrap!r}")
    if not Config.validate():
        logger.warning("No provider credentials set; every solve will fail until one is configured")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info(f"{APP_NAME} shutting down...")


# Create FastAPI app
app = FastAPI(
    title=APP_NAME,
    description="Solves math questions through a provider fallback chain",
    version=APP_VERSION,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# Middleware for logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.debug(f"{request.method} {request.url.path}")
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"Request error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )


# Include routers
app.include_router(solve_router)


@app.get("/test", response_class=PlainTextResponse)
async def reachability_test():
    """Plain-text endpoint used by the frontend to check the backend is up."""
    return "✅ Backend is reachable!"


# Health check endpoints
@app.get("/health/live")
async def health_live():
    """Live health check (Kubernetes liveness check)."""
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready():
    """
    Readiness health check (Kubernetes readiness check).

    Ready when at least one provider in the chain has a credential.
    Does NOT call the providers.
    """
    providers = InfraBootstrap.get_instance().config.credentials_status()
    if any(providers.values()):
        return {"status": "ready", "providers": providers}
    return JSONResponse(
        status_code=503,
        content={"status": "not_ready", "providers": providers},
    )


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "status": "running",
        "endpoints": {
            "solve": "POST /api/solve",
            "test": "GET /test",
            "health_live": "GET /health/live",
            "health_ready": "GET /health/ready",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=Config.HOST, port=Config.PORT)
