import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .http_client import close_client
from .routers.validation import INTERNAL_ERROR_BODY, router as validation_router


# Load environment variables from .env file
load_dotenv()

settings = get_settings()

logging.basicConfig(
    level=settings.log_level if isinstance(logging.getLevelName(settings.log_level), int) else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):

    # Startup
    logger.info("Starting Business Idea Advisor API")
    logger.info("   Claude Key:  %s", "Configured" if settings.api_key else "Not set")
    logger.info("   Endpoint:    %s (model %s)", settings.api_url, settings.model)
    logger.info("   Max retries: %d", settings.max_retries)

    yield

    await close_client()
    logger.info("Shutting down Business Idea Advisor API")


app = FastAPI(
    title="Business Idea Advisor API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(validation_router)


@app.get(
    "/",
    summary="API Root",
    description="Welcome endpoint with API information",
    tags=["General"]
)
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Business Idea Advisor",
        "version": "0.1.0",
        "description": "LLM feedback on business ideas, split into structured sections",
        "docs": "/docs",
        "endpoints": {
            "validate": "POST /validate - Get feedback on a business idea",
            "health": "GET /health - Service health check"
        }
    }


@app.get(
    "/health",
    summary="Health Check",
    description="Check if the API server is running",
    tags=["General"]
)
async def health():
    """Global health check endpoint."""
    return {
        "status": "healthy",
        "service": "business-idea-advisor",
        "version": "0.1.0"
    }


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors."""
    logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)


def run():
    import uvicorn

    uvicorn.run(
        "advisor_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
