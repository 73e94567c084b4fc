"""
FastAPI application entry point
Main application initialization
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from portfolio_api import config
from portfolio_api.database import init_db, close_db
from portfolio_api.middleware.cache import setup_cache_headers
from portfolio_api.middleware.cors import setup_cors
from portfolio_api.middleware.errors import setup_error_handling

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"

# Create FastAPI app
app = FastAPI(
    title="Portfolio CMS API",
    description="Generic resource API behind the portfolio site and its admin panel",
    version=VERSION,
    debug=config.DEBUG,
)

# Middleware added last runs first: CORS wraps cache headers, which wrap error handling
setup_error_handling(app)
setup_cache_headers(app)
setup_cors(app)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": <message>}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.on_event("startup")
async def startup_event():
    """Initialize database on startup"""
    logger.info(f"Starting application in {config.MODE} mode (mock db: {config.MOCK_DB})")
    await init_db()
    logger.info("Application started successfully")


@app.on_event("shutdown")
async def shutdown_event():
    """Close database connections on shutdown"""
    logger.info("Shutting down application")
    await close_db()
    logger.info("Application shut down successfully")


@app.get("/")
async def root():
    """Root endpoint - service info"""
    return JSONResponse({
        "message": "Portfolio CMS API",
        "version": VERSION,
        "mode": config.MODE,
        "status": "running"
    })


# Everything else, with or without the /api prefix
from portfolio_api.apps.resources.router import router as resources_router
app.include_router(resources_router, tags=["resources"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "portfolio_api.main:app",
        host="0.0.0.0",
        port=config.PORT,
        reload=config.DEBUG,
        log_level="debug" if config.DEBUG else "info"
    )
