"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from description_studio import __version__
from description_studio.api.dependencies import get_settings
from description_studio.api.endpoints.improvements import improvements_api
from description_studio.api.endpoints.products import products_api
from description_studio.integrations.errors import RequestError, UpstreamError
from description_studio.utils.settings_loader import AppSettings, load_settings

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

# Initialize FastAPI app
app = FastAPI(
    title="Description Studio API",
    description="Rewrite Shopify product descriptions with OpenAI, one by one or in bulk",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # the static page may be served from another origin (see /api/config)
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# ERROR HANDLERS
# ============================================================================
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    message = "; ".join(parts) or "Invalid request"
    logger.warning("Rejected malformed request to %s: %s", request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(RequestError)
async def request_error_handler(request: Request, exc: RequestError):
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    logger.error(f"Upstream error on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=500, content={"error": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": str(exc) or type(exc).__name__})


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/api/config", tags=["Config"])
async def get_config(settings: AppSettings = Depends(get_settings)):
    """Runtime configuration for the browser client."""
    return {"apiBaseUrl": settings.api_base_url}


@app.get("/api/health", tags=["Health"])
async def health_check(settings: AppSettings = Depends(get_settings)):
    """Report which external services have credentials configured."""
    return {
        "status": "ok",
        "shopifyConfigured": settings.shopify_configured,
        "openaiConfigured": settings.openai_configured,
    }


app.include_router(products_api, prefix="/api")
app.include_router(improvements_api, prefix="/api")

# The browser client; mounted last so /api routes take precedence.
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================
@app.on_event("startup")
async def startup_event():
    """Log which integrations are configured (never the secrets themselves)."""
    settings = load_settings()
    logger.info("Starting Description Studio API on http://localhost:%s", settings.port)
    logger.info("Shopify store: %s", settings.shopify_store_url or "NOT CONFIGURED")
    if not settings.shopify_access_token:
        logger.warning("SHOPIFY_ACCESS_TOKEN is not set; catalog calls will fail")
    logger.info("OpenAI: %s", "CONFIGURED" if settings.openai_configured else "NOT CONFIGURED")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down Description Studio API...")


def run() -> None:
    """Console entry point: serve the API and the browser client with uvicorn."""
    import uvicorn

    settings = load_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
