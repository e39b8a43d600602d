"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Router registration
3. Middleware configuration (audit, security headers, CORS)
4. Exception handlers (playground errors keep the {"error": ...} contract)
5. Startup/shutdown events

Run with: uvicorn ai_playground.api.main:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ai_playground import __version__
from ai_playground.core.audit import AuditMiddleware, SecurityHeadersMiddleware
from ai_playground.core.config import get_settings
from ai_playground.core.exceptions import PlaygroundException, ValidationError
from ai_playground.core.logging_config import get_logger, setup_logging
from ai_playground.api.routes import (
    catalog_router,
    chat_router,
    health_router,
    persona_router,
    places_router,
    website_router,
)


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level, log_to_file=settings.log_to_file)
logger = get_logger(__name__)

INVALID_REQUEST_MESSAGE = "リクエストの形式が正しくありません"
UNEXPECTED_ERROR_MESSAGE = "予期しないエラーが発生しました"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs which integrations are configured at startup; missing keys are
    reported per request rather than preventing startup.
    """
    logger.info(f"Starting {settings.app_name} {__version__} in {settings.app_env} mode")
    logger.info(f"OpenAI model: {settings.openai_model}")
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; AI products will return 500")
    if not settings.google_places_api_key:
        logger.warning("GOOGLE_PLACES_API_KEY is not set; place search will return 500")
    logger.info(f"Audit Logging: {settings.enable_audit_logging}")

    yield

    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title="AI Playground API",
    description="""
    Backend for the AI Playground demo catalog.

    ## Products

    - **Chat**: Japanese-speaking assistant (OpenAI)
    - **Persona generator**: three Japanese-market personas and a marketing strategy for each
    - **Place finder**: Google Places search, optionally with AI query rewriting
    - **Website analyzer**: n8n analysis workflow, structured into a scorecard
    - **Voice chat**: ElevenLabs widget configuration
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ============================================================
# Middleware Configuration (Order matters!)
# ============================================================

app.add_middleware(SecurityHeadersMiddleware)

if settings.enable_audit_logging:
    app.add_middleware(AuditMiddleware)
    logger.info("Audit logging middleware enabled")

if settings.is_development():
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.warning("CORS configured for development (all origins allowed)")
else:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )


# ============================================================
# Exception Handlers
# ============================================================

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle input validation errors."""
    logger.warning(f"Validation error on {request.url.path}: {exc.message} ({exc.details})")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(PlaygroundException)
async def playground_exception_handler(request: Request, exc: PlaygroundException):
    """Handle all custom playground exceptions."""
    logger.error(
        f"{exc.__class__.__name__} on {request.url.path}: {exc.message}"
        + (f" ({exc.details})" if exc.details else "")
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies (not JSON, wrong field types) are client errors."""
    logger.warning(f"Invalid request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={
            "error": INVALID_REQUEST_MESSAGE,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                }
                for e in exc.errors()
            ],
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions globally.

    Exception text is only included in development mode.
    """
    logger.exception(f"Unhandled exception: {exc}")

    content = {"error": UNEXPECTED_ERROR_MESSAGE}
    if settings.is_development():
        content["details"] = str(exc)

    return JSONResponse(status_code=500, content=content)


# ============================================================
# Routers
# ============================================================

app.include_router(health_router)
app.include_router(catalog_router)
app.include_router(chat_router)
app.include_router(persona_router)
app.include_router(places_router)
app.include_router(website_router)


@app.get("/", include_in_schema=False)
async def root():
    return {
        "message": "AI Playground API",
        "version": __version__,
        "documentation": "/docs",
        "health": "/health",
    }
