from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from holiday_finder.core.config import settings
from holiday_finder.core.logging_config import get_logger, setup_logging
from holiday_finder.core.middleware import (
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from holiday_finder.routers import holidays

setup_logging(json_format=settings.LOG_JSON, level=settings.LOG_LEVEL)
logger = get_logger(__name__)


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    description="Public holidays by country and year, backed by Nager.Date",
    docs_url=f"{settings.API_V1_STR}/docs",
    openapi_url=f"{settings.API_V1_STR}/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["Content-Type"],
    max_age=3600,
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)


app.include_router(
    holidays.router,
    prefix=settings.API_V1_STR,
)
app.include_router(holidays.page_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for monitoring"""
    return {"status": "healthy", "service": settings.PROJECT_NAME}


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """
    Global exception handler to prevent information leakage.
    Never expose internal errors to clients.
    """
    logger.error("Unhandled exception: %s", exc, exc_info=exc, extra={'path': request.url.path})

    return JSONResponse(
        status_code=500,
        content={
            "detail": "An internal error occurred. Please try again later.",
            "error_code": "INTERNAL_SERVER_ERROR"
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "holiday_finder.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True  # Disable in production
    )
