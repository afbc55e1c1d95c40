from fastapi import Depends, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import sys
import time
import traceback
from typing import Callable, Optional

from pandas_logistics.api.dependencies import get_platform_service
from pandas_logistics.api.v1.api import api_router
from pandas_logistics.api.web import router as web_router
from pandas_logistics.core.config import Settings, settings as default_settings
from pandas_logistics.db.base import Database
from pandas_logistics.infrastructure.response import error_response, public_error_message
from pandas_logistics.services import PlatformService
from pandas_logistics.services.core.platform_service import available_endpoints

logging.getLogger('watchfiles').setLevel(logging.ERROR)
logging.getLogger('watchfiles.main').setLevel(logging.ERROR)

logging.basicConfig(
    level=default_settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def endpoint_not_found(request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content=error_response(
            error="Endpoint not found",
            message=f"Cannot {request.method} {request.url.path}",
            available_endpoints=available_endpoints(),
            hint="Visit / for API documentation",
        ),
    )


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the application

    Args:
        settings: configuration, the environment-derived settings by default
        database: database handle, built from ``settings`` when omitted

    Returns:
        FastAPI: the configured application
    """
    settings = settings or default_settings
    database = database or Database.from_settings(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.TAGLINE,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next: Callable) -> Response:
        """Log method, path, status and latency of every request"""
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # unknown paths and unsupported methods are reported the same way
        if exc.status_code in (404, 405):
            return endpoint_not_found(request)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(error=str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=error_response(error="Invalid request", message=str(exc.errors())),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Server error on {request.method} {request.url.path}: {exc}")
        logger.error(traceback.format_exc())
        return JSONResponse(
            status_code=500,
            content=error_response(
                error="Internal server error",
                message=public_error_message(exc, settings.is_production),
            ),
        )

    app.include_router(api_router, prefix=settings.API_PREFIX)
    app.include_router(web_router)

    @app.get("/")
    def root(service: PlatformService = Depends(get_platform_service)):
        """API welcome"""
        return service.welcome()

    @app.on_event("startup")
    def startup_db_client():
        """
        Create missing tables when the application starts
        """
        logger.info(f"{settings.PROJECT_NAME} API starting ({settings.NODE_ENV})")
        if not settings.CREATE_TABLES:
            logger.info("Automatic table creation disabled")
            return
        try:
            database.create_tables()
            logger.info("Database initialised")
        except Exception as e:
            logger.error(f"Database initialisation failed: {e}")
            logger.error(traceback.format_exc())
            logger.warning("Application will keep starting, database features may be unavailable")

    @app.on_event("shutdown")
    def shutdown_db_client():
        logger.info("Shutting down, closing database pool...")
        database.dispose()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("pandas_logistics.main:app", host=default_settings.HOST, port=default_settings.PORT, reload=True)
