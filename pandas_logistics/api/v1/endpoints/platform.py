"""
Platform endpoints: health, info, statistics, table listing and users.
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from pandas_logistics.api.dependencies import get_platform_service, get_settings
from pandas_logistics.core.config import Settings
from pandas_logistics.db.session import get_db
from pandas_logistics.infrastructure.exceptions import InfrastructureError
from pandas_logistics.infrastructure.response import error_response, public_error_message, success_response
from pandas_logistics.services import PlatformService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check(
        service: PlatformService = Depends(get_platform_service),
        settings: Settings = Depends(get_settings),
):
    """
    Health check

    Runs one trivial query. 200 with ``database: "connected"`` when it
    succeeds, 500 with ``database: "disconnected"`` otherwise.
    """
    try:
        return service.health()
    except InfrastructureError as e:
        logger.error(f"Health check error: {e}")
        return JSONResponse(
            status_code=500,
            content={
                "status": "error",
                "message": "Database connection failed",
                "database": "disconnected",
                "error": public_error_message(e, settings.is_production),
            },
        )


@router.get("/info")
def platform_info(service: PlatformService = Depends(get_platform_service)):
    """Static platform metadata"""
    return service.info()


@router.get("/stats")
def platform_stats(
        db: Session = Depends(get_db),
        settings: Settings = Depends(get_settings),
):
    """Row counts for users, agents, importers and suppliers"""
    try:
        statistics = PlatformService.statistics(db)
    except InfrastructureError as e:
        return JSONResponse(
            status_code=500,
            content=error_response(
                error="Failed to fetch statistics",
                message=public_error_message(e, settings.is_production),
            ),
        )
    return success_response(platform=settings.PROJECT_NAME, statistics=statistics)


@router.get("/test-db")
def test_database(
        service: PlatformService = Depends(get_platform_service),
        settings: Settings = Depends(get_settings),
):
    """List the tables visible to the configured connection"""
    try:
        tables = service.tables()
    except InfrastructureError as e:
        logger.error(f"Database test error: {e}")
        return JSONResponse(
            status_code=500,
            content=error_response(
                error="Database test failed",
                message=public_error_message(e, settings.is_production),
            ),
        )
    return success_response(
        message="Database is accessible!",
        total_tables=len(tables),
        tables=tables,
    )


@router.get("/users")
def list_users(
        db: Session = Depends(get_db),
        settings: Settings = Depends(get_settings),
):
    """Most recent users, newest first"""
    try:
        users = PlatformService.recent_users(db, limit=settings.USERS_LIST_LIMIT)
    except InfrastructureError as e:
        return JSONResponse(
            status_code=500,
            content=error_response(
                error="Failed to fetch users",
                message=public_error_message(e, settings.is_production),
            ),
        )
    return success_response(count=len(users), users=users)
