"""
API Dependencies

Provides dependency injection for settings, services and the tracking
provider. Services are built per request around the request's session.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from pandas_logistics.core.config import Settings
from pandas_logistics.db.base import Database
from pandas_logistics.db.session import get_db, get_database
from pandas_logistics.infrastructure.tracking import ITrackingProvider, TrackingProviderFactory
from pandas_logistics.services import CargoService, PlatformService, WaitlistService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_platform_service(
    settings: Settings = Depends(get_settings),
    database: Database = Depends(get_database),
) -> PlatformService:
    return PlatformService(settings=settings, database=database)


def get_cargo_service(db: Session = Depends(get_db)) -> CargoService:
    return CargoService(db=db)


def get_waitlist_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> WaitlistService:
    return WaitlistService(db=db, persist=settings.WAITLIST_PERSIST)


def get_tracking_provider(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ITrackingProvider:
    """
    Tracking provider selected by TRACKING_BACKEND

    Raises:
        ValueError: unknown backend name
    """
    return TrackingProviderFactory.create(settings.TRACKING_BACKEND, db=db)
