from fastapi import APIRouter

from pandas_logistics.api.v1.endpoints import cargo, platform, waitlist


api_router = APIRouter()

# Routers for each module
api_router.include_router(platform.router, tags=["platform"])
api_router.include_router(waitlist.router, tags=["waitlist"])
api_router.include_router(cargo.router, tags=["cargo"])
