from fastapi import APIRouter

from activity_calendar.api.v1 import assets, health, participants


api_router = APIRouter()
api_router.include_router(participants.router, prefix="/participants", tags=["participants"])

asset_router = APIRouter()
asset_router.include_router(assets.router, prefix="/participants", tags=["assets"])

root_router = APIRouter()
root_router.include_router(health.router)
