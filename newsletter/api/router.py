from fastapi import APIRouter

from newsletter.api.routers import subscriptions

api_router = APIRouter()

api_router.include_router(subscriptions.router)
