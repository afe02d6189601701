"""Central API router aggregating all domain routers."""

from fastapi import APIRouter

from skillcircle.auth.router import router as auth_router
from skillcircle.exchange.router import router as exchange_router
from skillcircle.health.router import router as health_router
from skillcircle.profile.router import router as profile_router
from skillcircle.skill.router import router as skill_router
from skillcircle.user.router import router as user_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(user_router)
api_router.include_router(profile_router)
api_router.include_router(skill_router)
api_router.include_router(exchange_router)
