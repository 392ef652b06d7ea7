from fastapi import APIRouter

from league.api.schedule import router as schedule_router
from league.api.leaderboard import router as leaderboard_router

api_router = APIRouter()

api_router.include_router(schedule_router)
api_router.include_router(leaderboard_router)
