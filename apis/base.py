from fastapi import APIRouter
from apis.v1.route_runner import router as runner_router

api_router = APIRouter()
api_router.include_router(runner_router, prefix="/api/runner", tags=["runner"])
