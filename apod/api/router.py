from fastapi import APIRouter

from apod.api.routes import router as apod_router

router = APIRouter()
router.include_router(apod_router)
