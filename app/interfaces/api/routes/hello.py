from fastapi import APIRouter

from app.application.use_cases.create_greeting import create_greeting
from app.config import get_settings

router = APIRouter()


@router.get("/")
async def root() -> dict[str, str]:
    greeting = create_greeting(get_settings().app_name)
    return {"message": greeting.message}
