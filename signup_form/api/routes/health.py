from fastapi import APIRouter

from signup_form.core.config import settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/ping")
async def ping() -> dict[str, str]:
    return {"status": "ok", "env": settings.app_env}
