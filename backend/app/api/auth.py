import logging

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from typing import Any

from app.api.deps import body_password, get_settings
from app.core.config import Settings
from app.core.security import verify_admin_password
from app.schemas.auth import LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(body: Any = Body(None), settings: Settings = Depends(get_settings)):
    """
    Вход в админку по общему паролю.
    Токен статический и не проверяется на сервере: каждая запись
    всё равно передаёт пароль в теле запроса.
    """
    if not verify_admin_password(body_password(body), settings.ADMIN_PASSWORD):
        logger.warning("Rejected admin login")
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"success": False, "message": "Invalid password"}
        )

    return LoginResponse(success=True, token=settings.ADMIN_TOKEN)
