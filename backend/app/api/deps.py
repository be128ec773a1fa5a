import logging
from typing import Any, Optional, Type, TypeVar

import httpx
from fastapi import Request, Response
from pydantic import BaseModel, ValidationError
from sqlalchemy.engine import Engine

from app.core.config import Settings
from app.core.errors import AdminAuthError, CatalogValidationError
from app.core.security import verify_admin_password
from app.services.catalog_store import FallbackCatalogStore, StoreResult
from app.services.local_store import LocalCatalogStore
from app.services.supabase_store import SupabaseCatalogStore

logger = logging.getLogger(__name__)

BACKEND_HEADER = "X-Catalog-Backend"

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_catalog_store(
    settings: Settings,
    engine: Engine,
    transport: Optional[httpx.BaseTransport] = None,
) -> FallbackCatalogStore:
    """Зеркало подключается только если заданы и URL, и ключ Supabase"""
    mirror = None
    if settings.mirror_enabled:
        mirror = SupabaseCatalogStore.from_settings(settings, transport=transport)
        logger.info("Supabase mirror enabled: %s", settings.SUPABASE_URL)
    return FallbackCatalogStore(LocalCatalogStore(engine), mirror)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog(request: Request) -> FallbackCatalogStore:
    return request.app.state.catalog


def require_admin(
    password: Optional[str],
    request: Request,
    settings: Settings,
) -> None:
    if not verify_admin_password(password, settings.ADMIN_PASSWORD):
        logger.warning("Rejected admin password: %s %s", request.method, request.url.path)
        raise AdminAuthError()


def served_by(response: Response, result: StoreResult):
    """Отметить в ответе, какое хранилище обработало запрос"""
    response.headers[BACKEND_HEADER] = result.backend
    return result.value


def body_password(body: Any) -> Optional[str]:
    """Пароль из сырого тела запроса; тело может быть чем угодно"""
    if isinstance(body, dict):
        password = body.get("password")
        if isinstance(password, str):
            return password
    return None


def parse_body(model: Type[ModelT], body: Any) -> ModelT:
    """Валидация тела уже после проверки пароля: ошибки полей дают 400, а не 422"""
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise CatalogValidationError("Request body must be a JSON object")
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "body"
        raise CatalogValidationError(f"Invalid field '{field}': {error['msg']}")
