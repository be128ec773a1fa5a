from fastapi import APIRouter, Body, Depends, Request, Response
from typing import Any, List

from app.api.deps import (
    body_password, get_catalog, get_settings, parse_body, require_admin, served_by
)
from app.core.config import Settings
from app.core.errors import CatalogValidationError
from app.schemas.auth import SuccessResponse
from app.schemas.category import CategoryResponse, CategoryCreate
from app.services.catalog_store import FallbackCatalogStore

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse])
def list_categories(
    response: Response,
    catalog: FallbackCatalogStore = Depends(get_catalog)
):
    """Все категории в порядке добавления"""
    return served_by(response, catalog.list_categories())


@router.post("")
def create_category(
    request: Request,
    response: Response,
    body: Any = Body(None),
    settings: Settings = Depends(get_settings),
    catalog: FallbackCatalogStore = Depends(get_catalog)
):
    # Зеркало возвращает созданную строку, SQLite только {"id": ...}
    require_admin(body_password(body), request, settings)
    data = parse_body(CategoryCreate, body)

    if not data.name or not data.name.strip():
        raise CatalogValidationError("Category name is required")

    return served_by(response, catalog.create_category(data.name))


@router.delete("/{category_id}", response_model=SuccessResponse)
def delete_category(
    category_id: int,
    request: Request,
    response: Response,
    body: Any = Body(None),
    settings: Settings = Depends(get_settings),
    catalog: FallbackCatalogStore = Depends(get_catalog)
):
    """Удаление без проверки существования; товары с этой категорией остаются"""
    require_admin(body_password(body), request, settings)
    served_by(response, catalog.delete_category(category_id))
    return SuccessResponse()
