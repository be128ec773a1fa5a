from fastapi import APIRouter, Body, Depends, Query, Request, Response
from typing import Any, Dict, List, Optional

from app.api.deps import (
    body_password, get_catalog, get_settings, parse_body, require_admin, served_by
)
from app.core.config import Settings
from app.core.errors import (
    CatalogValidationError,
    OrderLinkUnavailableError,
    ProductNotFoundError,
)
from app.schemas.auth import SuccessResponse
from app.schemas.product import (
    ProductResponse, ProductWrite, ProductCreated, OrderLinkResponse
)
from app.services.catalog_store import FallbackCatalogStore
from app.services.ordering import build_order_link
from app.services.pricing import coerce_price

router = APIRouter(prefix="/api/products", tags=["products"])

ALL_CATEGORIES = "All"


def build_product_record(data: ProductWrite) -> Dict[str, Any]:
    """Запись для хранилища: все поля товара, отсутствующие как None"""
    if not data.name or not data.name.strip():
        raise CatalogValidationError("Product name is required")

    return {
        "name": data.name,
        "description": data.description,
        "price": coerce_price(data.price),
        "category": data.category,
        "image_url": data.image_url,
        "origin": data.origin,
    }


@router.get("", response_model=List[ProductResponse])
def list_products(
    response: Response,
    category: Optional[str] = Query(None, description="Exact category name, 'All' for every product"),
    catalog: FallbackCatalogStore = Depends(get_catalog)
):
    """Товары, новые первыми"""
    if category == ALL_CATEGORIES:
        category = None
    return served_by(response, catalog.list_products(category))


@router.post("", response_model=ProductCreated)
def create_product(
    request: Request,
    response: Response,
    body: Any = Body(None),
    settings: Settings = Depends(get_settings),
    catalog: FallbackCatalogStore = Depends(get_catalog)
):
    require_admin(body_password(body), request, settings)
    data = parse_body(ProductWrite, body)

    record = build_product_record(data)
    product_id = served_by(response, catalog.create_product(record))
    return ProductCreated(id=product_id)


@router.put("/{product_id}", response_model=SuccessResponse)
def update_product(
    product_id: int,
    request: Request,
    response: Response,
    body: Any = Body(None),
    settings: Settings = Depends(get_settings),
    catalog: FallbackCatalogStore = Depends(get_catalog)
):
    """Полная замена записи; несуществующий id не ошибка"""
    require_admin(body_password(body), request, settings)
    data = parse_body(ProductWrite, body)

    record = build_product_record(data)
    served_by(response, catalog.update_product(product_id, record))
    return SuccessResponse()


@router.delete("/{product_id}", response_model=SuccessResponse)
def delete_product(
    product_id: int,
    request: Request,
    response: Response,
    body: Any = Body(None),
    settings: Settings = Depends(get_settings),
    catalog: FallbackCatalogStore = Depends(get_catalog)
):
    require_admin(body_password(body), request, settings)
    served_by(response, catalog.delete_product(product_id))
    return SuccessResponse()


@router.get("/{product_id}/order-link", response_model=OrderLinkResponse)
def product_order_link(
    product_id: int,
    response: Response,
    settings: Settings = Depends(get_settings),
    catalog: FallbackCatalogStore = Depends(get_catalog)
):
    """Ссылка на WhatsApp с готовым сообщением о товаре"""
    if not settings.WHATSAPP_PHONE:
        raise OrderLinkUnavailableError()

    product = served_by(response, catalog.get_product(product_id))
    if not product:
        raise ProductNotFoundError()

    return OrderLinkResponse(
        product_id=product_id,
        url=build_order_link(product["name"], settings.WHATSAPP_PHONE)
    )
