"""
Зеркало каталога: таблицы Supabase через PostgREST API.
"""

from typing import Any, Dict, List, Optional, Type

import httpx
from pydantic import BaseModel, ValidationError

from app.core.config import Settings
from app.core.errors import MirrorError
from app.schemas.category import CategoryResponse
from app.schemas.product import ProductResponse

# Строки зеркала должны проходить те же схемы, что и ответы API
ROW_SCHEMAS: Dict[str, Type[BaseModel]] = {
    "categories": CategoryResponse,
    "products": ProductResponse,
}


class SupabaseCatalogStore:
    """
    Любой сбой (сеть, таймаут, не-2xx, неожиданное тело ответа)
    поднимается как MirrorError, чтобы вызывающий откатился на SQLite.
    """

    name = "mirror"

    def __init__(self, client: httpx.Client):
        self.client = client

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "SupabaseCatalogStore":
        key = settings.SUPABASE_KEY or ""
        client = httpx.Client(
            base_url=f"{(settings.SUPABASE_URL or '').rstrip('/')}/rest/v1",
            headers={
                "apikey": key,
                "Authorization": f"Bearer {key}",
                "Accept": "application/json",
            },
            timeout=settings.SUPABASE_TIMEOUT,
            transport=transport,
        )
        return cls(client)

    def _request(
        self,
        method: str,
        table: str,
        params: Optional[Dict[str, str]] = None,
        json: Any = None,
        prefer: Optional[str] = None,
    ) -> Any:
        headers = {"Prefer": prefer} if prefer else None
        try:
            response = self.client.request(
                method, f"/{table}", params=params, json=json, headers=headers
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise MirrorError(f"{method} {table}: {exc}") from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise MirrorError(f"{method} {table}: invalid JSON in response") from exc

    def _rows(self, payload: Any, table: str) -> List[Dict[str, Any]]:
        if not isinstance(payload, list):
            raise MirrorError(f"{table}: expected a list of rows")
        schema = ROW_SCHEMAS[table]
        for row in payload:
            if not isinstance(row, dict):
                raise MirrorError(f"{table}: row is not an object")
            try:
                schema.model_validate(row)
            except ValidationError as exc:
                raise MirrorError(f"{table}: malformed row {row.get('id')!r}") from exc
        return payload

    def _first_row(self, payload: Any, table: str) -> Dict[str, Any]:
        rows = self._rows(payload, table)
        if not rows:
            raise MirrorError(f"{table}: insert returned no rows")
        return rows[0]

    # === Categories ===

    def list_categories(self) -> List[Dict[str, Any]]:
        payload = self._request("GET", "categories", params={"select": "*"})
        return self._rows(payload, "categories")

    def create_category(self, name: str) -> Dict[str, Any]:
        payload = self._request(
            "POST",
            "categories",
            json=[{"name": name}],
            prefer="return=representation",
        )
        return self._first_row(payload, "categories")

    def delete_category(self, category_id: int) -> None:
        self._request("DELETE", "categories", params={"id": f"eq.{category_id}"})

    # === Products ===

    def list_products(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"select": "*", "order": "id.desc"}
        if category:
            params["category"] = f"eq.{category}"
        payload = self._request("GET", "products", params=params)
        return self._rows(payload, "products")

    def get_product(self, product_id: int) -> Optional[Dict[str, Any]]:
        payload = self._request(
            "GET", "products", params={"select": "*", "id": f"eq.{product_id}"}
        )
        rows = self._rows(payload, "products")
        return rows[0] if rows else None

    def create_product(self, data: Dict[str, Any]) -> int:
        payload = self._request(
            "POST",
            "products",
            json=[data],
            prefer="return=representation",
        )
        row = self._first_row(payload, "products")
        if "id" not in row:
            raise MirrorError("products: inserted row has no id")
        return row["id"]

    def update_product(self, product_id: int, data: Dict[str, Any]) -> None:
        self._request(
            "PATCH", "products", params={"id": f"eq.{product_id}"}, json=data
        )

    def delete_product(self, product_id: int) -> None:
        self._request("DELETE", "products", params={"id": f"eq.{product_id}"})

    def close(self) -> None:
        self.client.close()
