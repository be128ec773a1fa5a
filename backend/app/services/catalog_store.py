"""
Хранилища каталога: локальная SQLite, необязательное зеркало в Supabase
и обёртка, которая сначала идёт в зеркало, а при ошибке в SQLite.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from app.core.errors import MirrorError

logger = logging.getLogger(__name__)


class CatalogStore(Protocol):
    """Операции, которые API нужны от хранилища каталога"""

    name: str

    def list_categories(self) -> List[Dict[str, Any]]:
        ...

    def create_category(self, name: str) -> Dict[str, Any]:
        ...

    def delete_category(self, category_id: int) -> None:
        ...

    def list_products(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        ...

    def get_product(self, product_id: int) -> Optional[Dict[str, Any]]:
        ...

    def create_product(self, data: Dict[str, Any]) -> int:
        ...

    def update_product(self, product_id: int, data: Dict[str, Any]) -> None:
        ...

    def delete_product(self, product_id: int) -> None:
        ...

    def close(self) -> None:
        ...


@dataclass
class StoreResult:
    value: Any
    backend: str


class FallbackCatalogStore:
    """
    Каждая операция сначала выполняется в зеркале (если оно настроено),
    при MirrorError повторяется в основном хранилище.
    Хранилища не синхронизируются: запись после отката в зеркало не попадает.
    """

    def __init__(self, primary: CatalogStore, mirror: Optional[CatalogStore] = None):
        self.primary = primary
        self.mirror = mirror

    def _run(self, operation: str, *args: Any) -> StoreResult:
        if self.mirror is not None:
            try:
                value = getattr(self.mirror, operation)(*args)
                return StoreResult(value, self.mirror.name)
            except MirrorError as exc:
                logger.warning(
                    "Mirror %s failed, falling back to %s: %s",
                    operation,
                    self.primary.name,
                    exc,
                )
        value = getattr(self.primary, operation)(*args)
        return StoreResult(value, self.primary.name)

    def list_categories(self) -> StoreResult:
        return self._run("list_categories")

    def create_category(self, name: str) -> StoreResult:
        return self._run("create_category", name)

    def delete_category(self, category_id: int) -> StoreResult:
        return self._run("delete_category", category_id)

    def list_products(self, category: Optional[str] = None) -> StoreResult:
        return self._run("list_products", category)

    def get_product(self, product_id: int) -> StoreResult:
        return self._run("get_product", product_id)

    def create_product(self, data: Dict[str, Any]) -> StoreResult:
        return self._run("create_product", data)

    def update_product(self, product_id: int, data: Dict[str, Any]) -> StoreResult:
        return self._run("update_product", product_id, data)

    def delete_product(self, product_id: int) -> StoreResult:
        return self._run("delete_product", product_id)

    def close(self) -> None:
        if self.mirror is not None:
            self.mirror.close()
        self.primary.close()
