from decimal import Decimal, InvalidOperation
from typing import Any

from app.core.errors import CatalogValidationError


# Диапазон INTEGER в SQLite (знаковое 64-битное)
MIN_PRICE = -2 ** 63
MAX_PRICE = 2 ** 63 - 1


def coerce_price(value: Any) -> int:
    """
    Цена из формы приходит строкой или числом.
    Приводим к целому (минимальные единицы валюты), дробные значения отклоняем.
    """
    if value is None or isinstance(value, bool):
        raise CatalogValidationError("Price is required")

    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise CatalogValidationError("Price must be a whole number")

    if not amount.is_finite():
        raise CatalogValidationError("Price must be a whole number")
    # Сравнение до int(): "1e999999999" не разворачиваем в огромное число
    if amount < MIN_PRICE or amount > MAX_PRICE:
        raise CatalogValidationError("Price is out of range")
    if amount != amount.to_integral_value():
        raise CatalogValidationError("Price must be a whole number")

    return int(amount)
