from typing import Optional


class CatalogError(Exception):
    """Ошибка, которая отдаётся клиенту как {"error": message}"""
    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AdminAuthError(CatalogError):
    status_code = 401
    default_message = "Invalid password"


class CatalogValidationError(CatalogError):
    status_code = 400
    default_message = "Invalid request"


class DuplicateCategoryError(CatalogValidationError):
    default_message = "Category already exists"


class ProductNotFoundError(CatalogError):
    status_code = 404
    default_message = "Product not found"


class OrderLinkUnavailableError(CatalogError):
    status_code = 503
    default_message = "WhatsApp ordering is not configured"


class MirrorError(Exception):
    """Зеркало (Supabase) недоступно или ответило ошибкой"""
