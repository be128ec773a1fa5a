from .auth import LoginResponse, SuccessResponse
from .category import CategoryResponse, CategoryCreate
from .product import ProductResponse, ProductWrite, ProductCreated, OrderLinkResponse

__all__ = [
    "LoginResponse", "SuccessResponse",
    "CategoryResponse", "CategoryCreate",
    "ProductResponse", "ProductWrite", "ProductCreated", "OrderLinkResponse",
]
