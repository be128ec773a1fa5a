from pydantic import BaseModel
from typing import Optional, Union


class ProductResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: int
    category: Optional[str] = None
    image_url: Optional[str] = None
    origin: Optional[str] = None

    class Config:
        from_attributes = True


class ProductWrite(BaseModel):
    """Тело POST/PUT: поля товара + пароль админа. PUT заменяет запись целиком"""
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Union[int, float, str]] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    origin: Optional[str] = None
    password: Optional[str] = None


class ProductCreated(BaseModel):
    id: int


class OrderLinkResponse(BaseModel):
    product_id: int
    url: str
