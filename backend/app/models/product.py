from sqlmodel import SQLModel, Field
from typing import Optional


class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: Optional[str] = None

    # В минимальных единицах валюты
    price: int

    # Просто строка, не внешний ключ: удаление категории товары не трогает
    category: Optional[str] = None
    # URL или data:-ссылка с base64
    image_url: Optional[str] = None
    origin: Optional[str] = None
